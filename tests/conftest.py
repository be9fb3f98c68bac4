import csv
from pathlib import Path
from typing import List, Sequence

import pytest

HEADER = [
    "infinitive",
    "infinitive_english",
    "mood",
    "mood_english",
    "tense",
    "tense_english",
    "verb_english",
    "form_1s",
    "form_2s",
    "form_3s",
    "form_1p",
    "form_2p",
    "form_3p",
    "gerund",
    "gerund_english",
    "pastparticiple",
    "pastparticiple_english",
]

HABLAR_PRESENTE = ("hablo", "hablas", "habla", "hablamos", "habláis", "hablan")


def make_row(
    infinitive: str,
    mood: str,
    tense: str,
    forms: Sequence[str],
    *,
    infinitive_english: str = "to do",
    verb_english: str = "I do",
) -> List[str]:
    return [
        infinitive,
        infinitive_english,
        mood,
        "English mood",
        tense,
        "English tense",
        verb_english,
        *forms,
        "gerundio",
        "doing",
        "participio",
        "done",
    ]


@pytest.fixture
def write_dataset(tmp_path):
    def _write(rows, header=HEADER, name="verbs.csv") -> Path:
        path = tmp_path / name
        with path.open("w", newline="", encoding="utf-8") as handle:
            writer = csv.writer(handle, quoting=csv.QUOTE_ALL)
            writer.writerow(header)
            writer.writerows(rows)
        return path

    return _write


@pytest.fixture
def parse_grid():
    """Split a grid table into lists of stripped cells, header first."""

    def _parse(text: str) -> List[List[str]]:
        return [
            [cell.strip() for cell in line[1:-1].split("|")]
            for line in text.splitlines()
            if line.startswith("|")
        ]

    return _parse
