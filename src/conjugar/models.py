from __future__ import annotations

from dataclasses import dataclass
from typing import List, Tuple

TENSE_HEADER = "tense"
PERSON_HEADERS: Tuple[str, ...] = (
    "yo",
    "tú",
    "él/ella/Ud.",
    "nosotros",
    "vosotros",
    "ellos/ellas/Uds.",
)
COLUMN_HEADERS: Tuple[str, ...] = (TENSE_HEADER,) + PERSON_HEADERS


@dataclass(frozen=True)
class VerbForms:
    form1s: str = ""
    form2s: str = ""
    form3s: str = ""
    form1p: str = ""
    form2p: str = ""
    form3p: str = ""

    def as_list(self) -> List[str]:
        """Forms in person/number order: yo, tú, él, nosotros, vosotros, ellos."""
        return [
            self.form1s,
            self.form2s,
            self.form3s,
            self.form1p,
            self.form2p,
            self.form3p,
        ]


@dataclass(frozen=True)
class Verb:
    """One conjugation record: a single mood and tense of one infinitive."""

    infinitive: str
    infinitive_english: str
    verb_english: str
    mood: str
    tense: str
    forms: VerbForms


@dataclass(frozen=True)
class TableRow:
    tense: str
    forms: VerbForms

    @classmethod
    def from_verb(cls, verb: Verb) -> TableRow:
        return cls(tense=verb.tense, forms=verb.forms)

    def cells(self) -> List[str]:
        return [self.tense] + self.forms.as_list()
