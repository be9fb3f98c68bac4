"""Print the conjugation table of a Spanish verb from the bundled Jehle dataset."""
from __future__ import annotations

import argparse
import logging
import sys
import unicodedata
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Sequence

import ftfy

from .errors import DataFormatError, MissingArgumentError, VerbNotFoundError
from .grouping import conjugations_for, index_by_infinitive, rows_for_mood
from .loader import load
from .render import STYLES, render

LOGGER = logging.getLogger(__name__)
DEFAULT_MOOD = "Indicativo"
DEFAULT_STYLE = "grid"


@dataclass
class LookupConfig:
    verb: Optional[str]
    mood: str = DEFAULT_MOOD
    style: str = DEFAULT_STYLE
    dataset: Optional[Path] = None


def normalize_query(raw: str) -> str:
    text = ftfy.fix_text(raw)
    text = unicodedata.normalize("NFC", text)
    return text.strip()


def parse_args(argv: Optional[Sequence[str]] = None) -> LookupConfig:
    parser = argparse.ArgumentParser(prog="conjugar", description=__doc__)
    parser.add_argument(
        "verb",
        nargs="?",
        default=None,
        help="Infinitive to look up, e.g. hablar",
    )
    parser.add_argument(
        "--mood",
        type=str,
        default=DEFAULT_MOOD,
        help="Mood label as written in the dataset (Indicativo, Subjuntivo, ...)",
    )
    parser.add_argument(
        "--style",
        default=DEFAULT_STYLE,
        choices=list(STYLES),
        help="Table layout",
    )
    parser.add_argument(
        "--dataset",
        type=Path,
        default=None,
        help="Read conjugations from this CSV instead of the bundled one",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity",
    )
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level), format="%(levelname)s %(message)s"
    )
    return LookupConfig(
        verb=args.verb,
        mood=args.mood,
        style=args.style,
        dataset=args.dataset,
    )


def lookup(config: LookupConfig) -> str:
    if config.verb is None:
        raise MissingArgumentError()
    infinitive = normalize_query(config.verb)
    if infinitive != config.verb:
        LOGGER.debug("Normalized query %r to %r", config.verb, infinitive)
    index = index_by_infinitive(load(config.dataset))
    conjugations = conjugations_for(index, infinitive)
    rows = rows_for_mood(conjugations, config.mood)
    LOGGER.info("Rendering %s rows for %s (%s)", len(rows), infinitive, config.mood)
    return render(rows, config.style)


def run(argv: Optional[Sequence[str]] = None) -> int:
    config = parse_args(argv)
    try:
        table = lookup(config)
    except MissingArgumentError as exc:
        print(exc, file=sys.stderr)
        return 1
    except VerbNotFoundError as exc:
        raise SystemExit(str(exc)) from exc
    except DataFormatError as exc:
        raise SystemExit(f"Dataset error: {exc}") from exc
    sys.stdout.write(table)
    return 0


def main(argv: Optional[Sequence[str]] = None) -> None:
    sys.exit(run(argv))


if __name__ == "__main__":
    main()
