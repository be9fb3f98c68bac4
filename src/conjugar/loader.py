"""Load the bundled Jehle conjugation table into typed records."""
from __future__ import annotations

import logging
import warnings
from importlib import resources
from pathlib import Path
from typing import IO, List, Optional, Sequence, Tuple, Union

import pandas as pd

from .errors import DataFormatError
from .models import Verb, VerbForms

LOGGER = logging.getLogger(__name__)

DATASET_NAME = "jehle_verb_database.csv"

# (column index, field name); columns 3 and 5 carry English mood/tense labels
# and are not read.
VERB_COLUMNS: Tuple[Tuple[int, str], ...] = (
    (0, "infinitive"),
    (1, "infinitive_english"),
    (2, "mood"),
    (4, "tense"),
    (6, "verb_english"),
)
FORM_COLUMNS: Tuple[Tuple[int, str], ...] = (
    (7, "form1s"),
    (8, "form2s"),
    (9, "form3s"),
    (10, "form1p"),
    (11, "form2p"),
    (12, "form3p"),
)
REQUIRED_COLUMNS = max(idx for idx, _ in VERB_COLUMNS + FORM_COLUMNS) + 1

Source = Union[str, Path, IO]


def read_frame(source: Optional[Source] = None) -> pd.DataFrame:
    """Parse the dataset into a string-only DataFrame; missing cells become ''."""
    try:
        if source is None:
            resource = resources.files(__package__) / "data" / DATASET_NAME
            LOGGER.debug("Reading bundled dataset %s", DATASET_NAME)
            with resource.open("rb") as handle:
                frame = _read_csv(handle)
        else:
            LOGGER.debug("Reading dataset from %s", source)
            frame = _read_csv(source)
    except (pd.errors.ParserError, pd.errors.EmptyDataError, UnicodeDecodeError) as exc:
        raise DataFormatError(f"Could not parse conjugation dataset: {exc}") from exc
    except OSError as exc:
        raise DataFormatError(f"Could not read conjugation dataset: {exc}") from exc
    if frame.shape[1] < REQUIRED_COLUMNS:
        raise DataFormatError(
            f"Conjugation dataset has {frame.shape[1]} columns; "
            f"at least {REQUIRED_COLUMNS} are required"
        )
    return frame.fillna("")


def _read_csv(source: Source) -> pd.DataFrame:
    with warnings.catch_warnings():
        # pandas drops fields past the header and warns; the schema never reads them.
        warnings.simplefilter("ignore", pd.errors.ParserWarning)
        return pd.read_csv(
            source,
            sep=",",
            quotechar='"',
            header=0,
            index_col=False,
            dtype=str,
            keep_default_na=False,
            encoding="utf-8",
        )


def record_from_row(row: Sequence[str]) -> Verb:
    fields = {name: row[idx] for idx, name in VERB_COLUMNS}
    forms = VerbForms(**{name: row[idx] for idx, name in FORM_COLUMNS})
    return Verb(forms=forms, **fields)


def load(source: Optional[Source] = None) -> List[Verb]:
    frame = read_frame(source)
    verbs = [record_from_row(row) for row in frame.itertuples(index=False, name=None)]
    LOGGER.info("Loaded %s conjugation records", len(verbs))
    return verbs
