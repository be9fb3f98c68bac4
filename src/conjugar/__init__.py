"""Spanish verb conjugation lookup over the Jehle verb database."""

from .errors import (
    ConjugationError,
    DataFormatError,
    MissingArgumentError,
    MoodNotFoundError,
    VerbNotFoundError,
)
from .grouping import group_by, index_by_infinitive, rows_for_mood
from .loader import load
from .models import COLUMN_HEADERS, TableRow, Verb, VerbForms
from .render import render

__version__ = "0.1.0"

__all__ = [
    "COLUMN_HEADERS",
    "ConjugationError",
    "DataFormatError",
    "MissingArgumentError",
    "MoodNotFoundError",
    "TableRow",
    "Verb",
    "VerbForms",
    "VerbNotFoundError",
    "group_by",
    "index_by_infinitive",
    "load",
    "render",
    "rows_for_mood",
]
