from __future__ import annotations

import logging
from collections import defaultdict
from typing import Callable, Dict, Iterable, List, Sequence

from .errors import MoodNotFoundError, VerbNotFoundError
from .models import TableRow, Verb

LOGGER = logging.getLogger(__name__)


def group_by(records: Iterable[Verb], key: Callable[[Verb], str]) -> Dict[str, List[Verb]]:
    """Bucket records by ``key``, keeping input order inside each bucket.

    Callers must not rely on the order in which buckets are enumerated.
    """
    buckets: Dict[str, List[Verb]] = defaultdict(list)
    for record in records:
        buckets[key(record)].append(record)
    return dict(buckets)


def index_by_infinitive(records: Iterable[Verb]) -> Dict[str, List[Verb]]:
    index = group_by(records, lambda verb: verb.infinitive)
    LOGGER.debug("Indexed %s infinitives", len(index))
    return index


def conjugations_for(index: Dict[str, List[Verb]], infinitive: str) -> List[Verb]:
    conjugations = index.get(infinitive)
    if not conjugations:
        raise VerbNotFoundError(infinitive)
    return conjugations


def moods_for(conjugations: Iterable[Verb]) -> List[str]:
    seen: List[str] = []
    for verb in conjugations:
        if verb.mood not in seen:
            seen.append(verb.mood)
    return seen


def rows_for_mood(conjugations: Sequence[Verb], mood: str) -> List[TableRow]:
    """One table row per record of ``mood``, bucketed by tense."""
    in_mood = [verb for verb in conjugations if verb.mood == mood]
    if not in_mood:
        infinitive = conjugations[0].infinitive if conjugations else ""
        raise MoodNotFoundError(infinitive, mood, moods_for(conjugations))
    by_tense = group_by(in_mood, lambda verb: verb.tense)
    rows: List[TableRow] = []
    for tense, verbs in by_tense.items():
        if len(verbs) > 1:
            LOGGER.debug("Tense %s has %s records; emitting each", tense, len(verbs))
        rows.extend(TableRow.from_verb(verb) for verb in verbs)
    return rows
