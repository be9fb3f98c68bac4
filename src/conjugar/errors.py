from __future__ import annotations

from typing import Optional, Sequence


class ConjugationError(Exception):
    """Base class for every error raised by conjugar."""


class MissingArgumentError(ConjugationError):
    def __init__(self) -> None:
        super().__init__("¿Qué verbo?")


class DataFormatError(ConjugationError):
    """The conjugation dataset could not be parsed or does not fit the schema."""


class VerbNotFoundError(ConjugationError):
    def __init__(self, infinitive: str, message: Optional[str] = None) -> None:
        self.infinitive = infinitive
        super().__init__(message or f"¿Cómo? No conozco el verbo '{infinitive}'.")


class MoodNotFoundError(VerbNotFoundError):
    """The verb exists but has no records in the requested mood."""

    def __init__(self, infinitive: str, mood: str, available: Sequence[str]) -> None:
        self.mood = mood
        self.available = list(available)
        super().__init__(
            infinitive,
            f"¿Cómo? '{infinitive}' no tiene formas en el modo '{mood}'. "
            f"Modos disponibles: {', '.join(self.available) or '-'}",
        )
