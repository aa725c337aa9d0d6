"""Emotion, cognitive bias and personality trait lexicons.

Each document has its own on-disk shape; the accessors here normalize all
three into flat lists of records:

- emotions.json: ``{"primary": [...], "secondary": [...], "tertiary": [...]}``
- biases.json: ``{"_metadata": {...}, "<id>": {"id": ..., ...}, ...}``
- traits.json: ``{"<id>": {...}, ...}`` with the id only present as the key
"""

from typing import Any

from behavioral_taxonomy._loader import (
    BIASES_DOCUMENT,
    EMOTIONS_DOCUMENT,
    TRAITS_DOCUMENT,
    load_view,
)
from behavioral_taxonomy.models import EMOTION_LEVELS, CognitiveBias, Emotion, PersonalityTrait


def _build_emotions(raw: dict[str, Any]) -> tuple[Emotion, ...]:
    # A level that is absent or null contributes nothing
    return tuple(
        Emotion.model_validate(entry)
        for level in EMOTION_LEVELS
        for entry in (raw.get(level) or [])
    )


def _build_biases(raw: dict[str, Any]) -> tuple[CognitiveBias, ...]:
    # Sentinel entries such as "_metadata" carry no id
    return tuple(
        CognitiveBias.model_validate(entry)
        for entry in raw.values()
        if isinstance(entry, dict) and entry.get("id")
    )


def _build_traits(raw: dict[str, Any]) -> tuple[PersonalityTrait, ...]:
    # The key fills in the id; an id stored on the entry itself is kept
    return tuple(
        PersonalityTrait.model_validate({"id": key, **entry})
        for key, entry in raw.items()
    )


def get_emotions() -> list[Emotion]:
    """All emotions, primary then secondary then tertiary."""
    return list(load_view("emotions", EMOTIONS_DOCUMENT, _build_emotions))


def get_emotions_by_level(level: str) -> list[Emotion]:
    return [e for e in get_emotions() if e.level == level]


def get_emotion_by_id(emotion_id: str) -> Emotion | None:
    return next((e for e in get_emotions() if e.id == emotion_id), None)


def get_biases() -> list[CognitiveBias]:
    """All cognitive biases, in document order, without metadata entries."""
    return list(load_view("biases", BIASES_DOCUMENT, _build_biases))


def get_bias_by_id(bias_id: str) -> CognitiveBias | None:
    return next((b for b in get_biases() if b.id == bias_id), None)


def get_traits() -> list[PersonalityTrait]:
    """All personality traits, each carrying its dictionary key as ``id``."""
    return list(load_view("traits", TRAITS_DOCUMENT, _build_traits))


def get_trait_by_id(trait_id: str) -> PersonalityTrait | None:
    return next((t for t in get_traits() if t.id == trait_id), None)
