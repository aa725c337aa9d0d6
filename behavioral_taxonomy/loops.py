"""Behavioral loop accessors.

All functions are pure reads over the memoized loop dataset. A missing
category, id or match yields ``None`` or ``[]``.
"""

from behavioral_taxonomy._loader import LOOPS_DOCUMENT, load_view
from behavioral_taxonomy.models import (
    BehavioralCategory,
    BehavioralLoop,
    BehavioralLoopsData,
    LoopOrigin,
    LoopValence,
)


def get_behavioral_loops() -> BehavioralLoopsData:
    """Return the complete loop dataset: metadata plus categories, as stored."""
    return load_view("loops", LOOPS_DOCUMENT, BehavioralLoopsData.model_validate)


def get_categories() -> list[BehavioralCategory]:
    return list(get_behavioral_loops().categories)


def get_all_loops() -> list[BehavioralLoop]:
    """Flatten every category into one list, category order then loop order."""
    return [loop for category in get_behavioral_loops().categories for loop in category.loops]


def get_loops_by_category(category_id: str) -> list[BehavioralLoop]:
    for category in get_behavioral_loops().categories:
        if category.id == category_id:
            return list(category.loops)
    return []


def get_loop_by_id(loop_id: int) -> BehavioralLoop | None:
    for loop in get_all_loops():
        if loop.id == loop_id:
            return loop
    return None


def find_loops_by_tag(tag: str) -> list[BehavioralLoop]:
    """Loops with at least one tag containing ``tag``, ignoring case."""
    needle = tag.lower()
    return [
        loop for loop in get_all_loops()
        if any(needle in t.lower() for t in loop.meta.tags)
    ]


def find_loops_by_origin(origin: LoopOrigin | str) -> list[BehavioralLoop]:
    """Loops whose taxonomy origin equals ``origin`` exactly (case-sensitive)."""
    return [loop for loop in get_all_loops() if loop.taxonomy.origin == origin]


def find_loops_by_valence(valence: LoopValence | str) -> list[BehavioralLoop]:
    return [loop for loop in get_all_loops() if valence in loop.taxonomy.valences]


def search_loops(query: str) -> list[BehavioralLoop]:
    """Case-insensitive substring search over name, trigger condition and outcome."""
    needle = query.lower()
    return [
        loop for loop in get_all_loops()
        if needle in loop.name.lower()
        or needle in loop.logic.given.lower()
        or needle in loop.logic.result.lower()
    ]
