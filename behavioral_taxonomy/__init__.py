"""A taxonomy of behavioral loops, emotions, cognitive biases and personality traits.

The datasets ship as JSON inside the package and are loaded lazily on first
access. Every accessor returns immutable records; "not found" is ``None`` or
an empty list.
"""

from behavioral_taxonomy._errors import DatasetError
from behavioral_taxonomy._loader import clear_cache
from behavioral_taxonomy.lexicon import (
    get_bias_by_id,
    get_biases,
    get_emotion_by_id,
    get_emotions,
    get_emotions_by_level,
    get_trait_by_id,
    get_traits,
)
from behavioral_taxonomy.loops import (
    find_loops_by_origin,
    find_loops_by_tag,
    find_loops_by_valence,
    get_all_loops,
    get_behavioral_loops,
    get_categories,
    get_loop_by_id,
    get_loops_by_category,
    search_loops,
)
from behavioral_taxonomy.models import (
    BehavioralCategory,
    BehavioralLoop,
    BehavioralLoopsData,
    BehavioralLoopsMetadata,
    CognitiveBias,
    Emotion,
    LoopIntervention,
    LoopLogic,
    LoopMeta,
    LoopModality,
    LoopMutability,
    LoopOperator,
    LoopOrigin,
    LoopTaxonomy,
    LoopValence,
    LoopVeracity,
    PersonalityTrait,
)
from behavioral_taxonomy.stats import TaxonomyStatistics, check_declared_totals, get_statistics

__all__ = [
    "BehavioralCategory",
    "BehavioralLoop",
    "BehavioralLoopsData",
    "BehavioralLoopsMetadata",
    "CognitiveBias",
    "DatasetError",
    "Emotion",
    "LoopIntervention",
    "LoopLogic",
    "LoopMeta",
    "LoopModality",
    "LoopMutability",
    "LoopOperator",
    "LoopOrigin",
    "LoopTaxonomy",
    "LoopValence",
    "LoopVeracity",
    "PersonalityTrait",
    "TaxonomyStatistics",
    "check_declared_totals",
    "clear_cache",
    "find_loops_by_origin",
    "find_loops_by_tag",
    "find_loops_by_valence",
    "get_all_loops",
    "get_behavioral_loops",
    "get_bias_by_id",
    "get_biases",
    "get_categories",
    "get_emotion_by_id",
    "get_emotions",
    "get_emotions_by_level",
    "get_loop_by_id",
    "get_loops_by_category",
    "get_statistics",
    "get_trait_by_id",
    "get_traits",
    "search_loops",
]
