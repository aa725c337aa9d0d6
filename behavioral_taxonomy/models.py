"""Record models for the taxonomy datasets.

Every record is a frozen pydantic model with tuple sequences, so nothing
handed out by the accessors can be mutated. Field names are snake_case in
Python and camelCase on disk; both spellings validate. Keys the models do not
declare are kept as extra fields.

Only the shape of a record is checked. Scores outside their documented ranges
and labels outside the known enums load as-is: a known label becomes its enum
member, an unknown one stays a plain string.
"""

import enum
from typing import Annotated, Any, Optional, Union

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class LoopOrigin(str, enum.Enum):
    GENETIC = "GENETIC"
    BEHAVIORAL = "BEHAVIORAL"
    NARRATIVE = "NARRATIVE"
    DIGITAL = "DIGITAL"
    ENVIRONMENTAL = "ENVIRONMENTAL"


class LoopModality(str, enum.Enum):
    VISUAL_STATIC = "VISUAL_STATIC"
    VISUAL_DYNAMIC = "VISUAL_DYNAMIC"
    AUDITORY = "AUDITORY"
    HAPTIC = "HAPTIC"
    OLFACTORY = "OLFACTORY"
    META = "META"
    PROXEMIC = "PROXEMIC"


class LoopMutability(str, enum.Enum):
    IMMUTABLE = "IMMUTABLE"
    STUBBORN = "STUBBORN"
    FLUID = "FLUID"
    VOLATILE = "VOLATILE"


class LoopValence(str, enum.Enum):
    ATTRACTION = "ATTRACTION"
    REPULSION = "REPULSION"
    DOMINANCE = "DOMINANCE"
    SUBMISSION = "SUBMISSION"
    TRUST = "TRUST"
    DECEPTION = "DECEPTION"
    DISRUPTION = "DISRUPTION"


EMOTION_LEVELS: tuple[str, ...] = ("primary", "secondary", "tertiary")


class _Record(BaseModel):
    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
        extra="allow",
    )


def enum_value(value: Any) -> Any:
    """Plain value of an enum member; anything else is returned unchanged."""
    return value.value if isinstance(value, enum.Enum) else value


# -- Behavioral loops -------------------------------------------------------


class LoopLogic(_Record):
    """Causal chain: given (trigger condition) -> when (event) -> then (behavior) -> result (outcome)."""

    given: str
    when: str
    then: str
    result: str


_Valence = Annotated[Union[LoopValence, str], Field(union_mode="left_to_right")]


class LoopTaxonomy(_Record):
    origin: Union[LoopOrigin, str] = Field(union_mode="left_to_right")
    modality: Union[LoopModality, str] = Field(union_mode="left_to_right")
    # Either a label or a 0-1 score
    mutability: Union[LoopMutability, float, str] = Field(union_mode="left_to_right")
    valences: tuple[_Valence, ...] = ()


class LoopOperator(_Record):
    name: str
    mechanism: str


class LoopVeracity(_Record):
    objective_grounding: float
    social_consensus: float
    recursive_amplification: float
    friction_index: float


class LoopIntervention(_Record):
    # 1-10 by convention
    difficulty: float
    interdict: Optional[str] = None
    minimize: Optional[str] = None
    recognize: Optional[str] = None
    leverage: Optional[str] = None


class LoopMeta(_Record):
    tags: tuple[str, ...] = ()
    related_archetypes: Optional[tuple[str, ...]] = None
    academic_fields: Optional[tuple[str, ...]] = None


class BehavioralLoop(_Record):
    id: int
    name: str
    logic: LoopLogic
    taxonomy: LoopTaxonomy
    operator: LoopOperator
    veracity: LoopVeracity
    intervention: LoopIntervention
    meta: LoopMeta


class BehavioralCategory(_Record):
    id: str
    category_number: int
    name: str
    description: str
    loops: tuple[BehavioralLoop, ...] = ()


class BehavioralLoopsMetadata(_Record):
    title: str
    version: str
    description: str
    total_categories: int
    total_loops: int
    generated_at: str
    interventions_added: int
    updated_at: str


class BehavioralLoopsData(_Record):
    metadata: BehavioralLoopsMetadata
    categories: tuple[BehavioralCategory, ...] = ()


# -- Lexicons ---------------------------------------------------------------


class Emotion(_Record):
    id: str
    name: str
    description: str
    level: str
    valence: str
    arousal: str
    ekman_category: Optional[str] = None
    related_emotions: Optional[tuple[str, ...]] = None


class CognitiveBias(_Record):
    id: str
    name: str
    definition: str
    category: str
    examples: Optional[tuple[str, ...]] = None
    related_biases: Optional[tuple[str, ...]] = None


class PersonalityTrait(_Record):
    id: str
    name: str
    definition: str
    dimension: Optional[str] = None
    opposing_trait: Optional[str] = None
