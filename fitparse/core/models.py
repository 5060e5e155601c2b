"""Data models shared by the parser pipeline and its callers."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, Dict, Optional, Tuple, Union


class ActivityType(str, Enum):
    """Closed set of activity types a segment can be classified as."""

    NUTRITION = "nutrition"
    CARDIO = "cardio"
    STRENGTH = "strength"
    WEIGHT = "weight"
    SLEEP = "sleep"
    WATER = "water"
    MOOD = "mood"
    ENERGY = "energy"
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class WeightFields:
    value: float
    unit: str = "lbs"


@dataclass(frozen=True)
class FoodItem:
    name: str
    quantity: float = 1
    unit: str = "serving"


@dataclass(frozen=True)
class NutritionFields:
    items: Tuple[FoodItem, ...]
    meal_type: str = "snack"


@dataclass(frozen=True)
class CardioFields:
    activity_name: str
    distance: Optional[float] = None
    distance_unit: Optional[str] = None
    duration_minutes: Optional[float] = None
    pace: Optional[float] = None


@dataclass(frozen=True)
class StrengthSet:
    reps: Optional[int] = None
    weight: Optional[float] = None
    rpe: Optional[float] = None


@dataclass(frozen=True)
class StrengthFields:
    activity_name: str
    sets: Tuple[StrengthSet, ...] = ()
    weight_unit: str = "kg"
    duration_minutes: Optional[float] = None


@dataclass(frozen=True)
class SleepFields:
    hours: Optional[float] = None
    quality: Optional[str] = None


@dataclass(frozen=True)
class WaterFields:
    amount: float
    unit: str = "oz"


@dataclass(frozen=True)
class MoodFields:
    mood: str = "okay"
    notes: Optional[str] = None


@dataclass(frozen=True)
class EnergyFields:
    level: int
    notes: Optional[str] = None


@dataclass(frozen=True)
class UnknownFields:
    raw: str


ActivityFields = Union[
    WeightFields,
    NutritionFields,
    CardioFields,
    StrengthFields,
    SleepFields,
    WaterFields,
    MoodFields,
    EnergyFields,
    UnknownFields,
]

FIELDS_BY_TYPE = {
    ActivityType.WEIGHT: WeightFields,
    ActivityType.NUTRITION: NutritionFields,
    ActivityType.CARDIO: CardioFields,
    ActivityType.STRENGTH: StrengthFields,
    ActivityType.SLEEP: SleepFields,
    ActivityType.WATER: WaterFields,
    ActivityType.MOOD: MoodFields,
    ActivityType.ENERGY: EnergyFields,
    ActivityType.UNKNOWN: UnknownFields,
}


@dataclass(frozen=True)
class Extraction:
    """Fields pulled from a segment plus the confidence band of the rule that matched."""

    fields: ActivityFields
    band: str
    reasoning: Optional[str] = None


@dataclass(frozen=True)
class Classification:
    """Chosen activity type and how it was chosen.

    ``source`` is one of pattern, keyword, override, history, fallback,
    conflict or none.
    """

    type: ActivityType
    source: str
    reasoning: Optional[str] = None
    warnings: Tuple[str, ...] = ()


def _drop_none(value: Any) -> Any:
    if isinstance(value, dict):
        return {key: _drop_none(item) for key, item in value.items() if item is not None}
    if isinstance(value, (list, tuple)):
        return [_drop_none(item) for item in value]
    return value


def fields_to_dict(fields: ActivityFields) -> Dict[str, Any]:
    """Convert a fields dataclass to a JSON-safe dict without empty values."""
    return _drop_none(asdict(fields))


@dataclass(frozen=True)
class ParsedActivity:
    """Structured result for one parsed segment."""

    type: ActivityType
    fields: ActivityFields
    confidence: int
    raw_text: str
    timestamp: datetime
    reasoning: Optional[str] = None
    warnings: Tuple[str, ...] = field(default=())

    def __post_init__(self) -> None:
        expected = FIELDS_BY_TYPE[self.type]
        if not isinstance(self.fields, expected):
            raise TypeError(
                f"{self.type.value} activity requires {expected.__name__}, "
                f"got {type(self.fields).__name__}"
            )
        if not 0 <= self.confidence <= 100:
            raise ValueError(f"confidence must be within 0-100, got {self.confidence}")

    @property
    def confidence_fraction(self) -> float:
        return self.confidence / 100.0

    def as_dict(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {
            "type": self.type.value,
            "fields": fields_to_dict(self.fields),
            "confidence": self.confidence,
            "raw_text": self.raw_text,
            "timestamp": self.timestamp.isoformat(),
        }
        if self.reasoning:
            payload["reasoning"] = self.reasoning
        if self.warnings:
            payload["warnings"] = list(self.warnings)
        return payload
