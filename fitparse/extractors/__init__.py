"""Field extractors, one per activity type."""

from __future__ import annotations

from typing import Callable, Dict, Optional

from fitparse.core.models import ActivityType, Extraction
from fitparse.core.vocabulary import DEFAULT_VOCABULARY, Vocabulary
from fitparse.extractors.nutrition import extract_nutrition
from fitparse.extractors.sleep import extract_sleep
from fitparse.extractors.unknown import extract_unknown
from fitparse.extractors.water import extract_water
from fitparse.extractors.weight import extract_weight
from fitparse.extractors.wellbeing import extract_energy, extract_mood
from fitparse.extractors.workout import extract_cardio, extract_strength

Extractor = Callable[[str, Vocabulary], Optional[Extraction]]

EXTRACTORS: Dict[ActivityType, Extractor] = {
    ActivityType.WEIGHT: extract_weight,
    ActivityType.NUTRITION: extract_nutrition,
    ActivityType.CARDIO: extract_cardio,
    ActivityType.STRENGTH: extract_strength,
    ActivityType.SLEEP: extract_sleep,
    ActivityType.WATER: extract_water,
    ActivityType.MOOD: extract_mood,
    ActivityType.ENERGY: extract_energy,
    ActivityType.UNKNOWN: extract_unknown,
}


def extract(
    activity_type: ActivityType,
    text: str,
    vocabulary: Vocabulary = DEFAULT_VOCABULARY,
) -> Optional[Extraction]:
    """Run the extractor registered for ``activity_type``."""
    return EXTRACTORS[activity_type](text, vocabulary)


__all__ = ["EXTRACTORS", "Extractor", "extract"]
