"""Water intake extraction."""

from __future__ import annotations

import re
from typing import Optional

from fitparse.core.models import Extraction, WaterFields
from fitparse.core.patterns import match_water, mentions_water
from fitparse.core.vocabulary import DEFAULT_VOCABULARY, Vocabulary
from fitparse.utils.parsing import NUMBER, parse_number

_ANY_NUMBER_RE = re.compile(NUMBER)


def extract_water(text: str, vocabulary: Vocabulary = DEFAULT_VOCABULARY) -> Optional[Extraction]:
    match = match_water(text)
    if match:
        return Extraction(
            fields=WaterFields(amount=match.amount, unit=match.unit),
            band="structured",
            reasoning="water amount with unit",
        )

    # A volume alone ("drank 2 liters of soda") is not a water log.
    if not mentions_water(text):
        return None
    for raw in _ANY_NUMBER_RE.findall(text):
        value = parse_number(raw)
        if value is not None:
            return Extraction(
                fields=WaterFields(amount=value, unit="cups"),
                band="keyword_partial",
                reasoning="water amount without unit, assumed cups",
            )
    return None
