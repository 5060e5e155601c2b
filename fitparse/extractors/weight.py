"""Body weight extraction."""

from __future__ import annotations

import re
from typing import Optional

from fitparse.core.models import Extraction, WeightFields
from fitparse.core.patterns import WEIGHT_UNIT, match_bare_number, match_weight
from fitparse.core.vocabulary import DEFAULT_VOCABULARY, Vocabulary
from fitparse.utils.parsing import NUMBER, normalize_weight_unit, parse_number

_LOOSE_WEIGHT_RE = re.compile(rf"(?P<value>{NUMBER})\s*(?P<unit>{WEIGHT_UNIT})?\b")


def extract_weight(text: str, vocabulary: Vocabulary = DEFAULT_VOCABULARY) -> Optional[Extraction]:
    match = match_weight(text)
    if match:
        band = "structured_full" if match.explicit_unit else "structured"
        return Extraction(
            fields=WeightFields(value=match.value, unit=match.unit),
            band=band,
            reasoning="weight pattern" + (" with unit" if match.explicit_unit else ""),
        )

    bare = match_bare_number(text)
    if bare is not None:
        return Extraction(
            fields=WeightFields(value=bare, unit="lbs"),
            band="bare_number",
            reasoning="bare number read as weight in lbs",
        )

    # Keyword path: first usable number anywhere in the segment.
    for loose in _LOOSE_WEIGHT_RE.finditer(text):
        value = parse_number(loose.group("value"))
        if value is None:
            continue
        unit_token = loose.group("unit")
        return Extraction(
            fields=WeightFields(value=value, unit=normalize_weight_unit(unit_token)),
            band="keyword_full" if unit_token else "keyword_default",
            reasoning="number found next to weight keyword",
        )
    return None
