"""Meal and food item extraction."""

from __future__ import annotations

import re
from typing import List, Optional, Tuple

from fitparse.core.constants import DEFAULT_MEAL_TYPE, MEAL_TYPES, NUMBER_WORDS
from fitparse.core.models import Extraction, FoodItem, NutritionFields
from fitparse.core.patterns import WEIGHT_UNIT
from fitparse.core.vocabulary import DEFAULT_VOCABULARY, Vocabulary, find_word
from fitparse.utils.parsing import NUMBER, parse_quantity

_QUANTITY_WORDS = "|".join(sorted(NUMBER_WORDS, key=len, reverse=True))
_QUANTITY_BEFORE_RE = re.compile(rf"(?:^|\s)(?P<qty>{NUMBER}|{_QUANTITY_WORDS})\s+$")
# A number that belongs to a weight ("weight 175 pizza") is not a quantity.
_WEIGHT_BEFORE_RE = re.compile(rf"\b(?:weigh\w*|{WEIGHT_UNIT})\s*$")


def find_meal_type(text: str) -> Optional[str]:
    match = find_word(text, MEAL_TYPES)
    return match.group(0) if match else None


def _quantity_before(text: str, start: int) -> float:
    match = _QUANTITY_BEFORE_RE.search(text[:start])
    if not match or _WEIGHT_BEFORE_RE.search(text[: match.start("qty")]):
        return 1
    quantity = parse_quantity(match.group("qty"))
    return quantity if quantity else 1


def find_food_items(text: str, names: Tuple[str, ...]) -> List[FoodItem]:
    """Match food names in text order, longest names first for overlaps."""
    taken: List[Tuple[int, int]] = []
    found: List[Tuple[int, FoodItem]] = []
    for name in sorted(names, key=len, reverse=True):
        pattern = re.compile(rf"(?<![\w-]){re.escape(name)}(?![\w-])")
        for match in pattern.finditer(text):
            start, end = match.span()
            if any(start < other_end and other_start < end for other_start, other_end in taken):
                continue
            taken.append((start, end))
            found.append((start, FoodItem(name=name, quantity=_quantity_before(text, start))))
    found.sort(key=lambda item: item[0])
    return [item for _, item in found]


def extract_nutrition(text: str, vocabulary: Vocabulary = DEFAULT_VOCABULARY) -> Optional[Extraction]:
    meal = find_meal_type(text)
    items = find_food_items(text, vocabulary.food_names)

    if items:
        names = ", ".join(item.name for item in items)
        return Extraction(
            fields=NutritionFields(items=tuple(items), meal_type=meal or DEFAULT_MEAL_TYPE),
            band="keyword_full" if meal else "keyword_default",
            reasoning=f"food items: {names}",
        )

    return Extraction(
        fields=NutritionFields(items=(FoodItem(name=text),), meal_type=meal or DEFAULT_MEAL_TYPE),
        band="fallback",
        reasoning="no known food names; logged the whole text as one item",
    )
