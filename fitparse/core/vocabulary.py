"""Keyword vocabularies and word-boundary matching."""

from __future__ import annotations

import re
from dataclasses import dataclass, fields, replace
from functools import lru_cache
from typing import Any, Dict, Iterable, List, Optional, Pattern, Tuple

from fitparse.core import constants

VOCABULARY_SETS = (
    "food",
    "food_names",
    "workout",
    "strength",
    "weight",
    "sleep",
    "water",
    "mood",
    "energy",
    "feeling",
)


@lru_cache(maxsize=256)
def keyword_pattern(words: Tuple[str, ...]) -> Optional[Pattern[str]]:
    """Compile one alternation that matches any of ``words`` as whole words."""
    cleaned = sorted({word.strip().lower() for word in words if word.strip()}, key=len, reverse=True)
    if not cleaned:
        return None
    alternation = "|".join(re.escape(word) for word in cleaned)
    return re.compile(rf"(?<![\w-])(?:{alternation})(?![\w-])")


def find_word(text: str, words: Iterable[str]) -> Optional[re.Match]:
    """Return the first whole-word occurrence of any of ``words`` in text."""
    pattern = keyword_pattern(tuple(words))
    if pattern is None:
        return None
    return pattern.search(text)


@dataclass(frozen=True)
class Vocabulary:
    """Word sets the classifier and extractors match against."""

    food: Tuple[str, ...] = tuple(constants.FOOD_WORDS)
    food_names: Tuple[str, ...] = tuple(constants.FOOD_NAMES)
    workout: Tuple[str, ...] = tuple(constants.WORKOUT_WORDS)
    strength: Tuple[str, ...] = tuple(constants.STRENGTH_WORDS)
    weight: Tuple[str, ...] = tuple(constants.WEIGHT_WORDS)
    sleep: Tuple[str, ...] = tuple(constants.SLEEP_WORDS)
    water: Tuple[str, ...] = tuple(constants.WATER_WORDS)
    mood: Tuple[str, ...] = tuple(constants.MOOD_WORDS)
    energy: Tuple[str, ...] = tuple(constants.ENERGY_WORDS)
    feeling: Tuple[str, ...] = tuple(constants.FEELING_WORDS)

    def matches(self, name: str, text: str) -> bool:
        return find_word(text, getattr(self, name)) is not None

    def mentions_food(self, text: str) -> bool:
        return self.matches("food", text) or self.matches("food_names", text)

    def extended(self, extra: Dict[str, Iterable[str]]) -> "Vocabulary":
        """Return a copy with extra words appended to the named sets."""
        changes: Dict[str, Tuple[str, ...]] = {}
        for name, words in extra.items():
            if name not in VOCABULARY_SETS:
                continue
            current = list(getattr(self, name))
            for word in words:
                word = str(word).strip().lower()
                if word and word not in current:
                    current.append(word)
            changes[name] = tuple(current)
        return replace(self, **changes) if changes else self

    def as_dict(self) -> Dict[str, List[str]]:
        return {item.name: list(getattr(self, item.name)) for item in fields(self)}


DEFAULT_VOCABULARY = Vocabulary()


def vocabulary_from_config(config: Dict[str, Any]) -> Vocabulary:
    """Build the vocabulary from config extras, otherwise the defaults."""
    configured = config.get("vocabulary", {})
    if not isinstance(configured, dict) or not configured:
        return DEFAULT_VOCABULARY

    extra: Dict[str, List[str]] = {}
    for key, value in configured.items():
        if isinstance(value, str):
            extra[str(key)] = [value]
        elif isinstance(value, Iterable):
            extra[str(key)] = [str(item) for item in value]
    return DEFAULT_VOCABULARY.extended(extra)
