"""Sleep extraction."""

from __future__ import annotations

from typing import Optional

from fitparse.core.constants import SLEEP_QUALITY
from fitparse.core.models import Extraction, SleepFields
from fitparse.core.patterns import match_sleep
from fitparse.core.vocabulary import DEFAULT_VOCABULARY, Vocabulary, find_word
from fitparse.utils.parsing import parse_duration_minutes


def find_sleep_quality(text: str) -> Optional[str]:
    for quality, words in SLEEP_QUALITY:
        if find_word(text, words):
            return quality
    return None


def extract_sleep(text: str, vocabulary: Vocabulary = DEFAULT_VOCABULARY) -> Optional[Extraction]:
    quality = find_sleep_quality(text)

    match = match_sleep(text)
    if match:
        return Extraction(
            fields=SleepFields(hours=match.hours, quality=quality),
            band="structured_full" if match.explicit_unit else "structured",
            reasoning="sleep duration pattern",
        )

    if not vocabulary.matches("sleep", text):
        return None

    minutes = parse_duration_minutes(text)
    if minutes is not None:
        return Extraction(
            fields=SleepFields(hours=round(minutes / 60.0, 2), quality=quality),
            band="keyword_full",
            reasoning="sleep keyword with a duration",
        )
    if quality:
        return Extraction(SleepFields(quality=quality), "fallback", "sleep quality without hours")
    return Extraction(SleepFields(), "fallback_weak", "sleep keyword only")
