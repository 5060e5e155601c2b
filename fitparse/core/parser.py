"""Text to structured activity pipeline."""

from __future__ import annotations

import logging
from dataclasses import replace
from datetime import datetime
from typing import List, Optional, Sequence, Tuple, Union

from fitparse.core.classify import auto_classify, classify
from fitparse.core.confidence import score_confidence
from fitparse.core.history import CommonLog
from fitparse.core.models import ActivityType, Classification, Extraction, ParsedActivity
from fitparse.core.segment import Segment, split_segments
from fitparse.core.vocabulary import DEFAULT_VOCABULARY, Vocabulary
from fitparse.extractors import extract
from fitparse.extractors.unknown import extract_unknown

logger = logging.getLogger(__name__)


def resolve_timestamp(now: datetime, occurred_at: Optional[datetime] = None) -> Tuple[datetime, Optional[str]]:
    """Return the activity timestamp and a warning when it had to be replaced.

    A naive value is read in the timezone of the other value.
    """
    if occurred_at is None:
        return now, None

    candidate = occurred_at
    reference = now
    if candidate.tzinfo is None and reference.tzinfo is not None:
        candidate = candidate.replace(tzinfo=reference.tzinfo)
    elif reference.tzinfo is None and candidate.tzinfo is not None:
        reference = reference.replace(tzinfo=candidate.tzinfo)

    if candidate > reference:
        warning = f"timestamp {occurred_at.isoformat()} is in the future; using {now.isoformat()}"
        logger.warning(warning)
        return now, warning
    return candidate, None


def _extract(classification: Classification, segment: Segment, vocabulary: Vocabulary) -> Optional[Extraction]:
    if classification.type is ActivityType.UNKNOWN:
        return extract_unknown(segment.raw, vocabulary, classification.reasoning)
    return extract(classification.type, segment.text, vocabulary)


def parse_segment(
    segment: Segment,
    *,
    now: datetime,
    type_override: Optional[str] = None,
    occurred_at: Optional[datetime] = None,
    history: Optional[Sequence[CommonLog]] = None,
    vocabulary: Vocabulary = DEFAULT_VOCABULARY,
) -> ParsedActivity:
    """Classify one segment, extract its fields and score the result."""
    timestamp, timestamp_warning = resolve_timestamp(now, occurred_at)

    classification = classify(segment.text, vocabulary, type_override, history)
    extraction = _extract(classification, segment, vocabulary)

    if extraction is None and classification.source == "override":
        warning = f"ignored type override {type_override!r}: no {classification.type.value} details found"
        logger.warning(warning)
        detected = auto_classify(segment.text, vocabulary, history)
        classification = replace(detected, warnings=classification.warnings + (warning,))
        extraction = _extract(classification, segment, vocabulary)

    if extraction is None:
        reason = f"looked like {classification.type.value} but no details were found"
        logger.debug("%s: %r", reason, segment.text)
        classification = replace(classification, type=ActivityType.UNKNOWN, source="none", reasoning=reason)
        extraction = extract_unknown(segment.raw, vocabulary, reason)

    confidence = score_confidence(extraction.band, classification.source, classification.type)
    warnings = classification.warnings + ((timestamp_warning,) if timestamp_warning else ())
    reasoning = extraction.reasoning
    if classification.reasoning and classification.reasoning != reasoning:
        reasoning = f"{classification.reasoning}; {reasoning}" if reasoning else classification.reasoning

    return ParsedActivity(
        type=classification.type,
        fields=extraction.fields,
        confidence=confidence,
        raw_text=segment.raw,
        timestamp=timestamp,
        reasoning=reasoning,
        warnings=warnings,
    )


def parse_segments(
    text: str,
    *,
    now: datetime,
    type_override: Optional[str] = None,
    occurred_at: Optional[datetime] = None,
    history: Optional[Sequence[CommonLog]] = None,
    vocabulary: Vocabulary = DEFAULT_VOCABULARY,
    split: bool = True,
) -> List[ParsedActivity]:
    """Parse every segment of ``text`` in order.

    Raises ``EmptyInputError`` for empty or whitespace-only input.
    """
    return [
        parse_segment(
            segment,
            now=now,
            type_override=type_override,
            occurred_at=occurred_at,
            history=history,
            vocabulary=vocabulary,
        )
        for segment in split_segments(text, split=split)
    ]


def parse(
    text: str,
    *,
    now: datetime,
    type_override: Optional[str] = None,
    occurred_at: Optional[datetime] = None,
    history: Optional[Sequence[CommonLog]] = None,
    vocabulary: Vocabulary = DEFAULT_VOCABULARY,
    split: bool = True,
) -> Union[ParsedActivity, List[ParsedActivity]]:
    """Parse text into one activity, or a list for comma-separated input."""
    activities = parse_segments(
        text,
        now=now,
        type_override=type_override,
        occurred_at=occurred_at,
        history=history,
        vocabulary=vocabulary,
        split=split,
    )
    if len(activities) == 1:
        return activities[0]
    return activities
