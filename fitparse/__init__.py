"""Rule-based parser for free-text fitness activity notes."""

from __future__ import annotations

from fitparse.core.confirm import (
    ConfirmationDecision,
    ConfirmationError,
    ConfirmationState,
    decide,
    resolve_confirmation,
    split_batch,
    state_for_confidence,
)
from fitparse.core.models import ActivityType, ParsedActivity
from fitparse.core.parser import parse, parse_segments
from fitparse.core.segment import EmptyInputError, ParseError
from fitparse.core.vocabulary import DEFAULT_VOCABULARY, Vocabulary

__version__ = "0.1.0"

__all__ = [
    "ActivityType",
    "ConfirmationDecision",
    "ConfirmationError",
    "ConfirmationState",
    "DEFAULT_VOCABULARY",
    "EmptyInputError",
    "ParseError",
    "ParsedActivity",
    "Vocabulary",
    "__version__",
    "decide",
    "parse",
    "parse_segments",
    "resolve_confirmation",
    "split_batch",
    "state_for_confidence",
]
