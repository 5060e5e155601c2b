"""Confirmation policy: auto-log, ask, or ask to rephrase."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import List, Sequence, Tuple

from fitparse.core.constants import CONFIRMATION_POLICY, EXAMPLE_PHRASES
from fitparse.core.models import ParsedActivity
from fitparse.utils.formatting import confirmation_message, summarize


class ConfirmationState(str, Enum):
    AUTO_LOGGED = "auto_logged"
    PENDING_CONFIRMATION = "pending_confirmation"
    REJECTED = "rejected"
    NEEDS_REPHRASE = "needs_rephrase"


class ConfirmationError(RuntimeError):
    """Raised for a yes/no answer outside the pending state."""


@dataclass(frozen=True)
class ConfirmationDecision:
    activity: ParsedActivity
    state: ConfirmationState
    message: str

    def as_dict(self) -> dict:
        return {
            "state": self.state.value,
            "message": self.message,
            "activity": self.activity.as_dict(),
        }


def state_for_confidence(confidence: int) -> ConfirmationState:
    """Map a 0-100 confidence to its initial confirmation state."""
    if confidence > CONFIRMATION_POLICY["auto_log_above"]:
        return ConfirmationState.AUTO_LOGGED
    if confidence > CONFIRMATION_POLICY["confirm_above"]:
        return ConfirmationState.PENDING_CONFIRMATION
    return ConfirmationState.NEEDS_REPHRASE


def resolve_confirmation(state: ConfirmationState, accepted: bool) -> ConfirmationState:
    """Apply the user's yes/no answer to a pending result."""
    if state is not ConfirmationState.PENDING_CONFIRMATION:
        raise ConfirmationError(f"cannot confirm a result in state {state.value}")
    return ConfirmationState.AUTO_LOGGED if accepted else ConfirmationState.REJECTED


def rephrase_message() -> str:
    examples = ", ".join(f'"{phrase}"' for phrase in EXAMPLE_PHRASES[:4])
    return f"I didn't quite catch that. Try something like {examples}."


def decide(activity: ParsedActivity) -> ConfirmationDecision:
    """Choose the confirmation state and the message to show for it."""
    state = state_for_confidence(activity.confidence)
    if state is ConfirmationState.AUTO_LOGGED:
        message = confirmation_message(activity)
    elif state is ConfirmationState.PENDING_CONFIRMATION:
        message = f"Did you mean: {summarize(activity)}? (yes/no)"
    else:
        message = rephrase_message()
    return ConfirmationDecision(activity=activity, state=state, message=message)


def split_batch(activities: Sequence[ParsedActivity]) -> Tuple[List[ParsedActivity], List[ParsedActivity]]:
    """Split batch results into (auto-logged, held back) by the shared policy."""
    logged: List[ParsedActivity] = []
    held: List[ParsedActivity] = []
    for activity in activities:
        if state_for_confidence(activity.confidence) is ConfirmationState.AUTO_LOGGED:
            logged.append(activity)
        else:
            held.append(activity)
    return logged, held
