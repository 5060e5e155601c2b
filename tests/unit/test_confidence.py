import pytest

from fitparse.core.confidence import from_fraction, score_confidence, to_fraction
from fitparse.core.constants import CONFIDENCE_BANDS
from fitparse.core.models import ActivityType


def test_pattern_source_keeps_band_score() -> None:
    assert score_confidence("structured_full", "pattern", ActivityType.WEIGHT) == 95
    assert score_confidence("structured", "pattern", ActivityType.SLEEP) == 90


def test_source_caps_limit_the_band() -> None:
    assert score_confidence("structured_full", "keyword", ActivityType.CARDIO) == 85
    assert score_confidence("bare_number", "override", ActivityType.WEIGHT) == 85
    assert score_confidence("bare_number", "history", ActivityType.WEIGHT) == 80
    assert score_confidence("bare_number", "fallback", ActivityType.WEIGHT) == 60
    assert score_confidence("keyword_partial", "fallback", ActivityType.MOOD) == 60


def test_unknown_is_capped_at_thirty() -> None:
    assert score_confidence("unknown", "none", ActivityType.UNKNOWN) == 10
    assert score_confidence("structured", "pattern", ActivityType.UNKNOWN) == 30
    assert score_confidence("unknown", "conflict", ActivityType.UNKNOWN) == 25


def test_bands_are_ordered() -> None:
    assert CONFIDENCE_BANDS["structured_full"] >= CONFIDENCE_BANDS["structured"] >= 90
    assert CONFIDENCE_BANDS["keyword_only"] <= 70
    assert CONFIDENCE_BANDS["conflict"] <= 30


def test_unknown_band_name_raises() -> None:
    with pytest.raises(KeyError):
        score_confidence("made_up", "pattern", ActivityType.WEIGHT)


def test_fraction_conversion() -> None:
    assert to_fraction(85) == 0.85
    assert from_fraction(0.8) == 80
    assert from_fraction(to_fraction(65)) == 65
    with pytest.raises(ValueError):
        to_fraction(120)
    with pytest.raises(ValueError):
        from_fraction(1.5)
