import logging
from datetime import datetime

import pytest

from fitparse.core.classify import (
    auto_classify,
    classify,
    detect_structured,
    keyword_hits,
    resolve_override_name,
    validate_override,
)
from fitparse.core.history import CommonLog
from fitparse.core.models import ActivityType
from fitparse.core.vocabulary import DEFAULT_VOCABULARY


@pytest.mark.parametrize(
    "text,expected",
    [
        ("weight 175", ActivityType.WEIGHT),
        ("80 kg", ActivityType.WEIGHT),
        ("slept 7.5 hours", ActivityType.SLEEP),
        ("energy 8/10", ActivityType.ENERGY),
        ("drank 64 oz water", ActivityType.WATER),
        ("bench press 3x10 @ 135 lbs", ActivityType.STRENGTH),
        ("ran 5k in 25 minutes", ActivityType.CARDIO),
        ("5k run", ActivityType.CARDIO),
    ],
)
def test_structured_patterns(text: str, expected: ActivityType) -> None:
    assert detect_structured(text) is expected
    result = auto_classify(text)
    assert result.type is expected
    assert result.source == "pattern"


def test_structured_priority_weight_before_others() -> None:
    assert detect_structured("weighed 80 kg") is ActivityType.WEIGHT


def test_interval_run_is_not_a_strength_set() -> None:
    assert detect_structured("ran 6x400m") is None
    assert auto_classify("ran 6x400m").type is ActivityType.CARDIO


def test_water_amount_requires_water_word() -> None:
    assert detect_structured("drank 16 oz") is None
    assert auto_classify("drank 16 oz").type is ActivityType.WATER
    assert auto_classify("drank 16 oz").source == "keyword"


def test_malformed_number_is_not_structured() -> None:
    assert detect_structured("weight 1.2.3 kg") is None
    assert auto_classify("weight 1.2.3 kg").source == "keyword"


def test_keyword_classification() -> None:
    assert auto_classify("ate eggs for breakfast").type is ActivityType.NUTRITION
    assert auto_classify("went for a run").type is ActivityType.CARDIO
    assert auto_classify("did some squats").type is ActivityType.STRENGTH
    assert auto_classify("napped this afternoon").type is ActivityType.SLEEP
    assert auto_classify("feeling energized").type is ActivityType.ENERGY
    assert auto_classify("stressed about work").type is ActivityType.MOOD


def test_food_and_workout_conflict_is_unknown() -> None:
    result = auto_classify("ran then ate pizza")
    assert result.type is ActivityType.UNKNOWN
    assert result.source == "conflict"


def test_conflict_wins_over_structured_pattern() -> None:
    assert auto_classify("ran 5k then had pizza").type is ActivityType.UNKNOWN


def test_feeling_word_falls_back_to_mood() -> None:
    result = auto_classify("feeling great")
    assert result.type is ActivityType.MOOD
    assert result.source == "fallback"


def test_no_keywords_is_unknown() -> None:
    result = auto_classify("hello there")
    assert result.type is ActivityType.UNKNOWN
    assert result.source == "none"


def test_bare_number_is_weight_fallback() -> None:
    result = auto_classify("175")
    assert result.type is ActivityType.WEIGHT
    assert result.source == "fallback"


def test_bare_number_trusted_with_weight_history() -> None:
    history = [
        CommonLog(text="weight 175", count=5, last_used=datetime(2026, 2, 28), category="weight"),
        CommonLog(text="ran 5k", count=2, last_used=datetime(2026, 2, 27), category="cardio"),
    ]
    result = auto_classify("176", history=history)
    assert result.type is ActivityType.WEIGHT
    assert result.source == "history"


def test_keyword_hits_use_word_boundaries() -> None:
    hits = keyword_hits("brandy", DEFAULT_VOCABULARY)
    assert not hits.workout
    assert keyword_hits("ran home").workout


def test_resolve_override_aliases() -> None:
    assert resolve_override_name("Food", "anything") is ActivityType.NUTRITION
    assert resolve_override_name("workout", "bench press") is ActivityType.STRENGTH
    assert resolve_override_name("exercise", "went outside") is ActivityType.CARDIO
    assert resolve_override_name("dance", "anything") is None


def test_validate_override_rules() -> None:
    assert validate_override("175", "weight") == (ActivityType.WEIGHT, None)
    assert validate_override("ate pizza for lunch", "weight")[0] is None
    assert validate_override("weight after pizza 180", "weight")[0] is ActivityType.WEIGHT
    assert validate_override("80 kg", "nutrition")[0] is None
    assert validate_override("175", "nutrition")[0] is None
    assert validate_override("went for a run", "nutrition")[0] is None
    assert validate_override("ate a salad", "cardio")[0] is None
    assert validate_override("ran 5k", "weight")[0] is None
    assert validate_override("anything", "unknown")[0] is None
    assert validate_override("anything", "banana")[0] is None


def test_classify_honors_valid_override() -> None:
    result = classify("175", type_override="weight")
    assert result.type is ActivityType.WEIGHT
    assert result.source == "override"


def test_classify_keeps_pattern_source_when_override_agrees() -> None:
    result = classify("weight 175 lbs", type_override="weight")
    assert result.source == "pattern"


def test_classify_discards_invalid_override(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.WARNING, logger="fitparse"):
        result = classify("ate pizza for lunch", type_override="weight")
    assert result.type is ActivityType.NUTRITION
    assert result.source == "keyword"
    assert result.warnings and "ignored type override" in result.warnings[0]
    assert "ignored type override" in caplog.text
