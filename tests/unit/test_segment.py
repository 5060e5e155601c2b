import pytest

from fitparse.core.segment import EmptyInputError, ParseError, Segment, normalize, split_segments


def test_normalize_lowercases_and_collapses_whitespace() -> None:
    assert normalize("  Ran   5K  ") == "ran 5k"
    assert normalize("Slept 7 hours.") == "slept 7 hours"


def test_single_segment_keeps_raw_text_verbatim() -> None:
    segments = split_segments("Weight 175 lbs")
    assert segments == [Segment(raw="Weight 175 lbs", text="weight 175 lbs", index=0)]


def test_split_on_commas_preserves_order() -> None:
    segments = split_segments("Ran 5k, weight 175, ate eggs")
    assert [segment.raw for segment in segments] == ["Ran 5k", "weight 175", "ate eggs"]
    assert [segment.text for segment in segments] == ["ran 5k", "weight 175", "ate eggs"]
    assert [segment.index for segment in segments] == [0, 1, 2]


def test_comma_with_single_piece_is_one_segment() -> None:
    segments = split_segments("ran 5k,")
    assert len(segments) == 1
    assert segments[0].raw == "ran 5k,"
    assert segments[0].text == "ran 5k"


def test_empty_pieces_are_dropped() -> None:
    segments = split_segments("ran 5k,, ,weight 175")
    assert [segment.text for segment in segments] == ["ran 5k", "weight 175"]


def test_split_can_be_disabled() -> None:
    segments = split_segments("ran 5k, weight 175", split=False)
    assert len(segments) == 1


@pytest.mark.parametrize("text", ["", "   ", "\n\t", None])
def test_empty_input_raises(text) -> None:
    with pytest.raises(EmptyInputError):
        split_segments(text)


def test_empty_input_error_is_a_parse_error() -> None:
    assert issubclass(EmptyInputError, ParseError)
    assert issubclass(ParseError, ValueError)
