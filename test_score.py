"""
Tests for the score grammar: parsing, formatting and rejection of bad input.
"""

import sys

from tennis_rank.models import SetScore, Tiebreak
from tennis_rank.score import (
    ErrorKind,
    ScoreError,
    ScoreValidationError,
    format_score,
    is_valid_score,
    parse_score,
    parse_score_or_raise,
)


def _kind(text, **bounds):
    result = parse_score(text, **bounds)
    assert isinstance(result, ScoreError), f"{text!r} should be rejected, got {result!r}"
    return result.kind


def test_parse_valid_scores():
    """Plain sets, tie-breaks and surrounding whitespace"""
    print("🧪 Testing score parsing...")

    assert parse_score("6-4,7-6(7-3)") == [
        SetScore(6, 4),
        SetScore(7, 6, Tiebreak(7, 3)),
    ]
    assert parse_score("  6-4 ,   3-6,6-0  ") == [SetScore(6, 4), SetScore(3, 6), SetScore(6, 0)]
    assert parse_score("6-7(5-7), 7-6(12-10), 6-2") == [
        SetScore(6, 7, Tiebreak(5, 7)),
        SetScore(7, 6, Tiebreak(12, 10)),
        SetScore(6, 2),
    ]
    # single-set recreational matches are fine
    assert parse_score("6-4") == [SetScore(6, 4)]
    # space before the tie-break group, as older displays rendered it
    assert parse_score("7-6 (7-4)") == [SetScore(7, 6, Tiebreak(7, 4))]
    # tie-break pairing is not second-guessed
    assert parse_score("6-4(7-3)") == [SetScore(6, 4, Tiebreak(7, 3))]
    assert parse_score("20-18") == [SetScore(20, 18)]
    print("    ✅ Valid scores parse")


def test_empty_score():
    print("🧪 Testing empty scores...")
    assert _kind("") == ErrorKind.EMPTY_SCORE
    assert _kind("   ") == ErrorKind.EMPTY_SCORE
    assert _kind(None) == ErrorKind.EMPTY_SCORE
    print("    ✅ Empty scores rejected")


def test_malformed_tiebreak():
    print("🧪 Testing malformed tie-breaks...")
    result = parse_score("7-6(),6-4")
    assert isinstance(result, ScoreError)
    assert result.kind == ErrorKind.MALFORMED_TIEBREAK
    assert result.index == 1
    assert result.token == "7-6()"

    for text in ("7-6(7-3", "7-6)", "7-6(7-3))", "7-6((7-3)", "7-6(a-b)", "7-6(7)", "7-6(7-3)6", "7-6( )"):
        assert _kind(text) == ErrorKind.MALFORMED_TIEBREAK, text
    print("    ✅ Malformed tie-breaks rejected")


def test_malformed_set():
    print("🧪 Testing malformed sets...")
    for text in ("invalid", "6", "6-", "-6", "6-4-3", "-1-6", "6 - 4", "6:4", "6-4x", "６-4", "(7-3)"):
        assert _kind(text) == ErrorKind.MALFORMED_SET, text

    result = parse_score("6-4,")
    assert isinstance(result, ScoreError)
    assert result.kind == ErrorKind.MALFORMED_SET
    assert result.index == 2

    result = parse_score("6-4,,6-3")
    assert isinstance(result, ScoreError) and result.index == 2
    print("    ✅ Malformed sets rejected")


def test_out_of_range():
    print("🧪 Testing sanity bounds...")
    assert _kind("21-3") == ErrorKind.OUT_OF_RANGE
    assert _kind("6-4,3-99") == ErrorKind.OUT_OF_RANGE
    assert _kind("99999999999-1") == ErrorKind.OUT_OF_RANGE
    assert _kind("7-6(100-98)") == ErrorKind.OUT_OF_RANGE
    assert _kind("8-6", max_games=7) == ErrorKind.OUT_OF_RANGE
    assert parse_score("7-6(16-14)") == [SetScore(7, 6, Tiebreak(16, 14))]
    print("    ✅ Out-of-range values rejected")


def test_no_partial_result():
    """A bad set anywhere rejects the whole score"""
    result = parse_score("6-4,6-3,bad")
    assert isinstance(result, ScoreError)
    assert result.index == 3
    assert "Set #3" in result.message


def test_parse_or_raise():
    print("🧪 Testing exception wrapper...")
    assert parse_score_or_raise("6-1,6-1") == [SetScore(6, 1), SetScore(6, 1)]
    try:
        parse_score_or_raise("7-6(),6-4")
    except ScoreValidationError as e:
        assert isinstance(e, ValueError)
        assert e.kind == ErrorKind.MALFORMED_TIEBREAK
        assert e.error.index == 1
    else:
        raise AssertionError("expected ScoreValidationError")
    assert is_valid_score("6-4, 6-4")
    assert not is_valid_score("invalid")
    print("    ✅ parse_score_or_raise works")


def test_format_and_round_trip():
    print("🧪 Testing formatting...")
    sets = [SetScore(6, 4), SetScore(7, 6, Tiebreak(7, 3))]
    assert format_score(sets) == "6-4, 7-6(7-3)"
    assert format_score([]) == ""

    samples = [
        [SetScore(6, 0)],
        [SetScore(6, 4), SetScore(3, 6), SetScore(7, 5)],
        [SetScore(6, 7, Tiebreak(4, 7)), SetScore(7, 6, Tiebreak(11, 9)), SetScore(10, 8)],
        [SetScore(0, 0)],
    ]
    for s in samples:
        assert parse_score(format_score(s)) == s
    # whitespace normalisation
    assert format_score(parse_score(" 6-4 ,7-6 (7-3)")) == "6-4, 7-6(7-3)"
    print("    ✅ Formatting round-trips")


if __name__ == "__main__":
    tests = [v for k, v in list(globals().items()) if k.startswith("test_")]
    failed = 0
    for t in tests:
        try:
            t()
        except AssertionError as e:
            failed += 1
            print(f"❌ {t.__name__} failed: {e}")
    print(f"Total: {len(tests) - failed}/{len(tests)} tests passed")
    sys.exit(1 if failed else 0)
