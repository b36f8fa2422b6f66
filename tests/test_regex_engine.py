import pytest

from models.regex import FlagSet, MatchSpan
from services.errors import CompileError
from services.regex_engine import (
    RegexBackend,
    RegexEngine,
    StdlibRegexBackend,
    get_backend,
    parse_flags,
    scope_ascii_classes,
    to_highlight_segments,
)


def _spans(matches):
    return [(m.start, m.end, m.full_text) for m in matches]


def test_global_matches_in_order():
    matches = RegexEngine().find_matches("a+", FlagSet(global_search=True), "aaa baa")
    assert _spans(matches) == [(0, 3, "aaa"), (5, 7, "aa")]


def test_without_global_returns_first_match_only():
    matches = RegexEngine().find_matches("a+", FlagSet(), "aaa baa")
    assert _spans(matches) == [(0, 3, "aaa")]


def test_no_match_is_empty_list():
    assert RegexEngine().find_matches("z", "g", "aaa") == []


def test_flag_letters_are_parsed():
    flags = parse_flags("gimsuy")
    assert flags.global_search and flags.case_insensitive and flags.multiline
    assert flags.dot_all and flags.unicode and flags.sticky
    assert flags.letters == "gimsuy"
    assert parse_flags("").letters == ""


@pytest.mark.parametrize("letters", ["q", "gg", "gx"])
def test_bad_flag_letters_fail(letters):
    with pytest.raises(CompileError):
        parse_flags(letters)


@pytest.mark.parametrize("pattern", ["(abc", "a)", "[a-", "*a", "a{2,1}"])
def test_invalid_pattern_raises_compile_error(pattern):
    with pytest.raises(CompileError) as exc_info:
        RegexEngine().find_matches(pattern, "g", "abc")
    assert exc_info.value.message


def test_compile_error_carries_backend_message():
    with pytest.raises(CompileError) as exc_info:
        RegexEngine().find_matches("(abc", "", "abc")
    assert "missing )" in str(exc_info.value)


def test_zero_length_matches_advance():
    matches = RegexEngine().find_matches("x*", "g", "ab")
    assert _spans(matches) == [(0, 0, ""), (1, 1, ""), (2, 2, "")]


def test_empty_match_after_real_match():
    matches = RegexEngine().find_matches("a*", "g", "aab")
    assert _spans(matches) == [(0, 2, "aa"), (2, 2, ""), (3, 3, "")]


def test_empty_subject_zero_length_pattern():
    assert _spans(RegexEngine().find_matches("^", "g", "")) == [(0, 0, "")]


def test_case_insensitive():
    matches = RegexEngine().find_matches("abc", "gi", "ABC abc")
    assert _spans(matches) == [(0, 3, "ABC"), (4, 7, "abc")]


def test_multiline_anchors():
    subject = "one\ntwo\nthree"
    assert len(RegexEngine().find_matches("^\\w+$", "g", subject)) == 0
    assert _spans(RegexEngine().find_matches("^\\w+$", "gm", subject)) == [
        (0, 3, "one"),
        (4, 7, "two"),
        (8, 13, "three"),
    ]


def test_dot_all():
    assert RegexEngine().find_matches("a.b", "", "a\nb") == []
    assert _spans(RegexEngine().find_matches("a.b", "s", "a\nb")) == [(0, 3, "a\nb")]


def test_unicode_mode_word_characters():
    assert _spans(RegexEngine().find_matches("\\w+", "g", "café")) == [(0, 3, "caf")]
    assert _spans(RegexEngine().find_matches("\\w+", "gu", "café")) == [(0, 4, "café")]


def test_sticky_requires_adjacent_matches():
    engine = RegexEngine()
    assert _spans(engine.find_matches("a", "gy", "aab")) == [(0, 1, "a"), (1, 2, "a")]
    assert engine.find_matches("b", "y", "ab") == []
    assert _spans(engine.find_matches("b", "g", "ab")) == [(1, 2, "b")]


def test_groups_are_captured():
    matches = RegexEngine().find_matches(r"(?P<key>\w+)=(\d+)?", "g", "a=1 b=")
    assert matches[0].groups == ["a", "1"]
    assert matches[0].named_groups == {"key": "a"}
    assert matches[1].groups == ["b", None]


def test_max_matches_limits_global_scan():
    matches = RegexEngine().find_matches("a", "g", "aaaa", max_matches=2)
    assert len(matches) == 2


def test_spans_are_strictly_increasing():
    matches = RegexEngine().find_matches("\\b|o", "g", "foo boo")
    starts = [m.start for m in matches]
    assert starts == sorted(set(starts))
    for previous, current in zip(matches, matches[1:]):
        assert previous.end <= current.start


class _NoStickyBackend(StdlibRegexBackend):
    name = "no-sticky"
    supported_flags = frozenset("gimsu")


def test_backend_capabilities_are_checked():
    engine = RegexEngine(_NoStickyBackend())
    assert len(engine.find_matches("a", "g", "aa")) == 2
    with pytest.raises(CompileError, match="not supported"):
        engine.find_matches("a", "gy", "aa")


def test_backend_registry():
    assert isinstance(get_backend("re"), StdlibRegexBackend)
    assert isinstance(get_backend("re"), RegexBackend)
    with pytest.raises(ValueError):
        get_backend("pcre")


def test_highlight_segments_partition_subject():
    subject = "aaa baa"
    matches = RegexEngine().find_matches("a+", "g", subject)
    segments = to_highlight_segments(subject, matches)
    assert [(s.text, s.is_match) for s in segments] == [
        ("aaa", True),
        (" b", False),
        ("aa", True),
    ]
    assert "".join(s.text for s in segments) == subject


def test_highlight_segments_without_matches():
    segments = to_highlight_segments("hello", [])
    assert [(s.text, s.is_match) for s in segments] == [("hello", False)]

    segments = to_highlight_segments("", [])
    assert [(s.text, s.is_match) for s in segments] == [("", False)]


@pytest.mark.parametrize(
    "pattern,flags,subject",
    [
        ("o", "g", "foo boo"),
        ("x*", "g", "abc"),
        ("^", "gm", "a\nb\n"),
        ("\\d+", "g", "a1b22c333"),
        ("b", "", "abcabc"),
    ],
)
def test_highlight_segments_reproduce_subject(pattern, flags, subject):
    matches = RegexEngine().find_matches(pattern, flags, subject)
    segments = to_highlight_segments(subject, matches)
    assert "".join(s.text for s in segments) == subject


def test_highlight_segments_clip_overlapping_spans():
    subject = "abcdef"
    matches = [
        MatchSpan(start=2, end=5, full_text="cde"),
        MatchSpan(start=0, end=3, full_text="abc"),
    ]
    segments = to_highlight_segments(subject, matches)
    assert "".join(s.text for s in segments) == subject
    assert [(s.text, s.is_match) for s in segments] == [
        ("abc", True),
        ("de", True),
        ("f", False),
    ]


def test_case_insensitive_folds_non_ascii_letters():
    assert _spans(RegexEngine().find_matches("é", "i", "É")) == [(0, 1, "É")]
    assert _spans(RegexEngine().find_matches("straße", "gi", "STRASSE Straße")) == [(8, 14, "Straße")]


def test_case_insensitive_keeps_ascii_word_class():
    assert _spans(RegexEngine().find_matches("\\w+", "gi", "CAFÉ")) == [(0, 3, "CAF")]


def test_ascii_classes_inside_brackets():
    engine = RegexEngine()
    assert _spans(engine.find_matches("[\\w]+", "g", "café")) == [(0, 3, "caf")]
    assert _spans(engine.find_matches("[\\w-]+", "g", "a-b é")) == [(0, 3, "a-b")]
    assert _spans(engine.find_matches("[]\\d]+", "g", "]9٣")) == [(0, 2, "]9")]
    assert _spans(engine.find_matches("[\\w]+", "gu", "café")) == [(0, 4, "café")]


def test_escaped_backslash_is_not_rewritten():
    assert _spans(RegexEngine().find_matches("\\\\w", "g", "a\\w")) == [(1, 3, "\\w")]


def test_scope_ascii_classes_rewrites():
    assert scope_ascii_classes("\\w+\\b") == "(?a:\\w)+(?a:\\b)"
    assert scope_ascii_classes("[^\\d.]") == "[^0-9.]"
    assert scope_ascii_classes("\\s\\.") == "\\s\\."


def test_angle_bracket_named_group_is_rejected():
    with pytest.raises(CompileError, match="unknown extension"):
        RegexEngine().find_matches("(?<year>\\d{4})", "g", "2024")


def test_dollar_matches_before_final_newline():
    assert _spans(RegexEngine().find_matches("a$", "", "a\n")) == [(0, 1, "a")]
