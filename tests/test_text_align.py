from controller.alignment.text_align import (
    align_words,
    alignment_cost,
    edit_distance_table,
    match_words,
    normalize_token,
    summarize_alignment,
    tokenize,
)
from schemas.alignment import MatchType, WordMatchResult


def test_tokenize_splits_on_whitespace_and_newlines():
    assert tokenize("To be,\n  or not\tto be.") == ["To", "be,", "or", "not", "to", "be."]
    assert tokenize("") == []
    assert tokenize("   \n ") == []


def test_normalize_token_strips_only_boundary_punctuation():
    assert normalize_token("Hello,") == "hello"
    assert normalize_token("\"Don't!\"") == "don't"
    assert normalize_token("heart-ache") == "heart-ache"
    assert normalize_token("—") == ""


def test_empty_inputs():
    assert match_words("", "") == []
    assert match_words("hello world", "") == [
        WordMatchResult.missing("hello"),
        WordMatchResult.missing("world"),
    ]
    assert match_words("", "hello world") == [
        WordMatchResult.extra("hello"),
        WordMatchResult.extra("world"),
    ]


def test_exact_match_ignores_case_and_punctuation():
    assert match_words("The cat sat.", "the cat sat") == [
        WordMatchResult.correct("The"),
        WordMatchResult.correct("cat"),
        WordMatchResult.correct("sat"),
    ]


def test_substitution_missing_and_extra():
    assert [r.type for r in match_words("the cat sat", "the dog sat")] == [
        MatchType.correct,
        MatchType.substitution,
        MatchType.correct,
    ]
    substituted = match_words("the cat sat", "the dog sat")[1]
    assert substituted.expected == "cat"
    assert substituted.actual == "dog"
    assert substituted.text == "cat"

    assert match_words("the big cat", "the cat") == [
        WordMatchResult.correct("the"),
        WordMatchResult.missing("big"),
        WordMatchResult.correct("cat"),
    ]
    extra = match_words("the cat", "the big cat")
    assert extra[1] == WordMatchResult.extra("big")
    assert extra[1].text == "big"


def test_backtrace_prefers_substitution_over_deletion():
    # Both "missing a + sub b->c" and "sub a->c + missing b" cost 2.
    assert match_words("a b", "c") == [
        WordMatchResult.missing("a"),
        WordMatchResult.substitution("b", "c"),
    ]


def test_alignment_is_deterministic():
    expected = "Whether 'tis nobler in the mind to suffer"
    actual = "whether it is noble in mind to suffer the"
    assert match_words(expected, actual) == match_words(expected, actual)


CASES = [
    ("To be, or not to be, that is the question.", "to be or not to be that is a question"),
    ("Put out the light, and then put out the light.", "put the light and then put out out the light"),
    ("It is the cause, it is the cause, my soul", "it's the cause my soul"),
    ("one two three four", "five six"),
    ("a a a b", "b a a a"),
    ("Yet she must die", ""),
    ("", "extra words only"),
]


def test_every_token_is_accounted_for_exactly_once():
    for expected_text, actual_text in CASES:
        results = match_words(expected_text, actual_text)
        expected_side = [r.expected for r in results if r.type != MatchType.extra]
        actual_side = [r.actual for r in results if r.type != MatchType.missing]
        assert [normalize_token(t) for t in expected_side] == [
            normalize_token(t) for t in tokenize(expected_text)
        ]
        assert [normalize_token(t) for t in actual_side] == [
            normalize_token(t) for t in tokenize(actual_text)
        ]
        n, m = len(tokenize(expected_text)), len(tokenize(actual_text))
        assert max(n, m) <= len(results) <= n + m


def test_alignment_cost_equals_edit_distance():
    for expected_text, actual_text in CASES:
        expected_tokens = tokenize(expected_text)
        actual_tokens = tokenize(actual_text)
        results = align_words(expected_tokens, actual_tokens)
        dp = edit_distance_table(expected_tokens, actual_tokens)
        assert alignment_cost(results) == dp[-1][-1]


def test_summarize_alignment_counts_and_accuracy():
    # Substitution wins the tie over a missing/extra pair, so "big" and
    # "black" are reported as swapped rather than dropped and added.
    summary = summarize_alignment(match_words("the big black cat", "the black dog cat sat"))
    assert summary.correct == 2
    assert summary.substitutions == 2
    assert summary.missing == 0
    assert summary.extra == 1
    assert summary.edit_distance == 3
    assert summary.accuracy == 2 / 5

    empty = summarize_alignment([])
    assert empty.accuracy == 0.0
    assert empty.edit_distance == 0
