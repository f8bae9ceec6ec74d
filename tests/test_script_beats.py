import pytest

from controller.script.beats import (
    SAMPLE_SCRIPTS,
    SampleScript,
    beat_prompt,
    find_sample_script,
    memorization_text,
    parse_beats,
)


def test_parse_beats_splits_on_sentence_ends_and_lines():
    beats = parse_beats("To be. Or not?\nThat is it!  \n\n")
    assert [b.text for b in beats] == ["To be", "Or not", "That is it"]
    assert [b.index for b in beats] == [0, 1, 2]
    assert beats[0].intensity == 5.0
    assert beats[0].has_pause is False
    assert beats[0].emotion is None


def test_parse_beats_empty_text():
    assert parse_beats("") == []
    assert parse_beats("...\n!?") == []


def test_memorization_stages():
    text = "a b c d e f g h"
    assert memorization_text(text, 1) == text
    assert memorization_text(text, 2) == "a ___ c d ___ f g ___"
    assert memorization_text(text, 3) == ""


def test_memorization_ignores_repeated_spaces():
    assert memorization_text("a  b c d", 2) == "a ___ c d"
    assert memorization_text("  a b  ", 2) == "a ___"


def test_memorization_rejects_unknown_stage():
    with pytest.raises(ValueError):
        memorization_text("a b c", 4)


def test_beat_prompt_uses_first_three_words():
    assert beat_prompt("To be or not to be") == "[To be or…]"
    assert beat_prompt("Beautiful") == "[Beautiful…]"


def test_sample_scripts_lookup():
    assert find_sample_script("hamlet") is SampleScript.hamlet
    assert find_sample_script("The Devil's Advocate") is SampleScript.devils_advocate
    assert find_sample_script("scent-of-a-woman") is SampleScript.scent_of_a_woman
    assert find_sample_script("macbeth") is None

    hamlet = parse_beats(SAMPLE_SCRIPTS[SampleScript.hamlet])
    assert hamlet[0].text == "To be, or not to be, that is the question"
