import pytest

from rpgutils.text import ltrim, normalize_text


def test_ltrim_removes_only_leading_spaces():
    assert ltrim("   sword  ") == "sword  "
    assert ltrim("\tsword") == "\tsword"
    assert ltrim("    ") == ""


def test_short_text_is_unchanged():
    assert normalize_text("a rusty key", 40) == "a rusty key"


def test_empty_text():
    assert normalize_text("", 10) == ""


def test_breaks_at_last_fitting_space():
    assert normalize_text("the quick brown fox", 10) == "the quick\nbrown fox"


def test_long_word_is_cut():
    result = normalize_text("abcdefghijkl", 5)
    assert result.replace("\n", "") == "abcdefghijkl"
    assert all(len(line) <= 5 for line in result.split("\n"))


@pytest.mark.parametrize("length", [8, 12, 20, 40])
def test_lines_fit_and_words_survive(length):
    text = (
        "An old blade, once carried by a knight who guarded the northern pass "
        "for many winters before the fall"
    )
    result = normalize_text(text, length)
    lines = result.split("\n")
    assert all(len(line) <= length for line in lines)
    assert all(not line.startswith(" ") for line in lines)
    assert " ".join(result.split()) == " ".join(text.split())


def test_non_positive_length_rejected():
    with pytest.raises(ValueError):
        normalize_text("text", 0)