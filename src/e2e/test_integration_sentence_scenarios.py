import pytest
from concordance import Engine, build_concordance


def _summary(index):
    return {r.word: (r.count, list(r.sentence_indices)) for r in index.rows()}


@pytest.mark.e2e
def test_sentence_counting():
    assert _summary(build_concordance("Hello world. Foo bar!")) == {
        "bar": (1, [1]),
        "foo": (1, [1]),
        "hello": (1, [0]),
        "world": (1, [0]),
    }


@pytest.mark.e2e
def test_abbreviation_protection():
    s = _summary(build_concordance("See e.g. the dog. Cats run."))
    assert s["e.g."] == (1, [0])
    assert s["dog"] == (1, [0])
    assert s["cats"] == (1, [1])
    assert s["run"] == (1, [1])
    assert "e" not in s and "g" not in s


@pytest.mark.e2e
def test_repeated_word_accumulation():
    idx = build_concordance("cat sat. the cat ran. cat cat.")
    assert idx.render() == [
        "cat\t{4:0,1,2,2}",
        "ran\t{1:1}",
        "sat\t{1:0}",
        "the\t{1:1}",
    ]


@pytest.mark.e2e
def test_consecutive_separators_leave_no_empty_words():
    s = _summary(build_concordance("Hi..  Bye."))
    assert s == {"bye": (1, [2]), "hi": (1, [0])}
    assert "" not in s


@pytest.mark.e2e
@pytest.mark.parametrize("text", ["", "   ", "...", "\r\n\r\n", "-- ; ,"])
def test_empty_or_punctuation_only_text(text):
    idx = build_concordance(text)
    assert len(idx) == 0
    assert idx.to_text() == ""


@pytest.mark.e2e
def test_mixed_case_words_fold_together():
    s = _summary(build_concordance("The THE the. tHe!"))
    assert s == {"the": (4, [0, 0, 0, 1])}


@pytest.mark.e2e
def test_demo_text_smoke():
    from concordance.config import DEMO_TEXT
    idx = Engine().build(DEMO_TEXT)
    lines = idx.render()
    assert "concordance\t{3:0,1,1}" in lines
    assert "e.g.\t{1:0}" in lines
    assert "zero-indexed\t{1:2}" in lines
    assert lines == sorted(lines)
    for row in idx.rows():
        assert row.count == len(row.sentence_indices)
