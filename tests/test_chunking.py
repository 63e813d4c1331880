import pytest

from textstats.chunking import analyzer, chunk_bounds, chunking, format_result
from textstats.combine import combine
from textstats.counts import Multiples

TEXT = (
    "The quick brown fox (aged 7) jumps!\n"
    "Over the lazy dog. Again, and again?\n"
    "Email: someone@example.com; 100% done.\n"
)


def test_chunk_bounds_even_split():
    assert chunk_bounds(10) == [2, 4, 6, 8, 10]


def test_chunk_bounds_last_is_length():
    for length in (0, 3, 7, 11, 1000):
        bounds = chunk_bounds(length)
        assert len(bounds) == 5
        assert bounds[-1] == length
        assert bounds == sorted(bounds)


def test_chunking_is_additive_over_split_points():
    n = len(TEXT)
    for k in range(n + 1):
        assert chunking(TEXT, 0, k) + chunking(TEXT, k, n) == chunking(TEXT, 0, n)


def test_chunking_clamps_end_to_length():
    assert chunking(TEXT, 0, len(TEXT) + 500) == chunking(TEXT, 0, len(TEXT))


def test_chunking_empty_range():
    assert chunking(TEXT, 5, 5) == Multiples()


def test_chunking_relates_to_combine():
    whole = chunking(TEXT, 0, len(TEXT))
    full = combine(TEXT)
    assert whole.line == full.line
    assert whole.punctuation == full.punctuation - full.line
    assert whole.word == full.word - full.line
    assert whole.paragraph == full.paragraph
    assert whole.consonant == full.consonant
    assert whole.vowel == full.vowel
    assert whole.digit == full.digit
    assert whole.special == full.special
    assert whole.space == full.space


def test_paragraph_end_seen_across_chunk_boundary():
    text = "ab.\ncd"
    dot = text.index(".")
    assert chunking(text, 0, dot + 1).paragraph == 1


def test_format_result_of_empty_counts():
    assert format_result(Multiples()) == (
        "Words: 0, Lines: 0, Paragraphs: 0, Consonants: 0, Vowels: 0, "
        "Spaces: 0, Digits: 0, Punctuation: 0, Special: 0"
    )


def test_analyzer_skips_text_before_first_bound(tmp_path):
    path = tmp_path / "sample.txt"
    path.write_text(TEXT)
    bounds = chunk_bounds(len(TEXT))
    expected = format_result(chunking(TEXT, bounds[0], len(TEXT)))
    assert analyzer(path) == expected


def test_analyzer_ignores_leading_fifth(tmp_path):
    path = tmp_path / "lead.txt"
    path.write_text("zzzz" + " " * 16)
    assert "Consonants: 0," in analyzer(str(path))


def test_analyzer_empty_file(tmp_path):
    path = tmp_path / "empty.txt"
    path.write_text("")
    assert analyzer(path) == format_result(Multiples())


def test_analyzer_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        analyzer(tmp_path / "absent.txt")