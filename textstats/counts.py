"""Character-class counters and the aggregate counts record."""

from __future__ import annotations

from dataclasses import dataclass, fields

CONSONANTS = frozenset("bcdfghjklmnpqrstvwxyzBCDFGHJKLMNPQRSTVWXYZ")
VOWELS = frozenset("aeiouAEIOU")
DIGITS = frozenset("0123456789")
PUNCTUATION = frozenset("!?,.")
SPECIAL = frozenset("%@#$^&*()_+-={}[]|\\:;\"'<>/~`")
WORD_BREAKS = frozenset(" \n.")


@dataclass
class Multiples:
    """Counts of the text features the analysers track."""

    word: int = 0
    line: int = 0
    paragraph: int = 0
    consonant: int = 0
    vowel: int = 0
    space: int = 0
    digit: int = 0
    punctuation: int = 0
    special: int = 0

    def __add__(self, other: Multiples) -> Multiples:
        if not isinstance(other, Multiples):
            return NotImplemented
        return Multiples(
            **{f.name: getattr(self, f.name) + getattr(other, f.name) for f in fields(self)}
        )


def _count_in(s: str, charset: frozenset[str]) -> int:
    return sum(1 for ch in s if ch in charset)


def word_count(s: str) -> int:
    """Count word breaks: spaces, newlines and full stops."""
    return _count_in(s, WORD_BREAKS)


def space_count(s: str) -> int:
    """Count spaces."""
    return s.count(" ")


def line_count(s: str) -> int:
    """Count sentences, taken as full stops."""
    return s.count(".")


def para_count(s: str) -> int:
    """Count paragraphs as newlines plus one."""
    return s.count("\n") + 1


def consonant_count(s: str) -> int:
    """Count ASCII consonants of either case."""
    return _count_in(s, CONSONANTS)


def punc_count(s: str) -> int:
    """Count the punctuation marks ! ? , and ."""
    return _count_in(s, PUNCTUATION)


def special_count(s: str) -> int:
    """Count ASCII special characters."""
    return _count_in(s, SPECIAL)


def vowel_count(s: str) -> int:
    """Count ASCII vowels of either case."""
    return _count_in(s, VOWELS)


def digit_count(s: str) -> int:
    """Count decimal digits."""
    return _count_in(s, DIGITS)