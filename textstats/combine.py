"""Single-pass computation of every count at once."""

from __future__ import annotations

from .counts import (
    CONSONANTS,
    DIGITS,
    PUNCTUATION,
    SPECIAL,
    VOWELS,
    WORD_BREAKS,
    Multiples,
)


def combine(s: str) -> Multiples:
    """Count every feature of ``s`` in one pass."""
    m = Multiples()
    for ch, nxt in zip(s, s[1:] + "\0"):
        if ch in SPECIAL:
            m.special += 1
        if ch == "\n" or (ch == "." and nxt == "\n"):
            m.paragraph += 1
        if ch in WORD_BREAKS:
            m.word += 1
        if ch == " ":
            m.space += 1
        if ch == ".":
            m.line += 1
        if ch in CONSONANTS:
            m.consonant += 1
        if ch in PUNCTUATION:
            m.punctuation += 1
        if ch in VOWELS:
            m.vowel += 1
        elif ch in DIGITS:
            m.digit += 1
    return m