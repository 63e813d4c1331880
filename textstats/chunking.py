"""Chunked analysis of a text file."""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from pathlib import Path

from .counts import CONSONANTS, DIGITS, SPECIAL, VOWELS, Multiples

CHUNK_COUNT = 5


def chunking(s: str, start: int, end: int) -> Multiples:
    """Count features of ``s[start:end]``, looking past ``end`` only for paragraph ends."""
    m = Multiples()
    end = min(end, len(s))
    for i in range(start, end):
        ch = s[i]
        if ch == "\n" or (ch == "." and i + 1 < len(s) and s[i + 1] == "\n"):
            m.paragraph += 1
        if ch in " \n":
            m.word += 1
        if ch == " ":
            m.space += 1
        elif ch == ".":
            m.line += 1
        elif ch in CONSONANTS:
            m.consonant += 1
        elif ch in "!?,":
            m.punctuation += 1
        elif ch in SPECIAL:
            m.special += 1
        elif ch in VOWELS:
            m.vowel += 1
        elif ch in DIGITS:
            m.digit += 1
    return m


def chunk_bounds(length: int) -> list[int]:
    """Return the cumulative chunk bounds for a text of ``length``; the last is ``length``."""
    size = length // CHUNK_COUNT
    bounds = [size * (i + 1) for i in range(CHUNK_COUNT)]
    bounds[-1] = length
    return bounds


def format_result(result: Multiples) -> str:
    """Render counts as a one-line summary."""
    return (
        f"Words: {result.word}, Lines: {result.line}, Paragraphs: {result.paragraph}, "
        f"Consonants: {result.consonant}, Vowels: {result.vowel}, Spaces: {result.space}, "
        f"Digits: {result.digit}, Punctuation: {result.punctuation}, Special: {result.special}"
    )


def analyzer(filepath: str | Path) -> str:
    """Analyse the file at ``filepath`` chunk by chunk and return the summary.

    Chunks span consecutive bounds, so the text before the first bound is not counted.
    Raises ``OSError`` when the file cannot be read.
    """
    # One character per byte keeps positions identical to byte offsets.
    text = Path(filepath).read_bytes().decode("latin-1")
    bounds = chunk_bounds(len(text))
    spans = list(zip(bounds, bounds[1:]))
    with ThreadPoolExecutor(max_workers=len(spans)) as pool:
        parts = pool.map(lambda span: chunking(text, *span), spans)
        total = sum(parts, Multiples())
    return format_result(total)