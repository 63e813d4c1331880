# textstats

`textstats` counts character classes in text. The classes are words, lines,
paragraphs, consonants, vowels, spaces, digits, punctuation marks and special
characters. Every class is a fixed set of ASCII characters, and text is
examined one character at a time.

## Installing

```
pip install .
```

To run the tests, install `.[test]` and then run `pytest`.

## Counter functions

`textstats.counts` has one function for each statistic:

| function | counts |
| --- | --- |
| `word_count(s)` | spaces, newlines and full stops |
| `space_count(s)` | spaces |
| `line_count(s)` | full stops |
| `para_count(s)` | newlines, plus one |
| `consonant_count(s)` | ASCII consonants, upper and lower case |
| `vowel_count(s)` | `aeiou` and `AEIOU` |
| `digit_count(s)` | `0`–`9` |
| `punc_count(s)` | `!`, `?`, `,` and `.` |
| `special_count(s)` | ASCII symbols such as `%@#$^&*()_+-={}[]|\:;"'<>/~` and backtick |

```python
from textstats.counts import word_count, para_count

word_count("Hello world.")   # 2
para_count("one\ntwo")       # 2
```

## All counts at once

`Multiples` is a dataclass. It has the fields `word`, `line`, `paragraph`,
`consonant`, `vowel`, `space`, `digit`, `punctuation` and `special`, and each
field starts at 0. Adding two records with `+` adds them field by field.

`textstats.combine.combine(s)` fills a `Multiples` in one pass over `s`.

- Words, spaces, lines, consonants, vowels, digits, punctuation and special
  characters are counted with the same rules as the counter functions.
- Paragraphs are counted differently from `para_count`. A paragraph is counted
  for each newline, and again for each full stop that comes just before a
  newline. No extra one is added.

```python
from textstats.combine import combine

stats = combine("Hello, world.\nBye!")
stats.word, stats.line, stats.paragraph
```

## Analysing a file

`textstats.chunking.analyzer(filepath)` reads a file as bytes, so each byte
counts as one character. It counts the file in chunks on a thread pool and
returns a one-line summary:

```
Words: ..., Lines: ..., Paragraphs: ..., Consonants: ..., Vowels: ..., Spaces: ..., Digits: ..., Punctuation: ..., Special: ...
```

It raises `OSError` if the file cannot be read.

The helpers it uses are public:

- `chunk_bounds(length)` gives five cumulative bounds, each one fifth of
  `length` on from the last. The final bound is always `length`. The chunks lie
  between consecutive bounds. This makes four chunks, so the text before the
  first bound is not counted.
- `chunking(s, start, end)` counts `s[start:end]`. It looks past `end` only to
  see whether a full stop ends a paragraph. Its rules differ from `combine` in
  two ways:
  - Words are counted at spaces and newlines only.
  - Each character lands in at most one of space, line, consonant,
    punctuation (`!`, `?`, `,`), special, vowel and digit. A full stop
    therefore counts as a line and not as punctuation.
- `format_result(result)` turns a `Multiples` into the summary string.

## HTTP service

`textstats.server.create_app(filepath)` builds a Flask application with one
route, `GET /getData`. The route answers with the summary string of
`analyzer(filepath)`, encoded as a JSON string. If the file cannot be read, it
answers with status 500 and `{"error": "Failed to read file"}`. When no
`filepath` is given, the file is `Test.txt`.

The `textstats-server` command starts the server:

```
textstats-server [FILE] [--host HOST] [--port PORT]
```

| option | default |
| --- | --- |
| `FILE` | `Test.txt` |
| `--host` | `0.0.0.0` |
| `--port` | `8080` |

## What it does not do

The results are not stored anywhere. Nothing is written to a database or to a
file. The server works out the counts again on every request and returns them.