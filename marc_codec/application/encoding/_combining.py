# marc_codec/application/encoding/_combining.py

"""Combining mark handling shared by the MARC-8 and ISO-5426 codecs

Both encodings write diacritics before the letter they modify, while Unicode
writes them after it. Decoders hold marks back until the next base character
and encoders move them in front of it.
"""

# Standard library imports
from typing import Callable
from typing import Iterator
from unicodedata import combining
from unicodedata import normalize


def is_combining(char: str) -> bool:
    return combining(char) != 0


def iter_clusters(
    text: str, is_mark: Callable[[str], bool] = is_combining
) -> Iterator[tuple[int, str | None, list[str]]]:
    """Split ``text`` into (position, base, marks) clusters

    Marks are the characters following ``base`` that ``is_mark`` accepts, in
    their original order. Marks at the very start of the text have no base
    and come out with ``base`` set to None.
    """
    position = 0
    base: str | None = None
    marks: list[str] = []
    started = False

    for index, char in enumerate(text):
        if is_mark(char):
            started = True
            marks.append(char)
            continue
        if started:
            yield position, base, marks
        position, base, marks, started = index, char, [], True

    if started:
        yield position, base, marks


def decompose(char: str) -> tuple[str, list[str]] | None:
    """Canonical decomposition of a precomposed letter into base and marks

    Returns None when the character has no such decomposition.
    """
    parts = normalize("NFD", char)
    if len(parts) < 2 or is_combining(parts[0]):
        return None
    return parts[0], list(parts[1:])
