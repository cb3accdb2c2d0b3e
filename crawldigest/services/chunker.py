"""Split oversized text into bounded chunks on semantic boundaries.

Granularity falls back paragraph -> sentence -> fixed-width slice. Only the
last level may cut through a word. Every chunk is at most `max_chunk_size`
characters, and chunks keep the reading order of the source text.
"""
import re
from typing import Callable

DEFAULT_MAX_CHUNK_SIZE = 100_000

PARAGRAPH_SEPARATOR = "\n\n"
SENTENCE_SEPARATOR = " "

_PARAGRAPH_BREAK = re.compile(r"\n\s*\n")
_SENTENCE_BREAK = re.compile(r"(?<=[.!?])\s+")


def chunk_text(text: str, max_chunk_size: int = DEFAULT_MAX_CHUNK_SIZE) -> list[str]:
    """Return `text` as an ordered list of chunks no longer than `max_chunk_size`.

    Text that already fits is returned unchanged as a single chunk (an empty
    string yields ``[""]``). A non-positive ceiling is a configuration error.
    """
    if max_chunk_size <= 0:
        raise ValueError(f"max_chunk_size must be > 0, got {max_chunk_size}")
    if len(text) <= max_chunk_size:
        return [text]

    chunks: list[str] = []

    def split_sentence(sentence: str) -> None:
        for start in range(0, len(sentence), max_chunk_size):
            chunks.append(sentence[start:start + max_chunk_size])

    def split_paragraph(paragraph: str) -> None:
        _pack(_SENTENCE_BREAK.split(paragraph), SENTENCE_SEPARATOR, max_chunk_size, chunks.append, split_sentence)

    _pack(_PARAGRAPH_BREAK.split(text), PARAGRAPH_SEPARATOR, max_chunk_size, chunks.append, split_paragraph)
    return chunks


def _pack(pieces, separator: str, max_size: int, emit: Callable[[str], None], split_oversized: Callable[[str], None]) -> None:
    """Greedily join `pieces` with `separator` into runs of at most `max_size`.

    A piece that alone exceeds `max_size` flushes the running chunk and is
    handed to `split_oversized` instead; it never joins a run.
    """
    current = ""
    for piece in pieces:
        if piece == "":
            continue
        if len(piece) > max_size:
            if current:
                emit(current)
                current = ""
            split_oversized(piece)
            continue
        if not current:
            current = piece
        elif len(current) + len(separator) + len(piece) <= max_size:
            current = f"{current}{separator}{piece}"
        else:
            emit(current)
            current = piece
    if current:
        emit(current)
