"""Structure-aware chunking and the length-based fallback splitter."""

import math
from typing import List, Optional

from ..core.abc import Segmenter
from ..core.types import SplitOptions
from .normalize import normalize_whitespace, PARAGRAPH_SEPARATOR
from .sentence import SentenceSegmenter, split_into_paragraphs

UNDERSIZED_MERGE = "merge"
UNDERSIZED_DROP = "drop"

DEFAULT_BOUNDARIES = " .,;:\n"

def _pack(units: List[str], max_size: float, separator: str = " ") -> List[str]:
    """Greedy first-fit packing of units into chunks of at most max_size characters."""
    chunks: List[str] = []
    current = ""

    for unit in units:
        if not current:
            current = unit
        elif len(current) + len(separator) + len(unit) <= max_size:
            current += separator + unit
        else:
            chunks.append(current)
            current = unit

    if current:
        chunks.append(current)
    return chunks

def _absorb_undersized(chunks: List[str], min_size: float, separator: str, mode: str) -> List[str]:
    """
    Apply the undersized-fragment policy.

    "drop" discards chunks shorter than min_size. "merge" folds them into the
    previous chunk, or into the next one when nothing precedes them.
    """
    if mode == UNDERSIZED_DROP:
        return [c for c in chunks if len(c) >= min_size]

    result: List[str] = []
    pending = ""

    for chunk in chunks:
        if pending:
            chunk = pending + separator + chunk
            pending = ""
        if len(chunk) >= min_size:
            result.append(chunk)
        elif result:
            result[-1] = result[-1] + separator + chunk
        else:
            pending = chunk

    if pending:
        # Everything was undersized; keep it as a single chunk.
        result.append(pending)
    return result

def split_into_advanced_chunks(text: str,
                               max_chars: float = 200,
                               options: Optional[SplitOptions] = None,
                               segmenter: Optional[Segmenter] = None,
                               undersized: str = UNDERSIZED_MERGE) -> List[str]:
    """
    Split text into chunks honoring paragraph, sentence and word boundaries.

    Paragraphs are packed greedily (joined by a blank line) while the running
    chunk stays within the size limit. A paragraph that overflows flushes the
    running chunk and is then split by sentences or words when it is itself
    too long, or emitted as-is otherwise. No look-ahead or rebalancing is done.

    Args:
        text: Input text
        max_chars: Size limit used when options.max_chunk_size is None
        options: Structural preferences (defaults to SplitOptions())
        segmenter: Sentence segmenter (defaults to the lossless regex segmenter)
        undersized: "merge" or "drop" for chunks below options.min_chunk_size

    Returns:
        List[str]: Chunks in reading order
    """
    if options is None:
        options = SplitOptions()
    if segmenter is None:
        segmenter = SentenceSegmenter(keep_remainder=True)

    max_size = options.max_chunk_size if options.max_chunk_size is not None else max_chars
    min_size = options.min_chunk_size

    clean = normalize_whitespace(text)
    if not clean:
        return []
    if len(clean) <= max_size:
        return [clean]

    paragraphs = split_into_paragraphs(clean)
    if not options.preserve_paragraphs:
        paragraphs = [" ".join(paragraphs)]

    chunks: List[str] = []
    current = ""

    for paragraph in paragraphs:
        projected = len(current) + len(PARAGRAPH_SEPARATOR) + len(paragraph) if current else len(paragraph)
        if projected <= max_size:
            current = current + PARAGRAPH_SEPARATOR + paragraph if current else paragraph
            continue

        if current:
            chunks.append(current)
            current = ""

        if options.respect_sentences and len(paragraph) > max_size:
            pieces = _pack(segmenter.segment(paragraph), max_size)
            chunks.extend(_absorb_undersized(pieces, min_size, " ", undersized))
        elif options.respect_words and len(paragraph) > max_size:
            pieces = _pack(paragraph.split(), max_size)
            chunks.extend(_absorb_undersized(pieces, min_size, " ", undersized))
        else:
            chunks.append(paragraph)

    if current:
        chunks.append(current)

    return _absorb_undersized(chunks, min_size, PARAGRAPH_SEPARATOR, undersized)

chunk = split_into_advanced_chunks

def split_into_chunks(text: str, max_chars: int = 200) -> List[str]:
    """Chunk with every structure flag on and a minimum of half the limit (at least 50)."""
    return split_into_advanced_chunks(text, max_chars, SplitOptions(
        preserve_paragraphs=True,
        respect_sentences=True,
        respect_words=True,
        min_chunk_size=max(50, math.floor(max_chars * 0.5)),
        max_chunk_size=max_chars,
    ))

def _find_break(text: str, window: range, boundaries: str, word_end: bool) -> Optional[int]:
    """Position just after the last boundary in window, or None.

    With word_end only boundaries that are whitespace or followed by
    whitespace count, so "2.5" is not cut after its period.
    """
    for i in window:
        if text[i] not in boundaries:
            continue
        if not word_end or text[i].isspace() or i + 1 >= len(text) or text[i + 1].isspace():
            return i + 1
    return None

def force_split_by_length(text: str, target_slides: int,
                          search_window: int = 40,
                          boundaries: str = DEFAULT_BOUNDARIES) -> List[str]:
    """
    Cut text into about target_slides pieces by length alone.

    Each cut backs off to just after the nearest boundary character within
    search_window characters that ends a word, then to any boundary
    character, and falls on the raw window edge when there is none. The
    window is recomputed from the remaining text after every cut, so the
    last piece absorbs whatever the earlier back-offs left over.

    Args:
        text: Text to cut
        target_slides: Desired number of pieces (values below 1 count as 1)
        search_window: How far back to look for a boundary
        boundaries: Characters a cut may follow

    Returns:
        List[str]: Trimmed non-empty pieces; [] for blank input
    """
    trimmed = text.strip()
    if not trimmed:
        return []

    length = len(trimmed)
    slides_left = max(1, target_slides)
    result: List[str] = []
    start = 0

    while start < length:
        size = max(1, math.ceil((length - start) / slides_left))
        end = min(start + size, length)

        if end < length:
            window = range(end - 1, max(start, end - search_window) - 1, -1)
            break_point = _find_break(trimmed, window, boundaries, word_end=True)
            if break_point is None:
                break_point = _find_break(trimmed, window, boundaries, word_end=False)
            if break_point is None:
                break_point = end
            end = max(break_point, start + 1)

        piece = trimmed[start:end].strip()
        if piece:
            result.append(piece)

        start = end
        slides_left = max(1, slides_left - 1)

    return result if result else [trimmed]
