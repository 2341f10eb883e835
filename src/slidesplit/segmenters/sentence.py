"""Deterministic sentence and paragraph segmentation with no external dependencies."""

import re
from typing import List

_SENTENCE = re.compile(r'[^.!?]+[.!?]+')
# Whitespace after a terminator; "2.5" and "example.com" stay whole.
_SENTENCE_END = re.compile(r'(?<=[.!?])\s+')
_BLANK_LINE = re.compile(r'\n\s*\n')

def split_into_sentences(text: str) -> List[str]:
    """
    Split text into terminated sentences.

    Text after the last terminator is not returned. When no terminated
    sentence exists the whole trimmed text is the single sentence.
    """
    sentences = [s.strip() for s in _SENTENCE.findall(text)]
    sentences = [s for s in sentences if s]
    if sentences:
        return sentences
    return [text.strip()]

def split_into_paragraphs(text: str) -> List[str]:
    """Split text on blank lines, dropping blank paragraphs."""
    return [p.strip() for p in _BLANK_LINE.split(text) if p.strip()]

class SentenceSegmenter:
    """
    Deterministic rule-based sentence segmenter.
    Splits on runs of '.', '!' and '?' without requiring external libraries.
    """

    def __init__(self, keep_remainder: bool = False, min_length: int = 0):
        """
        Initialize segmenter.

        Args:
            keep_remainder: Also return the unterminated tail, so that joining
                the segments with single spaces gives back the text
            min_length: Minimum character length for a valid segment
        """
        self.keep_remainder = keep_remainder
        self.min_length = min_length

    def segment(self, text: str) -> List[str]:
        """
        Segment text into sentences using deterministic rules.

        Args:
            text: Input text to segment

        Returns:
            List[str]: List of sentence segments
        """
        if not text.strip():
            return []

        if self.keep_remainder:
            sentences = _SENTENCE_END.split(text.strip())
        else:
            sentences = split_into_sentences(text)

        result = []
        for sentence in sentences:
            sentence = sentence.strip()
            if sentence and len(sentence) >= self.min_length:
                result.append(sentence)

        return result
