"""Content-shape detection used to parameterize splitting."""

import re
from typing import Optional, Sequence

from ..core.types import ContentType
from .sentence import split_into_sentences

DEFAULT_TECHNICAL_MARKERS = ("function", "class", "API", "code")

_BULLET_LINE = re.compile(r'^\s*[-*•]\s')
_NUMBERED_LINE = re.compile(r'^\d+\.\s')

def _is_list(text: str) -> bool:
    lines = text.split('\n')
    return (any(_BULLET_LINE.match(line) for line in lines)
            or any(_NUMBERED_LINE.match(line) for line in lines))

def detect_content_type(text: str, markers: Optional[Sequence[str]] = None) -> ContentType:
    """
    Classify text as list, quote, technical, story or general.

    Rules are checked in that order and the first match wins:
    bullet or numbered lines make a list; a straight double quote in three
    or fewer sentences makes a quote; any technical marker substring makes
    technical text; more than five sentences with a period make a story.

    Args:
        text: Text to classify, before normalization so line breaks are intact
        markers: Case-sensitive technical markers (defaults to
            DEFAULT_TECHNICAL_MARKERS)

    Returns:
        ContentType: Exactly one label
    """
    if markers is None:
        markers = DEFAULT_TECHNICAL_MARKERS

    if _is_list(text):
        return ContentType.LIST

    sentence_count = len(split_into_sentences(text))

    if '"' in text and sentence_count <= 3:
        return ContentType.QUOTE

    if any(marker in text for marker in markers):
        return ContentType.TECHNICAL

    if sentence_count > 5 and '.' in text:
        return ContentType.STORY

    return ContentType.GENERAL

classify = detect_content_type
