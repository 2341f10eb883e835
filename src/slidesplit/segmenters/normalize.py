"""Text cleanup applied before any splitting decision."""

import re

# A whitespace run holding two or more newlines is a paragraph break.
_PARAGRAPH_BREAK = re.compile(r'\s*\n\s*\n\s*')
_WHITESPACE = re.compile(r'\s+')
_DOT_RUN = re.compile(r'\.{3,}')

_QUOTE_MAP = str.maketrans({
    '“': '"',
    '”': '"',
    '‘': "'",
    '’': "'",
})

PARAGRAPH_SEPARATOR = "\n\n"

def normalize_whitespace(text: str) -> str:
    """
    Collapse whitespace runs to single spaces while keeping paragraph breaks.

    Any run containing two or more newlines becomes exactly one blank line;
    every other run (single newlines included) becomes one space.
    """
    paragraphs = (_WHITESPACE.sub(' ', p).strip() for p in _PARAGRAPH_BREAK.split(text))
    return PARAGRAPH_SEPARATOR.join(p for p in paragraphs if p)

def normalize(text: str) -> str:
    """
    Clean text for slide readability.

    Whitespace is collapsed (paragraph breaks survive as a single blank line),
    runs of three or more periods become an ellipsis, curly quotes become
    straight quotes and the result is trimmed. Idempotent.

    Args:
        text: Raw input text

    Returns:
        str: Normalized text
    """
    if not text:
        return ""
    text = normalize_whitespace(text)
    text = _DOT_RUN.sub('...', text)
    text = text.translate(_QUOTE_MAP)
    return text.strip()

# Name used by the editor-facing API.
optimize_for_slides = normalize

def truncate_text(text: str, max_length: int, suffix: str = "...") -> str:
    """Truncate text to max_length characters, marking the cut with suffix."""
    if len(text) <= max_length:
        return text
    return text[:max(0, max_length - len(suffix))] + suffix
