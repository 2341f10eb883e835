"""Data types and result structures for slide splitting."""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Dict

from .stats import length_summary

class ContentType(str, Enum):
    """Shape of the input text, used to pick splitting options."""
    LIST = "list"
    QUOTE = "quote"
    TECHNICAL = "technical"
    STORY = "story"
    GENERAL = "general"

@dataclass
class SplitOptions:
    """Structural preferences for the chunker. Derived by the planner."""
    preserve_paragraphs: bool = True
    respect_sentences: bool = True
    respect_words: bool = True
    min_chunk_size: float = 50
    max_chunk_size: Optional[float] = None   # None -> max_chars of the call

@dataclass
class SlidePlan:
    """Result of planning a text into slide fragments."""
    fragments: List[str]                       # one text per slide, reading order
    content_type: Optional[ContentType] = None  # None for degenerate inputs
    target_slides: int = 1                     # target after clamping
    ideal_chunk_size: int = 0
    options: Optional[SplitOptions] = None
    used_fallback: bool = False                # length splitter kicked in
    notes: List[str] = field(default_factory=list)

    @property
    def slide_count(self) -> int:
        """Number of slides produced."""
        return len(self.fragments)

    @property
    def length_summary(self) -> Dict[str, float]:
        """Fragment length statistics (count/mean/min/max/std/balance)."""
        return length_summary(self.fragments)
