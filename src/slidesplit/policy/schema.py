"""Pydantic schemas for YAML split-policy validation."""

from pydantic import BaseModel, Field
from typing import Dict, List, Literal, Optional

from ..core.types import ContentType

class Limits(BaseModel):
    """Length thresholds for degenerate inputs."""

    class Config:
        extra = "forbid"

    short_text_floor: int = Field(default=20, ge=0,
                                  description="Trimmed texts shorter than this are never split")
    single_slide_below: int = Field(default=50, ge=0,
                                    description="Trimmed texts shorter than this get one slide")
    max_slide_count: int = Field(default=8, ge=1,
                                 description="Upper bound for recommended slide counts")

class ChunkingCfg(BaseModel):
    """Default chunk size bounds, relative to the ideal chunk size."""

    class Config:
        extra = "forbid"

    min_chunk_cap: float = Field(default=10, ge=0,
                                 description="Minimum chunk size never exceeds this")
    min_chunk_ratio: float = Field(default=0.3, ge=0.0, le=1.0)
    max_chunk_ratio: float = Field(default=1.5, ge=1.0,
                                   description="Maximum chunk size as a multiple of the ideal size")

class FallbackCfg(BaseModel):
    """Length-based fallback splitter settings."""

    class Config:
        extra = "forbid"

    search_window: int = Field(default=40, ge=0,
                               description="How far back a cut may move to reach a boundary")
    boundaries: str = Field(default=" .,;:\n", min_length=1,
                            description="Characters a cut may follow")

class ReadingCfg(BaseModel):
    """Reading-time model used for slide count recommendations."""

    class Config:
        extra = "forbid"

    words_per_minute: int = Field(default=200, gt=0)
    extra_slide_after_minutes: int = Field(default=2, ge=0,
                                           description="Add a slide when reading time exceeds this")

class ContentRule(BaseModel):
    """Per content type overrides and slide-count recommendation."""

    class Config:
        extra = "forbid"

    preserve_paragraphs: Optional[bool] = None
    respect_sentences: Optional[bool] = None
    respect_words: Optional[bool] = None
    min_chunk_floor: Optional[float] = Field(default=None, ge=0,
                                             description="Raise the minimum chunk size to at least this")
    min_chunk_ratio: Optional[float] = Field(default=None, ge=0.0, le=1.0,
                                             description="Or to this multiple of the ideal size, whichever is larger")
    max_chunk_ratio: Optional[float] = Field(default=None, gt=0.0,
                                             description="Cap the maximum chunk size at this multiple")
    chars_per_slide: Optional[int] = Field(default=None, gt=0,
                                           description="None means always recommend min_slides")
    min_slides: int = Field(default=1, ge=1)
    max_slides: int = Field(default=5, ge=1)

def default_rules() -> Dict[ContentType, ContentRule]:
    """Built-in rules for each content type."""
    return {
        ContentType.LIST: ContentRule(respect_sentences=False,
                                      chars_per_slide=150, min_slides=2, max_slides=5),
        ContentType.STORY: ContentRule(respect_words=False,
                                       chars_per_slide=200, min_slides=3, max_slides=6),
        ContentType.TECHNICAL: ContentRule(min_chunk_floor=50, min_chunk_ratio=0.4,
                                           chars_per_slide=100, min_slides=2, max_slides=8),
        ContentType.QUOTE: ContentRule(max_chunk_ratio=1.2,
                                       chars_per_slide=None, min_slides=1, max_slides=1),
        ContentType.GENERAL: ContentRule(chars_per_slide=180, min_slides=2, max_slides=5),
    }

class SplitPolicy(BaseModel):
    """Complete policy configuration for slide splitting."""

    class Config:
        extra = "forbid"  # Strict validation

    version: int = Field(default=1, description="Policy schema version")
    placeholder: str = Field(default="No content provided",
                             description="Single fragment returned for blank input")
    undersized: Literal["merge", "drop"] = Field(default="merge",
                                                 description="What to do with chunks below the minimum size")
    limits: Limits = Field(default_factory=Limits)
    chunking: ChunkingCfg = Field(default_factory=ChunkingCfg)
    fallback: FallbackCfg = Field(default_factory=FallbackCfg)
    reading: ReadingCfg = Field(default_factory=ReadingCfg)
    technical_markers: List[str] = Field(default_factory=lambda: ["function", "class", "API", "code"])
    rules: Dict[ContentType, ContentRule] = Field(default_factory=default_rules)

    def rule_for(self, content_type: ContentType) -> ContentRule:
        """Rule for a content type, or an empty rule when the policy has none."""
        return self.rules.get(content_type, ContentRule())

    def validate_rules(self) -> List[str]:
        """Validate rule configuration and return any issues."""
        issues = []

        missing = [ct.value for ct in ContentType if ct not in self.rules]
        if missing:
            issues.append(f"Missing rules for content types: {missing}")

        for content_type, rule in self.rules.items():
            if rule.min_slides > rule.max_slides:
                issues.append(f"Rule '{content_type.value}' has min_slides > max_slides "
                              f"({rule.min_slides} > {rule.max_slides})")
            if rule.max_slides > self.limits.max_slide_count:
                issues.append(f"Rule '{content_type.value}' max_slides exceeds limits.max_slide_count")

        if not [m for m in self.technical_markers if m]:
            issues.append("No technical markers configured")

        if self.limits.short_text_floor > self.limits.single_slide_below:
            issues.append("limits.short_text_floor must not exceed limits.single_slide_below")

        return issues
