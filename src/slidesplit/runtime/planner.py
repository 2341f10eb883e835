"""Slide planner: normalize, classify, chunk, and top up to the target slide count."""

import math
from typing import List, Optional

from ..core.abc import Segmenter, Logger, Meter
from ..core.types import ContentType, SlidePlan, SplitOptions
from ..policy.schema import SplitPolicy
from ..segmenters.chunker import split_into_advanced_chunks, force_split_by_length
from ..segmenters.classifier import detect_content_type
from ..segmenters.normalize import normalize, normalize_whitespace

def get_reading_time(text: str, words_per_minute: int = 200) -> int:
    """Estimated reading time in whole minutes, rounded up."""
    words = len(text.split())
    return math.ceil(words / words_per_minute)

class SlidePlanner:
    """
    Splits text into one fragment per slide, adapting to the content shape.
    Every input maps to a non-empty fragment list; the planner never raises.
    """

    def __init__(self, *, policy: Optional[SplitPolicy] = None,
                 segmenter: Optional[Segmenter] = None,
                 logger: Optional[Logger] = None,
                 meter: Optional[Meter] = None):
        """
        Initialize planner with policy and dependencies.

        Args:
            policy: Split policy (defaults to SplitPolicy())
            segmenter: Optional sentence segmenter for the chunker
            logger: Optional structured logger
            meter: Optional metrics collector
        """
        self.policy = policy if policy is not None else SplitPolicy()
        self.segmenter = segmenter
        self.log = logger
        self.meter = meter

    def options_for(self, content_type: ContentType, ideal_chunk_size: int, text_length: int) -> SplitOptions:
        """
        Resolve chunker options for a content type.

        Args:
            content_type: Classifier label
            ideal_chunk_size: ceil(text_length / target_slides)
            text_length: Length of the trimmed text

        Returns:
            SplitOptions: Defaults from the policy with the content rule applied
        """
        cfg = self.policy.chunking
        options = SplitOptions(
            preserve_paragraphs=True,
            respect_sentences=True,
            respect_words=True,
            min_chunk_size=min(cfg.min_chunk_cap, ideal_chunk_size * cfg.min_chunk_ratio),
            max_chunk_size=min(ideal_chunk_size * cfg.max_chunk_ratio, text_length),
        )

        rule = self.policy.rule_for(content_type)
        for flag in ("preserve_paragraphs", "respect_sentences", "respect_words"):
            value = getattr(rule, flag)
            if value is not None:
                setattr(options, flag, value)

        if rule.min_chunk_floor is not None or rule.min_chunk_ratio is not None:
            options.min_chunk_size = max(rule.min_chunk_floor or 0,
                                         ideal_chunk_size * (rule.min_chunk_ratio or 0))
        if rule.max_chunk_ratio is not None:
            options.max_chunk_size = min(options.max_chunk_size, ideal_chunk_size * rule.max_chunk_ratio)

        return options

    def plan(self, text: Optional[str], target_slides: int = 3) -> SlidePlan:
        """
        Plan text into slide fragments.

        Args:
            text: Raw input text
            target_slides: Requested number of slides (a lower bound, not exact)

        Returns:
            SlidePlan: Fragments plus the decisions that produced them
        """
        limits = self.policy.limits

        if text is None or not text.strip():
            if self.log:
                self.log.warn("empty_input", placeholder=self.policy.placeholder)
            return SlidePlan(fragments=[self.policy.placeholder], notes=["empty_input"])

        trimmed = text.strip()
        length = len(trimmed)

        if length < limits.short_text_floor:
            return SlidePlan(fragments=[trimmed], ideal_chunk_size=length, notes=["short_text"])

        notes: List[str] = []
        target = max(1, int(target_slides or 1))
        if length < limits.single_slide_below and target > 1:
            target = 1
            notes.append("clamped_to_single_slide")

        try:
            return self._plan(trimmed, target, notes)
        except Exception as e:
            if self.log:
                self.log.error("plan_failed", error=str(e), text_length=length)
            if self.meter:
                self.meter.inc("slidesplit.plan_failed")
            return SlidePlan(fragments=[trimmed], target_slides=target, notes=notes + ["plan_failed"])

    def _plan(self, trimmed: str, target: int, notes: List[str]) -> SlidePlan:
        # Sizes are measured on the text the chunker actually splits.
        source = normalize_whitespace(trimmed)
        length = len(source)
        ideal = math.ceil(length / target)

        content_type = detect_content_type(trimmed, self.policy.technical_markers)
        options = self.options_for(content_type, ideal, length)
        if self.log:
            self.log.info("content_classified",
                          content_type=content_type.value,
                          ideal_chunk_size=ideal,
                          target_slides=target)

        chunks = split_into_advanced_chunks(source, ideal, options,
                                            segmenter=self.segmenter,
                                            undersized=self.policy.undersized)

        used_fallback = False
        fragments = chunks
        if len(chunks) < target:
            if self.log:
                self.log.warn("undershoot_fallback",
                              content_type=content_type.value,
                              chunks=len(chunks),
                              target_slides=target)
            if self.meter:
                self.meter.inc("slidesplit.fallback_used", content_type=content_type.value)
            fragments = self._force_to_target(chunks or [source], length, target)
            used_fallback = True

        plan = SlidePlan(
            fragments=fragments,
            content_type=content_type,
            target_slides=target,
            ideal_chunk_size=ideal,
            options=options,
            used_fallback=used_fallback,
            notes=notes,
        )

        if self.meter:
            self.meter.observe("slidesplit.fragment_count", plan.slide_count,
                               content_type=content_type.value)
            self.meter.observe("slidesplit.balance", plan.length_summary["balance"])
        if self.log:
            self.log.info("plan_complete",
                          content_type=content_type.value,
                          fragments=plan.slide_count,
                          used_fallback=used_fallback)
        return plan

    def _force_to_target(self, sources: List[str], length: int, target: int) -> List[str]:
        """
        Length-split every source chunk by its share of the desired chunk size,
        then halve the longest fragment until the target is reached.
        """
        fallback = self.policy.fallback
        desired = max(1, math.ceil(length / target))
        forced: List[str] = []

        for source in sources:
            quota = max(1, math.ceil(len(source) / desired))
            forced.extend(force_split_by_length(source, quota,
                                                search_window=fallback.search_window,
                                                boundaries=fallback.boundaries))

        forced = [f for f in forced if f]

        # Quotas are rounded per chunk, so separators can cost a slide.
        while len(forced) < target:
            longest = max(range(len(forced)), key=lambda i: len(forced[i]))
            halves = force_split_by_length(forced[longest], 2,
                                           search_window=fallback.search_window,
                                           boundaries=fallback.boundaries)
            if len(halves) < 2:
                break
            forced[longest:longest + 1] = halves

        return forced

    def split(self, text: Optional[str], target_slides: int = 3) -> List[str]:
        """Plan text and return only the fragments."""
        return self.plan(text, target_slides).fragments

    def optimal_slide_count(self, text: Optional[str]) -> int:
        """
        Recommend a slide count from content type and reading time.

        Args:
            text: Input text

        Returns:
            int: Recommended target for plan()/split()
        """
        text = text or ""
        length = len(text.strip())
        limits = self.policy.limits

        if length < limits.single_slide_below:
            return 1

        content_type = detect_content_type(text, self.policy.technical_markers)
        rule = self.policy.rule_for(content_type)

        if rule.chars_per_slide is None:
            count = rule.min_slides
        else:
            count = min(rule.max_slides, max(rule.min_slides, math.ceil(length / rule.chars_per_slide)))

        reading = self.policy.reading
        if get_reading_time(text, reading.words_per_minute) > reading.extra_slide_after_minutes:
            count = min(count + 1, limits.max_slide_count)

        return count

    def estimate(self, text: Optional[str], chars_per_slide: Optional[int] = None) -> int:
        """
        Number of slides the text currently splits into at its recommended count.

        Args:
            text: Raw input text
            chars_per_slide: When given, never estimate fewer than
                ceil(length / chars_per_slide) slides

        Returns:
            int: Estimated slide count (at least 1)
        """
        optimized = normalize(text or "")
        if not optimized:
            return 1

        count = self.plan(optimized, self.optimal_slide_count(optimized)).slide_count
        if chars_per_slide:
            count = max(count, math.ceil(len(optimized) / chars_per_slide))
        return max(1, count)

_default_planner = SlidePlanner()

def _planner_for(policy: Optional[SplitPolicy]) -> SlidePlanner:
    return _default_planner if policy is None else SlidePlanner(policy=policy)

def smart_split(text: Optional[str], target_slides: int = 3,
                policy: Optional[SplitPolicy] = None) -> List[str]:
    """Split text into about target_slides fragments (see SlidePlanner.plan)."""
    return _planner_for(policy).split(text, target_slides)

def get_optimal_slide_count(text: Optional[str], policy: Optional[SplitPolicy] = None) -> int:
    """Recommended slide count for text (see SlidePlanner.optimal_slide_count)."""
    return _planner_for(policy).optimal_slide_count(text)

def estimate_slide_count(text: Optional[str], chars_per_slide: Optional[int] = None,
                         policy: Optional[SplitPolicy] = None) -> int:
    """Live slide-count estimate for text (see SlidePlanner.estimate)."""
    return _planner_for(policy).estimate(text, chars_per_slide)
