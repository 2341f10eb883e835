"""
slidesplit - Turn plain text into carousel slide fragments.

A pure, stateless segmentation library: text plus a target slide count in,
an ordered list of slide texts out. Images, layout and rendering belong to
the caller.
"""

__version__ = "0.1.0"

from .core.types import ContentType, SplitOptions, SlidePlan
from .runtime.planner import (
    SlidePlanner,
    smart_split,
    get_optimal_slide_count,
    estimate_slide_count,
    get_reading_time,
)
from .runtime.slides import Slide, pair_with_images
from .segmenters.normalize import normalize, optimize_for_slides, truncate_text
from .segmenters.classifier import detect_content_type, classify

__all__ = [
    'ContentType', 'SplitOptions', 'SlidePlan', 'SlidePlanner',
    'smart_split', 'get_optimal_slide_count', 'estimate_slide_count', 'get_reading_time',
    'Slide', 'pair_with_images',
    'normalize', 'optimize_for_slides', 'truncate_text',
    'detect_content_type', 'classify',
]
