"""Test slide assembly and fragment statistics."""

import json
import pytest

from slidesplit.core.stats import length_summary
from slidesplit.core.types import ContentType
from slidesplit.core.util import safe_json
from slidesplit.runtime.slides import Slide, pair_with_images


class TestPairWithImages:
    """The fragment count decides the slide count."""

    def test_one_image_per_fragment(self):
        slides = pair_with_images(["a", "b"], ["img1", "img2"])
        assert slides == [Slide(0, "a", "img1"), Slide(1, "b", "img2")]

    def test_missing_images_are_padded(self):
        slides = pair_with_images(["a", "b", "c"], ["img1"], filler="placeholder.png")
        assert [s.image for s in slides] == ["img1", "placeholder.png", "placeholder.png"]

    def test_surplus_images_are_ignored(self):
        slides = pair_with_images(["a"], ["img1", "img2", "img3"])
        assert len(slides) == 1

    def test_no_images(self):
        slides = pair_with_images(["a", "b"])
        assert [s.image for s in slides] == ["", ""]
        assert [s.index for s in slides] == [0, 1]


class TestLengthSummary:
    """Test fragment length statistics."""

    def test_empty(self):
        summary = length_summary([])
        assert summary["count"] == 0
        assert summary["balance"] == 0

    def test_equal_lengths_are_balanced(self):
        summary = length_summary(["abcd", "efgh", "ijkl"])
        assert summary["mean"] == 4
        assert summary["std"] == 0
        assert summary["balance"] == 1.0

    def test_uneven_lengths(self):
        summary = length_summary(["a" * 10, "b" * 30])
        assert summary["min"] == 10
        assert summary["max"] == 30
        assert summary["mean"] == 20
        assert summary["balance"] == pytest.approx(0.5)


class TestSafeJson:
    def test_enum_and_dataclass(self):
        data = json.loads(safe_json({"type": ContentType.QUOTE, "slide": Slide(0, "x")}))
        assert data == {"type": "quote", "slide": {"index": 0, "text": "x", "image": ""}}
