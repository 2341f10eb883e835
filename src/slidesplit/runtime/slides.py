"""Pairing slide fragments with caller-selected images."""

from dataclasses import dataclass
from typing import List, Optional, Sequence

@dataclass
class Slide:
    """One carousel slide: its text and the image chosen for it."""
    index: int
    text: str
    image: str = ""     # image URI, "" when none selected yet

def pair_with_images(fragments: Sequence[str], images: Optional[Sequence[str]] = None,
                     filler: str = "") -> List[Slide]:
    """
    Build one slide per fragment.

    The fragment count decides the slide count: surplus images are ignored
    and missing ones are padded with filler.
    """
    images = list(images or [])
    return [
        Slide(index=i, text=text, image=images[i] if i < len(images) else filler)
        for i, text in enumerate(fragments)
    ]
