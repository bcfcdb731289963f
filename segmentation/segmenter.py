"""
Segmentation dispatcher.

A single dispatch point selects the chunker for a strategy. Every
chunker shares the call signature (text, chunk_size, overlap_size).
"""

import logging
from dataclasses import replace
from typing import Callable, Dict, List, Optional, Union

from .fixed_chunker import fixed_size_chunk
from .models import Segment, SegmentationOptions, SegmentationStrategy
from .paragraph_chunker import paragraph_chunk
from .semantic_chunker import semantic_chunk

logger = logging.getLogger(__name__)

Chunker = Callable[[str, int, int], List[Segment]]

CHUNKERS: Dict[SegmentationStrategy, Chunker] = {
    SegmentationStrategy.FIXED: fixed_size_chunk,
    SegmentationStrategy.PARAGRAPH: paragraph_chunk,
    SegmentationStrategy.SEMANTIC: semantic_chunk,
}


def segment(text: str, options: SegmentationOptions) -> List[Segment]:
    """
    Split text into an ordered sequence of segments.

    Args:
        text: Document text
        options: Chunk size, overlap and strategy

    Returns:
        List of Segment; empty for empty or whitespace-only text

    Raises:
        InvalidConfiguration: chunk_size <= 0 or overlap_size < 0
    """
    options.validate()

    if not text or not text.strip():
        return []

    strategy = SegmentationStrategy.resolve(options.strategy)
    chunker = CHUNKERS.get(strategy, fixed_size_chunk)

    logger.info(
        f"Segmenting {len(text)} chars with strategy={strategy.value} "
        f"chunk_size={options.chunk_size} overlap_size={options.overlap_size}"
    )
    segments = chunker(text, options.chunk_size, options.overlap_size)
    logger.info(f"Segmentation produced {len(segments)} segments ({strategy.value})")

    return segments


class Segmenter:
    """
    Segmenter bound to a set of options.

    Usage:
        segmenter = Segmenter(chunk_size=800, overlap_size=100, strategy="paragraph")
        segments = segmenter.segment(document_text)

        # With explicit options
        options = SegmentationOptions(chunk_size=500, overlap_size=0)
        segmenter = Segmenter(options=options)
    """

    def __init__(
        self,
        chunk_size: Optional[int] = None,
        overlap_size: Optional[int] = None,
        strategy: Union[str, SegmentationStrategy, None] = None,
        options: Optional[SegmentationOptions] = None,
    ):
        # Copy so overrides never leak into a caller's shared options
        self.options = replace(options) if options is not None else SegmentationOptions()
        if chunk_size is not None:
            self.options.chunk_size = chunk_size
        if overlap_size is not None:
            self.options.overlap_size = overlap_size
        if strategy is not None:
            self.options.strategy = SegmentationStrategy.resolve(strategy)

        # Fail at construction rather than on first use
        self.options.validate()

    def segment(self, text: str) -> List[Segment]:
        return segment(text, self.options)
