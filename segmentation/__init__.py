"""
Text Segmentation Module.

Segmentation determines what the retriever can find.
This module provides three strategies behind one dispatch point:
- Fixed-size character windows with overlap
- Paragraph-aware greedy packing
- Sentence-greedy packing with heuristic break tagging

Plus a post-hoc validator for segment quality.

Usage:
    from segmentation import SegmentationOptions, segment, validate_segments

    options = SegmentationOptions(chunk_size=1000, overlap_size=200, strategy="paragraph")
    segments = segment(text, options)
    report = validate_segments(segments)
"""

from .fixed_chunker import fixed_size_chunk
from .models import (
    InvalidConfiguration,
    Segment,
    SegmentationOptions,
    SegmentationStrategy,
)
from .paragraph_chunker import paragraph_chunk
from .segment_validator import SegmentValidationReport, validate_segments
from .segmenter import Segmenter, segment
from .semantic_chunker import find_break_point, semantic_chunk
from .sentence_splitter import Sentence, split_into_sentences, split_paragraphs

__all__ = [
    "segment",
    "Segmenter",
    "Segment",
    "SegmentationOptions",
    "SegmentationStrategy",
    "InvalidConfiguration",
    "fixed_size_chunk",
    "paragraph_chunk",
    "semantic_chunk",
    "find_break_point",
    "Sentence",
    "split_into_sentences",
    "split_paragraphs",
    "validate_segments",
    "SegmentValidationReport",
]
