"""
Sentence-greedy chunking with heuristic break tagging.

This is not real semantic analysis: the break point is a keyword
lookup over a fixed vocabulary of discourse markers. The tag never
moves a split; it only labels why a segment is a reasonable place to
stop.
"""

import logging
from typing import List, Optional

from .accumulator import GreedyAccumulator
from .models import Segment, SegmentationStrategy
from .sentence_splitter import split_into_sentences

logger = logging.getLogger(__name__)

SENTENCE_SEPARATOR = " "
DEFAULT_BREAK_POINT = "paragraph_end"

# Checked in order; the first match wins
SEMANTIC_MARKERS = [
    "因此",
    "所以",
    "总之",
    "综上所述",
    "另外",
    "此外",
    "然而",
    "但是",
    "therefore",
    "however",
    "moreover",
    "furthermore",
    "in conclusion",
]


def find_break_point(text: str, markers: Optional[List[str]] = None) -> str:
    """
    Find the first discourse marker present in text.

    Args:
        text: Segment text
        markers: Marker vocabulary (uses SEMANTIC_MARKERS if None)

    Returns:
        The matching marker, or "paragraph_end" when none is present
    """
    markers = markers or SEMANTIC_MARKERS
    lowered = text.lower()

    for marker in markers:
        if marker.lower() in lowered:
            return marker

    return DEFAULT_BREAK_POINT


def semantic_chunk(
    text: str,
    chunk_size: int = 1000,
    overlap_size: int = 200,
) -> List[Segment]:
    """
    Greedily pack sentences into segments and tag break points.

    Args:
        text: Document text
        chunk_size: Character budget per segment
        overlap_size: Character overlap, carried as ceil(overlap_size / 5) words

    Returns:
        List of Segment with sentence_start/sentence_end metadata;
        every budget flush also carries break_point
    """
    sentences = [s.text for s in split_into_sentences(text)]
    accumulator = GreedyAccumulator(chunk_size, overlap_size, SENTENCE_SEPARATOR)

    segments = []
    for chunk in accumulator.run(sentences):
        metadata = {
            "strategy": SegmentationStrategy.SEMANTIC.value,
            "sentence_start": chunk.first_unit,
            "sentence_end": chunk.last_unit,
        }
        if chunk.budget_flush:
            metadata["break_point"] = find_break_point(chunk.text)

        segments.append(Segment(content=chunk.text, metadata=metadata))

    return segments
