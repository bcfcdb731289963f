"""
Paragraph-aware chunking.

Paragraphs are kept whole: a paragraph longer than the budget becomes
its own oversized segment, which the validator later flags.
"""

import logging
from typing import List

from .accumulator import GreedyAccumulator
from .models import Segment, SegmentationStrategy
from .sentence_splitter import split_paragraphs

logger = logging.getLogger(__name__)

PARAGRAPH_SEPARATOR = "\n\n"


def paragraph_chunk(
    text: str,
    chunk_size: int = 1000,
    overlap_size: int = 200,
) -> List[Segment]:
    """
    Greedily pack blank-line separated paragraphs into segments.

    Args:
        text: Document text
        chunk_size: Character budget per segment
        overlap_size: Character overlap, carried as ceil(overlap_size / 5) words

    Returns:
        List of Segment with paragraph_start/paragraph_end metadata
    """
    paragraphs = split_paragraphs(text)
    accumulator = GreedyAccumulator(chunk_size, overlap_size, PARAGRAPH_SEPARATOR)

    return [
        Segment(
            content=chunk.text,
            metadata={
                "strategy": SegmentationStrategy.PARAGRAPH.value,
                "paragraph_start": chunk.first_unit,
                "paragraph_end": chunk.last_unit,
            },
        )
        for chunk in accumulator.run(paragraphs)
    ]
