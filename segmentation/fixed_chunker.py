"""
Fixed-size character window chunking.

Use only when structural boundaries aren't available or appropriate.
"""

import logging
from typing import List

from .models import Segment, SegmentationStrategy

logger = logging.getLogger(__name__)


def fixed_size_chunk(
    text: str,
    chunk_size: int = 1000,
    overlap_size: int = 200,
) -> List[Segment]:
    """
    Split text into character windows.

    Each window is text[start:start + chunk_size], trimmed. The next
    window starts overlap_size characters before the previous end.

    Args:
        text: Text to split
        chunk_size: Maximum characters per window
        overlap_size: Characters shared by consecutive windows

    Returns:
        List of Segment with start_index/end_index metadata
    """
    segments = []
    text_len = len(text)

    start = 0
    while start < text_len:
        end = min(start + chunk_size, text_len)
        content = text[start:end].strip()

        if content:
            segments.append(
                Segment(
                    content=content,
                    metadata={
                        "strategy": SegmentationStrategy.FIXED.value,
                        "start_index": start,
                        "end_index": end,
                    },
                )
            )

        if end >= text_len:
            break

        # Move start with overlap
        next_start = end - overlap_size
        if next_start <= start:
            logger.warning(
                f"Fixed window stalled at offset {start} "
                f"(chunk_size={chunk_size}, overlap_size={overlap_size}); stopping"
            )
            break
        start = next_start

    return segments
