"""
Segment quality checks.

Flags empty, too-short and too-long segments and reports size
statistics. Findings are advisory: validation never raises.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, List, Mapping, Optional, Sequence, Union

import numpy as np

from .models import Segment

logger = logging.getLogger(__name__)

DEFAULT_MIN_LENGTH = 50
DEFAULT_CHUNK_SIZE = 1000


@dataclass
class SegmentValidationReport:
    """Report on segment quality."""

    is_valid: bool
    issues: List[str] = field(default_factory=list)
    total_segments: int = 0
    empty_segments: int = 0
    short_segments: int = 0  # Non-empty, below min_length
    long_segments: int = 0  # Above max_length
    avg_length: float = 0.0
    min_length: int = 0
    max_length: int = 0
    std_length: float = 0.0


def _content_of(segment: Union[Segment, Mapping[str, Any]]) -> str:
    if isinstance(segment, Mapping):
        return segment.get("content") or ""
    return getattr(segment, "content", "") or ""


def validate_segments(
    segments: Sequence[Union[Segment, Mapping[str, Any]]],
    min_length: int = DEFAULT_MIN_LENGTH,
    default_chunk_size: int = DEFAULT_CHUNK_SIZE,
    max_length: Optional[int] = None,
) -> SegmentValidationReport:
    """
    Validate a segment sequence.

    Args:
        segments: Segment objects or dicts with a 'content' key
        min_length: Short-segment floor (characters)
        default_chunk_size: Configured default chunk size
        max_length: Long-segment ceiling (default 2 x default_chunk_size)

    Returns:
        SegmentValidationReport with one issue per flagged category
    """
    max_length = max_length if max_length is not None else default_chunk_size * 2
    contents = [_content_of(s) for s in segments]

    if not contents:
        return SegmentValidationReport(is_valid=True)

    empty = sum(1 for c in contents if not c.strip())
    short = sum(1 for c in contents if c.strip() and len(c.strip()) < min_length)
    long = sum(1 for c in contents if len(c) > max_length)

    issues = []
    if empty:
        issues.append(f"Found {empty} empty segment(s)")
    if short:
        issues.append(f"Found {short} short segment(s) (<{min_length} characters)")
    if long:
        issues.append(f"Found {long} long segment(s) (>{max_length} characters)")

    lengths = np.array([len(c) for c in contents])

    return SegmentValidationReport(
        is_valid=not issues,
        issues=issues,
        total_segments=len(contents),
        empty_segments=empty,
        short_segments=short,
        long_segments=long,
        avg_length=float(np.mean(lengths)),
        min_length=int(np.min(lengths)),
        max_length=int(np.max(lengths)),
        std_length=float(np.std(lengths)),
    )
