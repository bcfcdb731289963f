"""
Segmentation data model.

Segments are pure computation outputs: the caller assigns durable ids,
page defaults and timestamps before storing them.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Optional, Union

logger = logging.getLogger(__name__)


class InvalidConfiguration(ValueError):
    """Raised when segmentation options cannot produce forward progress."""

    pass


class SegmentationStrategy(Enum):
    """Segment boundary strategies."""

    FIXED = "fixed"
    PARAGRAPH = "paragraph"
    SEMANTIC = "semantic"

    @classmethod
    def resolve(cls, value: Union[str, "SegmentationStrategy", None]) -> "SegmentationStrategy":
        """
        Resolve a strategy name.

        Unknown names fall back to FIXED.
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            return cls.FIXED


@dataclass
class SegmentationOptions:
    """Options for a single segmentation call."""

    chunk_size: int = 1000
    overlap_size: int = 200
    strategy: SegmentationStrategy = SegmentationStrategy.FIXED

    def __post_init__(self):
        self.strategy = SegmentationStrategy.resolve(self.strategy)

    def validate(self) -> None:
        """Raise InvalidConfiguration for options that break the contract."""
        if not isinstance(self.chunk_size, int) or self.chunk_size <= 0:
            raise InvalidConfiguration(
                f"chunk_size must be a positive integer, got {self.chunk_size!r}"
            )
        if not isinstance(self.overlap_size, int) or self.overlap_size < 0:
            raise InvalidConfiguration(
                f"overlap_size must be a non-negative integer, got {self.overlap_size!r}"
            )
        if self.overlap_size >= self.chunk_size:
            logger.warning(
                f"overlap_size ({self.overlap_size}) >= chunk_size ({self.chunk_size}); "
                "windows will stop at the first non-advancing step"
            )


@dataclass
class Segment:
    """A bounded slice of source text with boundary metadata."""

    content: str
    start_page: Optional[int] = None
    end_page: Optional[int] = None
    metadata: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "content": self.content,
            "start_page": self.start_page,
            "end_page": self.end_page,
            "metadata": dict(self.metadata),
        }
