"""
Document segmentation service.

Resolves unset options from settings, runs the segmenter, logs
validator findings and prepares persistence-ready segment records.
"""

import logging
from functools import lru_cache
from typing import Dict, List, Optional

import tiktoken

from segmentation import (
    Segment,
    SegmentationOptions,
    SegmentationStrategy,
    segment,
    validate_segments,
)

from .config import Settings, settings as default_settings

logger = logging.getLogger(__name__)


@lru_cache()
def _encoding():
    return tiktoken.get_encoding("cl100k_base")


def num_tokens(text: str) -> int:
    """Count tokens using cl100k_base encoding."""
    return len(_encoding().encode(text))


def segment_stats(content: str) -> Dict[str, int]:
    """Character, word and token counts of trimmed content."""
    trimmed = content.strip()
    return {
        "character_count": len(trimmed),
        "word_count": len(trimmed.split()),
        "token_count": num_tokens(trimmed),
    }


class SegmentationService:
    """
    Document-level segmentation.

    Usage:
        service = SegmentationService()
        records = service.process_document(text, doc_id="doc_001", total_pages=12)
    """

    def __init__(self, settings: Optional[Settings] = None):
        self.settings = settings or default_settings

    def resolve_options(
        self,
        chunk_size: Optional[int] = None,
        overlap_size: Optional[int] = None,
        strategy: Optional[str] = None,
    ) -> SegmentationOptions:
        """Fill unset options from settings."""
        config = self.settings.segmentation
        return SegmentationOptions(
            chunk_size=config.default_chunk_size if chunk_size is None else chunk_size,
            overlap_size=config.overlap_size if overlap_size is None else overlap_size,
            strategy=SegmentationStrategy.resolve(strategy or config.strategy),
        )

    def process_document(
        self,
        text: str,
        doc_id: str,
        total_pages: int = 1,
        chunk_size: Optional[int] = None,
        overlap_size: Optional[int] = None,
        strategy: Optional[str] = None,
    ) -> List[Dict]:
        """
        Segment a document and build records for storage.

        Args:
            text: Extracted document text
            doc_id: Document identifier
            total_pages: Page count, used as the default end page
            chunk_size: Characters per segment (default from settings)
            overlap_size: Overlap characters (default from settings)
            strategy: fixed, paragraph or semantic (default from settings)

        Returns:
            List of segment record dicts in segment order

        Raises:
            InvalidConfiguration: Resolved options are invalid
        """
        options = self.resolve_options(chunk_size, overlap_size, strategy)
        segments = segment(text, options)

        report = validate_segments(
            segments,
            min_length=self.settings.segmentation.min_segment_length,
            default_chunk_size=self.settings.segmentation.default_chunk_size,
        )
        for issue in report.issues:
            logger.warning(f"Document {doc_id}: {issue}")

        records = [
            self.build_record(seg, doc_id, index, total_pages)
            for index, seg in enumerate(segments)
        ]

        logger.info(
            f"Document {doc_id} segmented into {len(records)} segments "
            f"({options.strategy.value})"
        )
        return records

    def build_record(
        self,
        seg: Segment,
        doc_id: str,
        index: int,
        total_pages: int = 1,
    ) -> Dict:
        """Attach identity, page defaults and size statistics to a segment."""
        return {
            "id": f"{doc_id}#segment_{index}",
            "doc_id": doc_id,
            "segment_index": index,
            "content": seg.content,
            "start_page": seg.start_page or 1,
            "end_page": seg.end_page or total_pages,
            **segment_stats(seg.content),
            "metadata": dict(seg.metadata),
        }


def to_external_document(record: Dict) -> Dict:
    """
    Map a segment record to the {text, metadata} shape external
    knowledge providers ingest.
    """
    return {
        "text": record["content"],
        "metadata": {
            "doc_id": record.get("doc_id"),
            "segment_index": record.get("segment_index"),
            "segmentation_type": record.get("metadata", {}).get("strategy"),
            "word_count": record.get("word_count"),
            "character_count": record.get("character_count"),
            "start_page": record.get("start_page"),
            "end_page": record.get("end_page"),
        },
    }
