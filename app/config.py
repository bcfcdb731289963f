"""
Configuration module for the segmentation service.
Manages all environment variables and settings.

Core modules never read these settings: the app layer resolves
defaults here and passes them explicitly.
"""

import logging
import os
from dataclasses import dataclass, field
from functools import lru_cache

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


@dataclass
class SegmentationConfig:
    """Segmentation defaults used when a caller leaves options unset."""
    default_chunk_size: int = field(
        default_factory=lambda: int(os.getenv("DEFAULT_CHUNK_SIZE", "1000"))
    )
    overlap_size: int = field(default_factory=lambda: int(os.getenv("OVERLAP_SIZE", "200")))
    strategy: str = field(
        default_factory=lambda: os.getenv("SEGMENTATION_STRATEGY", "paragraph")
    )
    min_segment_length: int = field(
        default_factory=lambda: int(os.getenv("MIN_SEGMENT_LENGTH", "50"))
    )


@dataclass
class RetrievalConfig:
    """Search and external retrieval defaults."""
    search_limit: int = field(default_factory=lambda: int(os.getenv("SEARCH_LIMIT", "5")))
    similarity_threshold: float = field(
        default_factory=lambda: float(os.getenv("SIMILARITY_THRESHOLD", "0.3"))
    )
    top_k: int = field(default_factory=lambda: int(os.getenv("RETRIEVAL_TOP_K", "5")))
    score_threshold: float = field(
        default_factory=lambda: float(os.getenv("SCORE_THRESHOLD", "0.5"))
    )


@dataclass
class Settings:
    """Main application settings loaded from environment."""

    DEBUG: bool = field(default_factory=lambda: os.getenv("DEBUG", "false").lower() == "true")
    LOG_LEVEL: str = field(default_factory=lambda: os.getenv("LOG_LEVEL", "INFO"))

    # Nested configs
    segmentation: SegmentationConfig = field(default_factory=SegmentationConfig)
    retrieval: RetrievalConfig = field(default_factory=RetrievalConfig)


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


def configure_logging(level: str = None) -> None:
    """Install the root log handler at LOG_LEVEL."""
    level = (level or get_settings().LOG_LEVEL).upper()
    logging.basicConfig(level=getattr(logging, level, logging.INFO), format=LOG_FORMAT)


settings = get_settings()
