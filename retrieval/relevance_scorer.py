"""
Lexical relevance scoring.

A cheap query/segment heuristic, not an embedding similarity:
score = 0.8 * term match ratio + 0.2 * length factor.
Shorter segments that match get a small boost as presumably denser answers.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Mapping, Optional, Union

from segmentation.models import Segment

logger = logging.getLogger(__name__)

MATCH_WEIGHT = 0.8
LENGTH_WEIGHT = 0.2
# Segments at or below this length get the full length factor
LENGTH_REFERENCE = 1000


@dataclass
class RelevanceResult:
    """A scored candidate."""

    content: str
    score: float
    source: Dict[str, Any] = field(default_factory=dict)
    metadata: Dict[str, Any] = field(default_factory=dict)


def match_ratio(segment_text: str, query: str) -> float:
    """
    Fraction of query terms found as substrings of the segment.

    Args:
        segment_text: Candidate text
        query: Query string

    Returns:
        Ratio in [0, 1]; 0.0 for a query with no terms
    """
    terms = query.lower().split()
    if not terms:
        return 0.0

    text_lower = segment_text.lower()
    matched = sum(1 for term in terms if term in text_lower)
    return matched / len(terms)


def length_factor(segment_text: str) -> float:
    """min(1, 1000 / len(segment_text)); 1.0 for empty text."""
    if not segment_text:
        return 1.0
    return min(1.0, LENGTH_REFERENCE / len(segment_text))


def score_relevance(segment_text: str, query: str) -> float:
    """
    Score a segment against a query.

    Args:
        segment_text: Candidate text
        query: Query string

    Returns:
        Score in [0, 1]; 0.0 when the query has no terms
    """
    if not query.split():
        return 0.0

    score = MATCH_WEIGHT * match_ratio(segment_text, query) + LENGTH_WEIGHT * length_factor(
        segment_text
    )
    return max(0.0, min(1.0, score))


Candidate = Union[Segment, Mapping[str, Any]]


def _split_candidate(candidate: Candidate):
    """Return (content, source identifiers, metadata) for a candidate."""
    if isinstance(candidate, Segment):
        candidate = candidate.to_dict()

    content = candidate.get("content") or ""
    metadata = dict(candidate.get("metadata") or {})
    source = {k: v for k, v in candidate.items() if k not in ("content", "metadata")}
    return content, source, metadata


def rank_segments(
    candidates: Iterable[Candidate],
    query: str,
    threshold: float = 0.0,
    limit: Optional[int] = None,
) -> List[RelevanceResult]:
    """
    Score, filter and rank candidates.

    Args:
        candidates: Segments or dicts with 'content' and optional 'metadata';
            every other key passes through as a source identifier
        query: Query string
        threshold: Minimum score to keep a result
        limit: Maximum results (None for all)

    Returns:
        RelevanceResult list sorted by descending score
    """
    results = []
    for candidate in candidates:
        content, source, metadata = _split_candidate(candidate)
        score = score_relevance(content, query)
        if score >= threshold:
            results.append(
                RelevanceResult(content=content, score=score, source=source, metadata=metadata)
            )

    # sorted() is stable: equal scores keep candidate order
    results = sorted(results, key=lambda r: r.score, reverse=True)

    if limit is not None:
        results = results[: max(0, limit)]

    logger.debug(f"Ranked {len(results)} results for query '{query}'")
    return results


class RelevanceRanker:
    """
    Lexical ranker with default threshold and limit.

    Usage:
        ranker = RelevanceRanker(threshold=0.3, limit=5)
        results = ranker.rank(segments, "payment terms")
    """

    def __init__(self, threshold: float = 0.3, limit: Optional[int] = 5):
        self.threshold = threshold
        self.limit = limit

    def rank(
        self,
        candidates: Iterable[Candidate],
        query: str,
        threshold: Optional[float] = None,
        limit: Optional[int] = None,
    ) -> List[RelevanceResult]:
        return rank_segments(
            candidates,
            query,
            threshold=self.threshold if threshold is None else threshold,
            limit=self.limit if limit is None else limit,
        )
