"""
Lexical Retrieval Module.

Scores stored segments against a query with a term-match and length
heuristic, then ranks, filters and truncates them for:
- Local knowledge-base search (limit / similarity_threshold)
- External-knowledge retrieval (top_k / score_threshold)

Usage:
    from retrieval import rank_segments, score_relevance

    score = score_relevance("the quick brown fox", "quick fox")
    results = rank_segments(segments, "quick fox", threshold=0.3, limit=5)
"""

from .external_retrieval import retrieve_records, search_knowledge_base
from .relevance_scorer import (
    RelevanceRanker,
    RelevanceResult,
    length_factor,
    match_ratio,
    rank_segments,
    score_relevance,
)

__all__ = [
    "score_relevance",
    "match_ratio",
    "length_factor",
    "rank_segments",
    "RelevanceRanker",
    "RelevanceResult",
    "search_knowledge_base",
    "retrieve_records",
]
