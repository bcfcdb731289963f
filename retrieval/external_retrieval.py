"""
Search and retrieval adapters over the lexical scorer.

Two caller contracts share one ranking path:
- Knowledge-base search (limit / similarity_threshold)
- External-knowledge retrieval (top_k / score_threshold)

Both return in-memory response models; serialization is the caller's job.
"""

import logging
from typing import Iterable, List

from shared.schemas import (
    ExternalRetrievalRecord,
    ExternalRetrievalRequest,
    ExternalRetrievalResponse,
    KnowledgeSearchRequest,
    KnowledgeSearchResponse,
    KnowledgeSearchResult,
)

from .relevance_scorer import Candidate, RelevanceResult, rank_segments

logger = logging.getLogger(__name__)


def search_knowledge_base(
    request: KnowledgeSearchRequest,
    candidates: Iterable[Candidate],
) -> KnowledgeSearchResponse:
    """
    Rank stored segments for a knowledge-base query.

    Args:
        request: Query, limit and similarity threshold
        candidates: Candidate segments; 'document_id' and 'segment_index'
            keys are surfaced on each result

    Returns:
        KnowledgeSearchResponse with ranked results
    """
    logger.info(f"Knowledge base search: '{request.query}'")

    ranked = rank_segments(
        candidates,
        request.query,
        threshold=request.similarity_threshold,
        limit=request.limit,
    )
    results = [
        KnowledgeSearchResult(
            content=r.content,
            score=r.score,
            document_id=r.source.get("document_id"),
            segment_index=r.source.get("segment_index"),
            metadata={**r.source, **r.metadata},
        )
        for r in ranked
    ]

    return KnowledgeSearchResponse(
        results=results,
        query=request.query,
        total_results=len(results),
    )


def _record_title(result: RelevanceResult) -> str:
    title = result.source.get("title") or result.metadata.get("original_filename")
    return str(title) if title else ""


def retrieve_records(
    request: ExternalRetrievalRequest,
    candidates: Iterable[Candidate],
) -> ExternalRetrievalResponse:
    """
    Rank candidates into the external-knowledge record shape.

    Args:
        request: Knowledge id, query and retrieval settings
        candidates: Candidate segments

    Returns:
        ExternalRetrievalResponse with at most top_k records
    """
    setting = request.retrieval_setting
    logger.info(
        f"External retrieval for knowledge '{request.knowledge_id}': "
        f"top_k={setting.top_k} score_threshold={setting.score_threshold}"
    )

    ranked = rank_segments(
        candidates,
        request.query,
        threshold=setting.score_threshold,
        limit=setting.top_k,
    )
    records: List[ExternalRetrievalRecord] = [
        ExternalRetrievalRecord(
            content=r.content,
            score=r.score,
            title=_record_title(r),
            metadata={**r.source, **r.metadata},
        )
        for r in ranked
    ]

    return ExternalRetrievalResponse(records=records)
