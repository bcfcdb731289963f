"""
Pydantic schemas for search and retrieval request/response models.
"""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field


class KnowledgeSearchRequest(BaseModel):
    """Request model for local knowledge-base search."""

    query: str = Field(..., min_length=1, description="Search query")
    limit: int = Field(default=5, ge=1, le=100, description="Number of results to return")
    similarity_threshold: float = Field(
        default=0.3, ge=0.0, le=1.0, description="Minimum relevance score"
    )


class KnowledgeSearchResult(BaseModel):
    """A single knowledge-base search hit."""

    content: str
    score: float
    document_id: Optional[str] = None
    segment_index: Optional[int] = None
    metadata: Dict[str, Any] = Field(default_factory=dict)


class KnowledgeSearchResponse(BaseModel):
    """Response model for knowledge-base search."""

    results: List[KnowledgeSearchResult]
    query: str
    total_results: int


class RetrievalSetting(BaseModel):
    """Retrieval parameters sent by an external knowledge consumer."""

    top_k: int = Field(default=5, ge=1, description="Maximum records to return")
    score_threshold: float = Field(
        default=0.5, ge=0.0, le=1.0, description="Minimum relevance score"
    )


class ExternalRetrievalRequest(BaseModel):
    """Request model for external-knowledge retrieval."""

    knowledge_id: str = Field(..., description="Knowledge base identifier")
    query: str = Field(..., min_length=1, description="User query")
    retrieval_setting: RetrievalSetting = Field(default_factory=RetrievalSetting)


class ExternalRetrievalRecord(BaseModel):
    """A single retrieved record."""

    content: str
    score: float
    title: str = ""
    metadata: Dict[str, Any] = Field(default_factory=dict)


class ExternalRetrievalResponse(BaseModel):
    """Response model for external-knowledge retrieval."""

    records: List[ExternalRetrievalRecord] = Field(default_factory=list)
