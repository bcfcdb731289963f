"""Tests for lexical relevance scoring and ranking."""

import pytest

from retrieval import (
    RelevanceRanker,
    length_factor,
    match_ratio,
    rank_segments,
    score_relevance,
)
from segmentation import Segment

CANDIDATES = [
    {"id": "a", "content": "nothing relevant here", "metadata": {"page": 1}},
    {"id": "b", "content": "quick brown fox", "metadata": {}},
    {"id": "c", "content": "a quick dog"},
]


# ---------------------------------------------------------------------------
# Scoring
# ---------------------------------------------------------------------------

def test_full_match_short_text():
    assert match_ratio("the quick brown fox", "quick fox") == 1.0
    assert length_factor("the quick brown fox") == 1.0
    assert score_relevance("the quick brown fox", "quick fox") == pytest.approx(1.0)


def test_partial_match_linear_combination():
    # match_ratio 1/2, length_factor 1
    assert score_relevance("the quick brown fox", "quick cat") == pytest.approx(0.8 * 0.5 + 0.2 * 1.0)


def test_length_factor_penalises_long_text():
    text = "fox " * 500  # 2000 chars
    assert length_factor(text) == pytest.approx(0.5)
    assert score_relevance(text, "fox") == pytest.approx(0.8 * 1.0 + 0.2 * 0.5)


def test_no_match_keeps_length_component():
    assert score_relevance("hello world", "xyz") == pytest.approx(0.2)


def test_case_insensitive_substring_match():
    assert score_relevance("The QUICK foxes", "quick FOX") == pytest.approx(1.0)


@pytest.mark.parametrize("query", ["", "   ", "\n\t"])
def test_query_without_terms_scores_zero(query):
    assert score_relevance("anything at all", query) == 0.0
    assert match_ratio("anything at all", query) == 0.0


def test_empty_segment_text():
    assert length_factor("") == 1.0
    assert score_relevance("", "fox") == pytest.approx(0.2)


@pytest.mark.parametrize(
    "text,query",
    [
        ("", ""),
        ("a", "a a a a"),
        ("x" * 10000, "x"),
        ("机器学习是人工智能的一个分支", "机器学习"),
        ("short", "completely unrelated words here"),
    ],
)
def test_score_bounds(text, query):
    assert 0.0 <= score_relevance(text, query) <= 1.0


# ---------------------------------------------------------------------------
# Ranking
# ---------------------------------------------------------------------------

def test_rank_filters_and_sorts():
    results = rank_segments(CANDIDATES, "quick fox", threshold=0.3)

    assert [r.source["id"] for r in results] == ["b", "c"]
    assert results[0].score == pytest.approx(1.0)
    assert results[1].score == pytest.approx(0.6)


def test_rank_truncates_to_limit():
    results = rank_segments(CANDIDATES, "quick fox", threshold=0.0, limit=1)
    assert [r.source["id"] for r in results] == ["b"]


def test_rank_passes_through_fields():
    results = rank_segments(CANDIDATES, "relevant", threshold=0.0)
    top = results[0]
    assert top.source == {"id": "a"}
    assert top.metadata == {"page": 1}
    assert top.content == "nothing relevant here"


def test_rank_ties_keep_candidate_order():
    candidates = [{"id": i, "content": "same text"} for i in range(4)]
    results = rank_segments(candidates, "same", threshold=0.0)
    assert [r.source["id"] for r in results] == [0, 1, 2, 3]


def test_rank_zero_limit():
    assert rank_segments(CANDIDATES, "quick", limit=0) == []


def test_rank_accepts_segments():
    segments = [Segment(content="quick brown fox", metadata={"strategy": "fixed"})]
    results = rank_segments(segments, "fox")
    assert results[0].metadata == {"strategy": "fixed"}
    assert results[0].source == {"start_page": None, "end_page": None}


def test_ranker_defaults_and_overrides():
    ranker = RelevanceRanker(threshold=0.5, limit=5)
    assert [r.source["id"] for r in ranker.rank(CANDIDATES, "quick fox")] == ["b", "c"]
    assert [r.source["id"] for r in ranker.rank(CANDIDATES, "quick fox", threshold=0.9)] == ["b"]
    assert len(ranker.rank(CANDIDATES, "quick fox", threshold=0.0, limit=2)) == 2
