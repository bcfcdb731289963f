"""Tests for the fixed-size character window chunker."""

import pytest

from segmentation.fixed_chunker import fixed_size_chunk


def test_two_windows_without_overlap():
    segments = fixed_size_chunk("abcdefghijklmnopqrst", chunk_size=10, overlap_size=0)
    assert [s.content for s in segments] == ["abcdefghij", "klmnopqrst"]


def test_offsets_recorded_in_metadata():
    segments = fixed_size_chunk("abcdefghijklmnopqrst", chunk_size=10, overlap_size=3)

    assert [s.content for s in segments] == ["abcdefghij", "hijklmnopq", "opqrst"]
    assert [s.metadata["start_index"] for s in segments] == [0, 7, 14]
    assert [s.metadata["end_index"] for s in segments] == [10, 17, 20]
    assert all(s.metadata["strategy"] == "fixed" for s in segments)


def test_coverage_without_overlap():
    text = "abcdefghij" * 7 + "xyz"
    segments = fixed_size_chunk(text, chunk_size=10, overlap_size=0)
    assert "".join(s.content for s in segments) == text


@pytest.mark.parametrize("chunk_size,overlap_size", [(37, 7), (50, 0), (12, 11), (1, 0)])
def test_windows_never_exceed_chunk_size(chunk_size, overlap_size):
    text = "The quick brown fox jumps over the lazy dog. " * 20
    segments = fixed_size_chunk(text, chunk_size=chunk_size, overlap_size=overlap_size)

    assert segments
    for s in segments:
        assert len(s.content) <= chunk_size


def test_window_count_proportional_to_stride():
    # starts 0, 6, ..., 90; the window at 90 reaches the end
    segments = fixed_size_chunk("x" * 100, chunk_size=10, overlap_size=4)
    assert len(segments) == 16


def test_final_window_does_not_repeat_with_overlap():
    segments = fixed_size_chunk("a" * 25, chunk_size=20, overlap_size=5)
    assert [s.metadata["end_index"] for s in segments] == [20, 25]


def test_whitespace_windows_dropped():
    text = "abc" + " " * 10 + "def"
    segments = fixed_size_chunk(text, chunk_size=5, overlap_size=0)
    assert [s.content for s in segments] == ["abc", "de", "f"]


@pytest.mark.parametrize("overlap_size", [5, 8])
def test_overlap_not_smaller_than_chunk_terminates(overlap_size):
    segments = fixed_size_chunk("abcdefghijklmnop", chunk_size=5, overlap_size=overlap_size)
    assert [s.content for s in segments] == ["abcde"]


def test_text_shorter_than_window():
    segments = fixed_size_chunk("  short text  ", chunk_size=100, overlap_size=10)
    assert [s.content for s in segments] == ["short text"]
    assert segments[0].metadata["end_index"] == 14
