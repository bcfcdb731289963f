"""
Greedy unit accumulation with word-level overlap carry.

Shared by the paragraph and semantic chunkers. Units (paragraphs or
sentences) are appended to a running buffer until the next unit would
push it past the size budget; the buffer is then flushed and the next
one is seeded with the trailing words of the flushed text.
"""

import logging
from dataclasses import dataclass
from typing import List, Sequence, Tuple

from .sentence_splitter import overlap_words

logger = logging.getLogger(__name__)


@dataclass
class AccumulatedChunk:
    """Text of one flushed buffer and the unit index range it covers."""

    text: str
    first_unit: int
    last_unit: int
    budget_flush: bool  # False for the trailing buffer


class GreedyAccumulator:
    """
    Greedy accumulator over ordered text units.

    Usage:
        accumulator = GreedyAccumulator(chunk_size=1000, overlap_size=200, separator="\\n\\n")
        chunks = accumulator.run(paragraphs)
    """

    def __init__(self, chunk_size: int, overlap_size: int, separator: str):
        self.chunk_size = chunk_size
        self.overlap_size = overlap_size
        self.separator = separator

    def run(self, units: Sequence[str]) -> List[AccumulatedChunk]:
        """
        Accumulate units into chunks.

        A unit longer than chunk_size is never split; it becomes its
        own oversized chunk (plus any carried overlap).

        Args:
            units: Stripped, non-empty units in document order

        Returns:
            List of AccumulatedChunk in document order
        """
        chunks: List[AccumulatedChunk] = []
        # (unit index, text); a carried overlap is attributed to the unit it started in
        pieces: List[Tuple[int, str]] = []
        length = 0

        for index, unit in enumerate(units):
            if pieces and length + len(self.separator) + len(unit) > self.chunk_size:
                text = self._join(pieces)
                chunks.append(
                    AccumulatedChunk(
                        text=text.strip(),
                        first_unit=pieces[0][0],
                        last_unit=pieces[-1][0],
                        budget_flush=True,
                    )
                )
                pieces = self._carry(pieces, text)
                length = len(self._join(pieces))

            if pieces:
                length += len(self.separator)
            pieces.append((index, unit))
            length += len(unit)

        if pieces:
            text = self._join(pieces).strip()
            if text:
                chunks.append(
                    AccumulatedChunk(
                        text=text,
                        first_unit=pieces[0][0],
                        last_unit=pieces[-1][0],
                        budget_flush=False,
                    )
                )

        return chunks

    def _join(self, pieces: List[Tuple[int, str]]) -> str:
        return self.separator.join(text for _, text in pieces)

    def _carry(self, pieces: List[Tuple[int, str]], flushed_text: str) -> List[Tuple[int, str]]:
        """Seed the next buffer with the tail words of the flushed one."""
        carry = overlap_words(flushed_text, self.overlap_size)
        if not carry:
            return []

        # Walk back until the carried word count is covered
        needed = len(carry.split())
        source = pieces[-1][0]
        for index, text in reversed(pieces):
            source = index
            needed -= len(text.split())
            if needed <= 0:
                break

        return [(source, carry)]
