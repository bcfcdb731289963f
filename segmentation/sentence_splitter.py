"""
Paragraph and sentence splitting utilities.

Handles mixed-script text: East-Asian sentence enders (。！？) carry
no trailing whitespace, so boundaries are punctuation runs rather
than punctuation followed by a space.
"""

import logging
import math
import re
from dataclasses import dataclass
from typing import List

logger = logging.getLogger(__name__)

# Average characters per word used to turn a character overlap budget into words
CHARS_PER_WORD = 5

_PARAGRAPH_BREAK = re.compile(r"\n\s*\n")
# A run of enders; a dot between two digits is a decimal point, not an ender
_SENTENCE_ENDERS = re.compile(r"(?:[。！？!?]|(?<!\d)\.|\.(?!\d))+")


@dataclass
class Sentence:
    """A sentence with position information."""

    text: str
    start: int
    end: int
    index: int


def split_paragraphs(text: str) -> List[str]:
    """
    Split text on blank-line boundaries.

    Args:
        text: Text to split

    Returns:
        Stripped, non-empty paragraphs in document order
    """
    return [p.strip() for p in _PARAGRAPH_BREAK.split(text) if p.strip()]


def split_into_sentences(text: str) -> List[Sentence]:
    """
    Split text into sentences.

    Handles:
    - Western enders (. ! ?) and East-Asian enders (。！？)
    - Runs of enders ("?!", "...") as a single boundary
    - Decimal and version numbers (3.14, 1.2.3 are not boundaries)

    Terminal punctuation is dropped, like the boundary itself.

    Args:
        text: Text to split

    Returns:
        List of Sentence objects, indexed from 0
    """
    sentences = []
    pos = 0
    boundaries = [(m.start(), m.end()) for m in _SENTENCE_ENDERS.finditer(text)]
    boundaries.append((len(text), len(text)))

    for ender_start, ender_end in boundaries:
        raw = text[pos:ender_start]
        start = pos + len(raw) - len(raw.lstrip())
        pos = ender_end

        stripped = raw.strip()
        if not stripped:
            continue

        sentences.append(
            Sentence(
                text=stripped,
                start=start,
                end=start + len(stripped),
                index=len(sentences),
            )
        )

    return sentences


def overlap_words(text: str, overlap_size: int) -> str:
    """
    Take the trailing words of text covering roughly overlap_size characters.

    Uses ceil(overlap_size / 5) words.

    Args:
        text: Flushed buffer text
        overlap_size: Character overlap budget

    Returns:
        Space-joined trailing words, or "" when overlap_size is 0
    """
    if overlap_size <= 0:
        return ""

    word_count = math.ceil(overlap_size / CHARS_PER_WORD)
    words = text.split()
    return " ".join(words[-word_count:])
