"""Pytest conftest: make the repository root importable for package imports."""

import sys
from pathlib import Path

import pytest

# Add the repository root to sys.path so `import segmentation`, `from app.config import ...` work
_root_dir = str(Path(__file__).resolve().parent.parent)
if _root_dir not in sys.path:
    sys.path.insert(0, _root_dir)


@pytest.fixture
def long_text() -> str:
    """Multi-paragraph English text with discourse markers."""
    paragraphs = [
        "Segmentation splits long documents into bounded pieces. "
        "Each piece should be small enough to embed and large enough to answer a question.",
        "However, fixed windows cut sentences in half. "
        "Paragraph boundaries are usually a better place to stop.",
        "Moreover, overlap keeps context across boundaries. "
        "A few trailing words of one segment start the next.",
        "Therefore the default strategy packs paragraphs greedily. "
        "In conclusion, every strategy must terminate on any valid configuration.",
    ]
    return "\n\n".join(paragraphs * 3)
