"""Shared pytest fixtures for LUMEN tests."""

import textwrap
from pathlib import Path

import pytest

from lumen.core.ids import IdGenerator

CARD_SOURCE = textwrap.dedent(
    """\
    // a single card
    material panel {
      color: #111827
      radius: 8px
    }

    surface card {
      width: 320px
      height: 180px
      use: panel
      layout: column
      text "Hello" {
        size: 24px
        color: #ffffff
      }
    }
    """
)


@pytest.fixture
def ids() -> IdGenerator:
    """Return a fresh id generator."""
    return IdGenerator()


@pytest.fixture
def card_source() -> str:
    """Return a small LUMEN program with one material and one surface."""
    return CARD_SOURCE


@pytest.fixture
def card_file(tmp_path: Path, card_source: str) -> Path:
    """Write the card program to a .lumen file."""
    path = tmp_path / "card.lumen"
    path.write_text(card_source, encoding="utf-8")
    return path
