"""Unit tests for :mod:`tidykit.entrypoints.cli.helpers.messages`.

Glyph selection follows the encoding of the stream returned by
``click.get_text_stream("stderr")``; messages are written to stderr only.
"""

import io

import click
import pytest

from tidykit.entrypoints.cli.helpers import messages


class _Stream(io.StringIO):
    def __init__(self, encoding: str) -> None:
        super().__init__()
        self._encoding = encoding

    @property
    def encoding(self) -> str:  # type: ignore[override]
        return self._encoding


@pytest.fixture
def stderr_encoding(monkeypatch):
    """Patch click's stderr stream with one reporting the given encoding."""

    def _set(encoding: str) -> None:
        monkeypatch.setattr(click, "get_text_stream", lambda name: _Stream(encoding))

    return _set


@pytest.mark.parametrize(
    "encoding, expected", [("utf-8", "⚠️"), ("ascii", "[!]"), ("latin-1", "[!]")]
)
def test_caution_glyph_selection(stderr_encoding, encoding, expected):
    """Emoji on UTF-8 streams, ASCII fallback otherwise."""
    stderr_encoding(encoding)
    assert messages.caution_glyph() == expected


def test_warn_goes_to_stderr(capsys):
    """warn writes to stderr and leaves stdout empty."""
    messages.warn("careful")
    captured = capsys.readouterr()
    assert "careful" in captured.err
    assert captured.out == ""
