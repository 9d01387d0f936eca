"""Shared pytest fixtures."""

import os

import pytest

from cjkmotion.segmentation.source import TokenizerSegmentSource

from helpers import dictionary_tokenizer

# headless Qt for the QPlainTextEdit host tests
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")


@pytest.fixture
def segment_source() -> TokenizerSegmentSource:
    return TokenizerSegmentSource(dictionary_tokenizer())


@pytest.fixture(autouse=True)
def _clear_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in list(os.environ):
        if name.startswith("CJKMOTION_"):
            monkeypatch.delenv(name, raising=False)
