"""Shared test fixtures for the substackify test suite."""

from __future__ import annotations

import pytest

from substackify.config import SubstackifyConfig
from substackify.converter.md_to_doc import MarkdownToDocConverter


@pytest.fixture
def config() -> SubstackifyConfig:
    """Default test configuration with a dummy publication and token."""
    return SubstackifyConfig(
        publication_url="https://example.substack.com",
        session_token="test_token_1234",
        user_id=42,
    )


@pytest.fixture
def converter(config: SubstackifyConfig) -> MarkdownToDocConverter:
    """Text-to-document converter using the default test config."""
    return MarkdownToDocConverter(config)
