"""Root test fixtures shared across unit tests."""

from collections.abc import Generator
from unittest.mock import patch

import pytest


@pytest.fixture
def clean_environ() -> Generator[None]:
    """Run the test with an empty process environment."""
    with patch.dict("os.environ", {}, clear=True):
        yield


@pytest.fixture
def bedrock_env() -> dict[str, str]:
    """A complete Bedrock configuration using access keys."""
    return {
        "NEOPILOT_USE_BEDROCK": "1",
        "AWS_REGION": "us-east-1",
        "AWS_ACCESS_KEY_ID": "AKIAEXAMPLE",
        "AWS_SECRET_ACCESS_KEY": "secret",
    }
