"""Tests for environment variable name constants."""

import dataclasses

import pytest

from neopilot.core.constants import BEDROCK, FLAG_ON, FLAGS, PROVIDER_FLAGS
from neopilot.core.enums import Provider


class TestConstants:
    """Tests for constants module."""

    def test_flag_literal(self) -> None:
        """Flags are set by the literal "1"."""
        assert FLAG_ON == "1"

    def test_provider_flags_order(self) -> None:
        """Flag precedence is Bedrock, Vertex, Foundry."""
        assert list(PROVIDER_FLAGS) == [
            Provider.BEDROCK,
            Provider.VERTEX,
            Provider.FOUNDRY,
        ]
        assert PROVIDER_FLAGS[Provider.VERTEX] == "NEOPILOT_USE_VERTEX"

    def test_direct_has_no_flag(self) -> None:
        """Direct is the fallback, not a flag."""
        assert Provider.DIRECT not in PROVIDER_FLAGS

    def test_singletons_are_frozen(self) -> None:
        """Name groups cannot be reassigned."""
        with pytest.raises(dataclasses.FrozenInstanceError):
            FLAGS.bedrock = "OTHER"  # type: ignore[misc]
        assert BEDROCK.bearer_token == "AWS_BEARER_TOKEN_BEDROCK"
