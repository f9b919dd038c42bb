"""Core enums for neopilot provider selection."""

from enum import StrEnum


class Provider(StrEnum):
    """Backend providers that can serve requests."""

    DIRECT = "direct"
    BEDROCK = "bedrock"
    VERTEX = "vertex"
    FOUNDRY = "foundry"
