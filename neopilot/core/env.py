"""Environment variable validation."""

from __future__ import annotations

import logging
import os
import sys
from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType

from neopilot.core.constants import (
    BEDROCK,
    DIRECT,
    FLAG_ON,
    FLAGS,
    FOUNDRY,
    PROVIDER_FLAGS,
    VERTEX,
)
from neopilot.core.enums import Provider
from neopilot.core.errors import EnvironmentValidationError, format_violations

logger = logging.getLogger(__name__)

Environment = Mapping[str, str | None]


@dataclass(frozen=True)
class Valid:
    """All requirements for the selected provider are met."""

    provider: Provider

    @property
    def is_valid(self) -> bool:
        return True

    @property
    def violations(self) -> tuple[str, ...]:
        return ()


@dataclass(frozen=True)
class Invalid:
    """One or more requirements are unmet, in evaluation order."""

    provider: Provider
    violations: tuple[str, ...]

    def __post_init__(self) -> None:
        if not self.violations:
            raise ValueError("Invalid requires at least one violation")

    @property
    def is_valid(self) -> bool:
        return False

    @property
    def message(self) -> str:
        return format_violations(self.violations)


ValidationResult = Valid | Invalid


def snapshot_environ(environ: Mapping[str, str] | None = None) -> Mapping[str, str]:
    """Capture a read-only copy of the environment (os.environ by default)."""
    source = os.environ if environ is None else environ
    return MappingProxyType(dict(source))


def _present(env: Environment, name: str) -> bool:
    # Unset and empty values are both treated as missing
    return bool(env.get(name))


def active_providers(env: Environment) -> list[Provider]:
    """Return providers whose flag is set, in precedence order."""
    return [
        provider for provider, flag in PROVIDER_FLAGS.items() if env.get(flag) == FLAG_ON
    ]


def select_provider(env: Environment) -> Provider:
    """Resolve the effective provider.

    The first set flag wins (Bedrock, then Vertex, then Foundry). With no
    flags set the direct Neopilot API is used.
    """
    active = active_providers(env)
    return active[0] if active else Provider.DIRECT


def _check_direct(env: Environment) -> list[str]:
    if _present(env, DIRECT.api_key) or _present(env, DIRECT.oauth_token):
        return []
    return [
        f"Either {DIRECT.api_key} or {DIRECT.oauth_token} is required "
        "when using direct Neopilot API."
    ]


def _check_bedrock(env: Environment) -> list[str]:
    errors: list[str] = []

    if not _present(env, BEDROCK.region):
        errors.append(f"{BEDROCK.region} is required when using AWS Bedrock.")

    has_access_keys = _present(env, BEDROCK.access_key_id) and _present(
        env, BEDROCK.secret_access_key
    )
    if not has_access_keys and not _present(env, BEDROCK.bearer_token):
        errors.append(
            f"Either {BEDROCK.bearer_token} or both {BEDROCK.access_key_id} "
            f"and {BEDROCK.secret_access_key} are required when using AWS Bedrock."
        )
    return errors


def _check_vertex(env: Environment) -> list[str]:
    return [
        f"{name} is required when using Google Vertex AI."
        for name in (VERTEX.project_id, VERTEX.ml_region)
        if not _present(env, name)
    ]


def _check_foundry(env: Environment) -> list[str]:
    if _present(env, FOUNDRY.resource) or _present(env, FOUNDRY.base_url):
        return []
    return [
        f"Either {FOUNDRY.resource} or {FOUNDRY.base_url} is required "
        "when using Microsoft Foundry."
    ]


PROVIDER_CHECKS = {
    Provider.DIRECT: _check_direct,
    Provider.BEDROCK: _check_bedrock,
    Provider.VERTEX: _check_vertex,
    Provider.FOUNDRY: _check_foundry,
}


def validate(env: Environment) -> ValidationResult:
    """Check the environment against the selected provider's requirements.

    Args:
        env: Mapping of variable name to value, typically from snapshot_environ()

    Returns:
        Valid, or Invalid carrying every violation in evaluation order.
        When several provider flags are set, the exclusivity violation is
        reported first, followed by the checks of the first set flag only.
    """
    errors: list[str] = []

    active = active_providers(env)
    logger.debug("Active provider flags: %s", [str(p) for p in active] or "none")
    if len(active) > 1:
        errors.append(
            "Cannot use multiple providers simultaneously. Please set only one of: "
            f"{FLAGS.bedrock}, {FLAGS.vertex}, or {FLAGS.foundry}."
        )

    provider = select_provider(env)
    logger.debug("Checking requirements for provider: %s", provider)
    errors.extend(PROVIDER_CHECKS[provider](env))

    if errors:
        logger.info("Environment validation found %d violation(s)", len(errors))
        return Invalid(provider=provider, violations=tuple(errors))
    return Valid(provider=provider)


def ensure_valid(env: Environment) -> Provider:
    """Validate and raise on failure.

    Returns:
        The effective provider

    Raises:
        EnvironmentValidationError: If any requirement is violated
    """
    result = validate(env)
    if isinstance(result, Invalid):
        raise EnvironmentValidationError(result.violations)
    return result.provider


def validate_required_env(environ: Mapping[str, str] | None = None) -> Provider:
    """Validate required environment variables at startup.

    Reads os.environ unless a mapping is given. Prints the violation report
    to stderr and exits with code 1 if anything is missing.
    """
    try:
        return ensure_valid(snapshot_environ(environ))
    except EnvironmentValidationError as e:
        print(f"Error: {e}", file=sys.stderr)
        print(
            "Set them in .env or export them before running neopilot",
            file=sys.stderr,
        )
        sys.exit(1)
