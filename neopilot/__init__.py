"""neopilot - startup environment validation for Neopilot providers."""

from neopilot.core import (
    EnvironmentValidationError,
    Invalid,
    Provider,
    Valid,
    ValidationResult,
    ensure_valid,
    select_provider,
    snapshot_environ,
    validate,
    validate_required_env,
)

__all__ = [
    "EnvironmentValidationError",
    "Invalid",
    "Provider",
    "Valid",
    "ValidationResult",
    "ensure_valid",
    "select_provider",
    "snapshot_environ",
    "validate",
    "validate_required_env",
]
