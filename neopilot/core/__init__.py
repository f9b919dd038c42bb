"""Core types and validation for neopilot.

The leaf modules (enums, constants, errors) have no imports from other
neopilot modules outside core/.
"""

from neopilot.core.enums import Provider
from neopilot.core.env import (
    Invalid,
    Valid,
    ValidationResult,
    active_providers,
    ensure_valid,
    select_provider,
    snapshot_environ,
    validate,
    validate_required_env,
)
from neopilot.core.errors import EnvironmentValidationError, format_violations

__all__ = [
    "EnvironmentValidationError",
    "Invalid",
    "Provider",
    "Valid",
    "ValidationResult",
    "active_providers",
    "ensure_valid",
    "format_violations",
    "select_provider",
    "snapshot_environ",
    "validate",
    "validate_required_env",
]
