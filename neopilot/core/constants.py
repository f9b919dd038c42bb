"""Centralized environment variable names."""

from dataclasses import dataclass

from neopilot.core.enums import Provider

# A provider flag counts as set only for this exact value
FLAG_ON = "1"


@dataclass(frozen=True)
class ProviderFlags:
    """Flags selecting a non-direct provider."""

    bedrock: str = "NEOPILOT_USE_BEDROCK"
    vertex: str = "NEOPILOT_USE_VERTEX"
    foundry: str = "NEOPILOT_USE_FOUNDRY"


@dataclass(frozen=True)
class DirectVars:
    """Direct Neopilot API credentials."""

    api_key: str = "NEOPILOT_API_KEY"
    oauth_token: str = "NEOPILOT_OAUTH_TOKEN"


@dataclass(frozen=True)
class BedrockVars:
    """AWS Bedrock region and credentials."""

    region: str = "AWS_REGION"
    access_key_id: str = "AWS_ACCESS_KEY_ID"
    secret_access_key: str = "AWS_SECRET_ACCESS_KEY"
    bearer_token: str = "AWS_BEARER_TOKEN_BEDROCK"


@dataclass(frozen=True)
class VertexVars:
    """Google Vertex AI settings."""

    project_id: str = "NEOPILOT_VERTEX_PROJECT_ID"
    ml_region: str = "NEOPILOT_ML_REGION"


@dataclass(frozen=True)
class FoundryVars:
    """Microsoft Foundry endpoint settings."""

    resource: str = "NEOPILOT_FOUNDRY_RESOURCE"
    base_url: str = "NEOPILOT_FOUNDRY_BASE_URL"


# Singleton configs
FLAGS = ProviderFlags()
DIRECT = DirectVars()
BEDROCK = BedrockVars()
VERTEX = VertexVars()
FOUNDRY = FoundryVars()

# Flag precedence: the first set flag decides which requirements are checked
PROVIDER_FLAGS: dict[Provider, str] = {
    Provider.BEDROCK: FLAGS.bedrock,
    Provider.VERTEX: FLAGS.vertex,
    Provider.FOUNDRY: FLAGS.foundry,
}
