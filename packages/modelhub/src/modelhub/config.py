"""Application configuration from environment variables."""

from functools import lru_cache

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from modelhub.errors import MissingCredentialError
from modelhub.models.common import Provider

# Environment variable holding each provider's credential
CREDENTIAL_ENV_VARS: dict[Provider, str] = {
    Provider.HUGGINGFACE: "HUGGINGFACE_API_KEY",
    Provider.REPLICATE: "REPLICATE_API_KEY",
    Provider.STABILITY: "STABILITY_API_KEY",
    Provider.OPENAI: "OPENAI_API_KEY",
    Provider.CLAUDE: "ANTHROPIC_API_KEY",
    Provider.GEMINI: "GOOGLE_API_KEY",
}


class Settings(BaseSettings):
    """Application settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # API
    api_host: str = "127.0.0.1"
    api_port: int = Field(default=3000, validation_alias=AliasChoices("api_port", "port"))
    cors_origins: str = "http://localhost:5173"
    log_level: str = "INFO"

    # Outbound HTTP; None leaves calls unbounded
    http_timeout: float | None = None

    # Provider credentials
    huggingface_api_key: str = ""
    replicate_api_key: str = ""
    stability_api_key: str = ""
    openai_api_key: str = ""
    anthropic_api_key: str = ""
    google_api_key: str = ""

    # Provider base URLs
    huggingface_inference_url: str = "https://api-inference.huggingface.co"
    huggingface_hub_url: str = "https://huggingface.co"
    replicate_api_url: str = "https://api.replicate.com"
    stability_api_url: str = "https://api.stability.ai"
    openai_api_url: str = "https://api.openai.com"
    anthropic_api_url: str = "https://api.anthropic.com"
    gemini_api_url: str = "https://generativelanguage.googleapis.com"

    def api_key(self, provider: Provider) -> str:
        """Return the configured credential for a provider, or an empty string."""
        return getattr(self, CREDENTIAL_ENV_VARS[provider].lower())

    def credential_for(self, provider: Provider) -> str:
        """Return the credential for a provider, raising if it is not configured."""
        key = self.api_key(provider)
        if not key:
            raise MissingCredentialError(provider.value, CREDENTIAL_ENV_VARS[provider])
        return key

    def configured_providers(self) -> dict[str, bool]:
        return {provider.value: bool(self.api_key(provider)) for provider in Provider}


@lru_cache
def get_settings() -> Settings:
    """Return the process-wide settings, resolved once."""
    return Settings()
