"""Error types raised by the provider services.

Transport and HTTP failures from upstream calls are not wrapped: they surface
as ``httpx.HTTPError`` subclasses.
"""


class ModelHubError(Exception):
    """Base class for errors raised by modelhub."""


class UnsupportedProviderError(ModelHubError):
    """Provider tag is not one of the known providers."""

    def __init__(self, provider: str):
        self.provider = provider
        super().__init__(f"Unsupported provider: {provider}")


class MissingCredentialError(ModelHubError):
    """The credential required by the selected provider is not configured."""

    def __init__(self, provider: str, env_var: str):
        self.provider = provider
        self.env_var = env_var
        super().__init__(f"{provider} API key not configured (set {env_var})")


class InvalidRequestError(ModelHubError):
    """Caller error: empty or malformed request fields."""


class InvalidMetricError(InvalidRequestError):
    """One or more requested metric names are outside the valid set."""

    def __init__(self, invalid: list[str], valid: list[str]):
        self.invalid = invalid
        self.valid = valid
        super().__init__(
            f"Invalid metrics: {', '.join(invalid)}. Valid metrics are: {', '.join(valid)}"
        )
