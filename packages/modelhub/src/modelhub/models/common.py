"""Enumerations shared by the request/response models."""

from enum import Enum

from modelhub.errors import UnsupportedProviderError


class Provider(str, Enum):
    """Upstream model providers."""

    HUGGINGFACE = "huggingface"
    REPLICATE = "replicate"
    STABILITY = "stability"
    OPENAI = "openai"
    CLAUDE = "claude"
    GEMINI = "gemini"

    @classmethod
    def parse(cls, value: "str | Provider") -> "Provider":
        """Resolve a provider tag, raising UnsupportedProviderError for unknown tags."""
        try:
            return cls(value)
        except ValueError:
            raise UnsupportedProviderError(str(value)) from None


class Modality(str, Enum):
    TEXT = "text"
    IMAGE = "image"
    AUDIO = "audio"
    VIDEO = "video"
    MULTIMODAL = "multimodal"


class Metric(str, Enum):
    """Axes a model comparison can report."""

    LATENCY = "latency"
    MODALITY = "modality"
    POPULARITY = "popularity"
    COST = "cost"
    CAPABILITIES = "capabilities"


VALID_METRICS = [metric.value for metric in Metric]
VALID_PROVIDERS = [provider.value for provider in Provider]
