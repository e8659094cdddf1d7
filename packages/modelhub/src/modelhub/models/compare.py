"""Comparison request and model metadata models."""

from pydantic import BaseModel, Field


class CompareRequest(BaseModel):
    """Request to compare several models on a set of metrics."""

    models: list[str]
    metrics: list[str]


class Cost(BaseModel):
    """Price in currency units per 1K tokens."""

    input: float = 0
    output: float = 0


class Capabilities(BaseModel):
    """Media a model can natively handle."""

    text: bool = False
    image: bool = False
    audio: bool = False
    video: bool = False
    multimodal: bool = False


class ModelMetadata(BaseModel):
    """Normalized metadata for one model.

    ``latency`` is a proxy (download count for hosted models) and
    ``popularity`` is the like count. ``tags`` is kept only to derive
    capabilities and never appears in a comparison row.
    """

    id: str
    modality: str = "unknown"
    latency: int | float = 0
    popularity: int | float = 0
    cost: Cost = Field(default_factory=Cost)
    capabilities: Capabilities = Field(default_factory=Capabilities)
    tags: list[str] = Field(default_factory=list)

    @classmethod
    def default(cls, model_id: str) -> "ModelMetadata":
        """All-default record used when a lookup fails."""
        return cls(id=model_id)


class CatalogEntry(BaseModel):
    """A model listed in the static price/capability catalog."""

    id: str
    family: str
    cost: Cost
    capabilities: Capabilities
