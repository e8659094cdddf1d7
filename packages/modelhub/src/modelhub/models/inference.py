"""Inference request model."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from modelhub.models.common import Modality


class InferenceRequest(BaseModel):
    """Request for a single upstream inference call.

    ``provider`` stays a plain string so an unknown tag reaches the dispatcher
    and is reported by name.
    """

    model_config = ConfigDict(populate_by_name=True, protected_namespaces=())

    model_id: str = Field(alias="modelId")
    provider: str
    input: dict[str, Any] = Field(default_factory=dict)
    modality: Modality | None = None
