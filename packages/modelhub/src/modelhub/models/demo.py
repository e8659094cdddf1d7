"""Demo-URL request/response models."""

from pydantic import BaseModel, ConfigDict, Field


class DemoURLRequest(BaseModel):
    """Request for a model's demo or documentation URL."""

    model_config = ConfigDict(populate_by_name=True, protected_namespaces=())

    model_id: str = Field(alias="modelId")
    provider: str


class DemoURLResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    demo_url: str = Field(alias="demoUrl")
