"""Request/response models."""

from modelhub.models.common import VALID_METRICS, VALID_PROVIDERS, Metric, Modality, Provider
from modelhub.models.compare import Capabilities, CatalogEntry, CompareRequest, Cost, ModelMetadata
from modelhub.models.demo import DemoURLRequest, DemoURLResponse
from modelhub.models.inference import InferenceRequest

__all__ = [
    "VALID_METRICS",
    "VALID_PROVIDERS",
    "Capabilities",
    "CatalogEntry",
    "CompareRequest",
    "Cost",
    "DemoURLRequest",
    "DemoURLResponse",
    "InferenceRequest",
    "Metric",
    "Modality",
    "ModelMetadata",
    "Provider",
]
