"""Static price and capability tables for vendor-hosted model families.

Vendor APIs expose no pricing metadata, so these families are resolved from
in-process tables keyed by exact model id. Ids missing from a table fall back
to the family default: zero cost and the family's baseline capabilities.
"""

from dataclasses import dataclass, field

from modelhub.models.common import Provider
from modelhub.models.compare import Capabilities, CatalogEntry, Cost, ModelMetadata

TEXT_ONLY = Capabilities(text=True)
TEXT_AND_IMAGE = Capabilities(text=True, image=True, multimodal=True)

# Families resolved from the static tables (everything else goes to the Hugging Face Hub)
FAMILY_PREFIXES: list[tuple[str, Provider]] = [
    ("gpt-", Provider.OPENAI),
    ("text-", Provider.OPENAI),
    ("claude-", Provider.CLAUDE),
    ("gemini-", Provider.GEMINI),
]


@dataclass
class ModelFamily:
    """Pricing table and defaults for one vendor family."""

    provider: Provider
    modality: str
    latency: int | float
    popularity: int | float
    default_capabilities: Capabilities
    pricing: dict[str, Cost] = field(default_factory=dict)
    capabilities: dict[str, Capabilities] = field(default_factory=dict)

    def lookup(self, model_id: str) -> ModelMetadata:
        """Build the metadata record for a model id in this family."""
        return ModelMetadata(
            id=model_id,
            modality=self.modality,
            latency=self.latency,
            popularity=self.popularity,
            cost=self.pricing.get(model_id, Cost()).model_copy(),
            capabilities=self.capabilities.get(model_id, self.default_capabilities).model_copy(),
            tags=[self.provider.value, "llm"],
        )

    def entries(self) -> list[CatalogEntry]:
        return [
            CatalogEntry(
                id=model_id,
                family=self.provider.value,
                cost=cost,
                capabilities=self.capabilities.get(model_id, self.default_capabilities),
            )
            for model_id, cost in self.pricing.items()
        ]


FAMILIES: dict[Provider, ModelFamily] = {
    Provider.OPENAI: ModelFamily(
        provider=Provider.OPENAI,
        modality="text",
        latency=100,
        popularity=1000,
        default_capabilities=TEXT_ONLY,
        pricing={
            "gpt-4": Cost(input=0.03, output=0.06),
            "gpt-4-turbo": Cost(input=0.01, output=0.03),
            "gpt-3.5-turbo": Cost(input=0.001, output=0.002),
        },
        capabilities={
            "gpt-4": TEXT_AND_IMAGE,
            "gpt-4-turbo": TEXT_AND_IMAGE,
            "gpt-3.5-turbo": TEXT_ONLY,
        },
    ),
    Provider.CLAUDE: ModelFamily(
        provider=Provider.CLAUDE,
        modality="text",
        latency=80,
        popularity=800,
        default_capabilities=TEXT_AND_IMAGE,
        pricing={
            "claude-3-opus": Cost(input=0.015, output=0.075),
            "claude-3-sonnet": Cost(input=0.003, output=0.015),
            "claude-3-haiku": Cost(input=0.00025, output=0.00125),
        },
    ),
    Provider.GEMINI: ModelFamily(
        provider=Provider.GEMINI,
        modality="multimodal",
        latency=60,
        popularity=600,
        default_capabilities=TEXT_AND_IMAGE,
        pricing={
            "gemini-pro": Cost(input=0.00025, output=0.0005),
            "gemini-pro-vision": Cost(input=0.00025, output=0.0005),
        },
    ),
}


def detect_family(model_id: str) -> Provider:
    """Infer the originating provider family from a model id's prefix.

    Ids without a known vendor prefix are treated as Hugging Face Hub models.
    """
    for prefix, provider in FAMILY_PREFIXES:
        if model_id.startswith(prefix):
            return provider
    return Provider.HUGGINGFACE


def list_catalog() -> list[CatalogEntry]:
    """All models with a static catalog entry, grouped by family."""
    return [entry for family in FAMILIES.values() for entry in family.entries()]
