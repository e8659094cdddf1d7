"""Provider dispatch services."""

from modelhub.services.comparator import compare_models
from modelhub.services.demo_resolver import fetch_demo_url
from modelhub.services.inference_runner import run_inference

__all__ = ["compare_models", "fetch_demo_url", "run_inference"]
