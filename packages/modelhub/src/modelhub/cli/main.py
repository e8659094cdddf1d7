"""Main CLI entry point for modelhub."""

import asyncio
import json

import httpx
import typer
from dotenv import load_dotenv
from pydantic import ValidationError
from rich.console import Console

# Load environment variables from .env file
load_dotenv()

from modelhub.cli.verify import verify_app
from modelhub.config import get_settings
from modelhub.errors import ModelHubError
from modelhub.logging_config import setup_logging
from modelhub.models.common import Modality
from modelhub.models.compare import CompareRequest
from modelhub.models.demo import DemoURLRequest
from modelhub.models.inference import InferenceRequest

console = Console()

app = typer.Typer(
    name="modelhub",
    help="Run inference, compare models and look up demos across ML model providers.",
    no_args_is_help=True,
)

app.add_typer(verify_app, name="verify", help="Run verification checks")


def _print_json(data) -> None:
    console.print_json(json.dumps(data))


@app.command()
def serve(
    host: str = typer.Option(None, "--host", help="Interface to bind (defaults to API_HOST)"),
    port: int = typer.Option(None, "--port", help="Port to listen on (defaults to PORT/API_PORT)"),
    reload: bool = typer.Option(False, "--reload", help="Reload on code changes"),
) -> None:
    """Start the HTTP API server."""
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "modelhub.main:app",
        host=host or settings.api_host,
        port=port or settings.api_port,
        reload=reload,
    )


@app.command()
def infer(
    model_id: str = typer.Argument(..., help="Model identifier"),
    provider: str = typer.Option(..., "--provider", "-p", help="Provider tag"),
    input_json: str = typer.Option("{}", "--input", "-i", help="Input payload as a JSON object"),
    modality: Modality = typer.Option(None, "--modality", help="Selects the OpenAI endpoint"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging"),
) -> None:
    """Run one inference call and print the provider's response."""
    from modelhub.services.inference_runner import run_inference

    setup_logging(verbose=verbose)
    try:
        payload = json.loads(input_json)
    except json.JSONDecodeError as e:
        console.print(f"[red]Error: --input is not valid JSON: {e}[/red]")
        raise typer.Exit(1)

    try:
        request = InferenceRequest(model_id=model_id, provider=provider, input=payload, modality=modality)
    except ValidationError:
        console.print("[red]Error: --input must be a JSON object[/red]")
        raise typer.Exit(1)

    try:
        result = asyncio.run(run_inference(request))
    except (ModelHubError, httpx.HTTPError, httpx.InvalidURL) as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1)
    _print_json(result)


@app.command()
def compare(
    models: list[str] = typer.Argument(..., help="Model identifiers to compare"),
    metrics: list[str] = typer.Option(
        ["latency", "modality", "popularity", "cost", "capabilities"],
        "--metric",
        "-m",
        help="Metric to report (repeatable)",
    ),
) -> None:
    """Compare models on the requested metrics."""
    from modelhub.services.comparator import compare_models

    setup_logging()
    try:
        rows = asyncio.run(compare_models(CompareRequest(models=models, metrics=metrics)))
    except ModelHubError as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1)
    _print_json(rows)


@app.command()
def demo(
    model_id: str = typer.Argument(..., help="Model identifier"),
    provider: str = typer.Option(..., "--provider", "-p", help="Provider tag"),
) -> None:
    """Print a demo or documentation URL for a model."""
    from modelhub.services.demo_resolver import fetch_demo_url

    setup_logging()
    try:
        url = asyncio.run(fetch_demo_url(DemoURLRequest(model_id=model_id, provider=provider)))
    except ModelHubError as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1)
    console.print(url)


if __name__ == "__main__":
    app()
