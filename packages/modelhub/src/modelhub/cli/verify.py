"""Verification commands for the modelhub CLI."""

import typer

from modelhub.config import CREDENTIAL_ENV_VARS, get_settings

verify_app = typer.Typer(help="Run verification checks", no_args_is_help=True)


def print_check(name: str, passed: bool, detail: str = "") -> bool:
    """Print a check result."""
    symbol = "✓" if passed else "✗"
    status = f"{symbol} {name}"
    if detail:
        status += f": {detail}"
    print(status)
    return passed


@verify_app.command("env")
def verify_env(
    strict: bool = typer.Option(False, "--strict", help="Exit non-zero if any credential is missing"),
) -> None:
    """Report which provider credentials are configured."""
    settings = get_settings()
    print("Provider credentials")
    print("-" * len("Provider credentials"))

    all_passed = True
    for provider, env_var in CREDENTIAL_ENV_VARS.items():
        configured = bool(settings.api_key(provider))
        all_passed &= print_check(provider.value, configured, env_var if not configured else "configured")

    if strict and not all_passed:
        raise typer.Exit(1)
