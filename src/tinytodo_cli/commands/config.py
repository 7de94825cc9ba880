"""Configuration management commands."""

import json
from typing import Optional

import typer

from tinytodo_cli.models import AppConfig
from tinytodo_cli.services.config_service import get_config_service
from tinytodo_cli.utils.exit_codes import ERROR_CONFIG, ERROR_INVALID_ARGS
from tinytodo_cli.utils.ui.console import get_console
from tinytodo_cli.utils.ui.formatters import format_success

from .decorators import AppError, command_wrapper

app = typer.Typer(help="Configuration management commands")


def _service():
    try:
        svc = get_config_service()
        _ = svc.config
    except RuntimeError as e:
        raise AppError(str(e), exit_code=ERROR_CONFIG) from e
    return svc


@app.command("view")
@command_wrapper
def view_config() -> None:
    """View current configuration."""
    config_dict = _service().config.model_dump(mode="json")
    get_console().print_json(json.dumps(config_dict))


@app.command("get")
@command_wrapper
def get_config(
    key: str = typer.Argument(..., help="Configuration key (e.g., view.default_mode)"),
) -> None:
    """Get a configuration value."""
    value = _service().get(key)
    if value is None:
        raise AppError(f"Configuration key '{key}' not found", exit_code=ERROR_INVALID_ARGS)
    get_console().print(value)


@app.command("set")
@command_wrapper
def set_config(
    key: str = typer.Argument(..., help="Configuration key (e.g., output.format)"),
    value: str = typer.Argument(..., help="Configuration value"),
) -> None:
    """Set a configuration value."""
    try:
        stored = _service().set(key, value)
    except KeyError:
        raise AppError(
            f"Configuration key '{key}' not found", exit_code=ERROR_INVALID_ARGS
        ) from None
    except ValueError as e:
        raise AppError(str(e), exit_code=ERROR_INVALID_ARGS) from e
    except RuntimeError as e:
        raise AppError(str(e), exit_code=ERROR_CONFIG) from e
    format_success(f"Configuration '{key}' set to '{stored}'")


@app.command("reset")
@command_wrapper
def reset_config(
    key: Optional[str] = typer.Argument(None, help="Configuration key to reset"),
    yes: bool = typer.Option(False, "--yes", "-y", help="Skip confirmation"),
) -> None:
    """Reset configuration to defaults."""
    svc = _service()
    if not yes:
        target = f"'{key}'" if key else "all settings"
        if not typer.confirm(f"Reset {target} to defaults?"):
            get_console().print("[yellow]Cancelled[/yellow]")
            raise typer.Exit(0)

    if key is None:
        svc.reset_config()
        format_success("Configuration reset to defaults")
        return

    default = AppConfig().model_dump(mode="json")
    for part in key.split("."):
        if not isinstance(default, dict) or part not in default:
            raise AppError(f"Configuration key '{key}' not found", exit_code=ERROR_INVALID_ARGS)
        default = default[part]
    if isinstance(default, dict):
        raise AppError(f"'{key}' is a section, not a key", exit_code=ERROR_INVALID_ARGS)
    svc.set(key, default)
    format_success(f"Configuration '{key}' reset to '{default}'")
