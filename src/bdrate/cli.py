from __future__ import annotations

"""Command line interface for bdrate using Typer."""

from pathlib import Path
from typing import Dict, List, Optional

import json
import logging

import typer
from pydantic import ValidationError

from .config import Settings, load_settings
from .core import bd_rate_report
from .errors import BDRateError, UnknownMethod
from .types import Method
from .utils.logging import get_logger

app = typer.Typer(help="Bjontegaard-Delta rate calculator")
logger = logging.getLogger(__name__)


def _parse_override_value(raw: str) -> object:
    lower = raw.lower()
    if lower in {"true", "false"}:
        return lower == "true"
    if lower in {"null", "none"}:
        return None
    try:
        return int(raw)
    except ValueError:
        pass
    try:
        return float(raw)
    except ValueError:
        pass
    return raw


def _ensure_path(settings: Settings, keys: List[str]) -> None:
    model: object = type(settings)
    for key in keys:
        fields = getattr(model, "model_fields", None)
        if not fields or key not in fields:
            raise typer.BadParameter(f"unknown configuration key: {'.'.join(keys)}")
        model = fields[key].annotation


def _apply_override(data: Dict[str, object], keys: List[str], value: object) -> None:
    target = data
    for key in keys[:-1]:
        existing = target.get(key)
        if not isinstance(existing, dict):
            existing = {}
            target[key] = existing
        target = existing
    target[keys[-1]] = value


def _parse_values(raw: str, option: str) -> List[float]:
    try:
        return [float(item) for item in raw.split(",") if item.strip()]
    except ValueError:
        raise typer.BadParameter(f"expected comma separated numbers, got {raw!r}", param_hint=option) from None


@app.callback()
def init(
    ctx: typer.Context,
    config: Optional[Path] = typer.Option(
        None,
        "--config",
        dir_okay=False,
        file_okay=True,
        exists=False,
        help="Path to a YAML or JSON configuration file.",
    ),
    set_overrides: List[str] = typer.Option(
        [],
        "--set",
        help="Override configuration values using dotted paths, e.g. bdrate.method=cubic",
    ),
) -> None:
    """Initialise the Typer context with validated settings."""

    if isinstance(ctx.obj, Settings):
        settings = ctx.obj
    else:
        if config is not None and not config.exists():
            raise typer.BadParameter(f"configuration file not found: {config}")
        try:
            settings = load_settings(config) if config else Settings()
        except (FileNotFoundError, RuntimeError, TypeError, json.JSONDecodeError, ValidationError) as exc:
            raise typer.BadParameter(f"failed to load configuration: {exc}") from exc

    if set_overrides:
        data = settings.model_dump()
        for override in set_overrides:
            if "=" not in override:
                raise typer.BadParameter(
                    "overrides must be of the form --set section.key=value"
                )
            key, raw_value = override.split("=", 1)
            if not key:
                raise typer.BadParameter("override key cannot be empty")
            keys = key.split(".")
            _ensure_path(settings, keys)
            _apply_override(data, keys, _parse_override_value(raw_value))
        try:
            settings = Settings.model_validate(data)
        except ValidationError as exc:
            raise typer.BadParameter(f"invalid configuration override: {exc}") from exc

    get_logger("bdrate", settings.logging.level, settings.logging.format)
    ctx.obj = settings


@app.command()
def compute(
    ctx: typer.Context,
    anchor_rate: str = typer.Option(..., "--anchor-rate", help="Anchor rates, e.g. 100,200,400"),
    anchor_metric: str = typer.Option(..., "--anchor-metric", help="Anchor metrics, e.g. 30,33,36"),
    test_rate: str = typer.Option(..., "--test-rate", help="Test rates"),
    test_metric: str = typer.Option(..., "--test-metric", help="Test metrics"),
    min_overlap: Optional[float] = typer.Option(
        None, "--min-overlap", help="Minimum overlap of the metric ranges, between 0 and 1"
    ),
    method: Optional[str] = typer.Option(None, "--method", help="Interpolation method: akima or cubic"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Print the overlap window and log each stage"),
) -> None:
    """Print the BD-rate of the test curve against the anchor in percent.

    Negative values mean the test curve needs less bitrate than the anchor
    for the same quality.
    """

    cfg: Settings = ctx.obj
    if verbose:
        get_logger("bdrate", logging.DEBUG, cfg.logging.format)
    try:
        chosen = Method.parse(method if method is not None else cfg.bdrate.method)
    except UnknownMethod as exc:
        raise typer.BadParameter(str(exc), param_hint="--method") from None

    values = {
        name: _parse_values(raw, f"--{name.replace('_', '-')}")
        for name, raw in (
            ("anchor_rate", anchor_rate),
            ("anchor_metric", anchor_metric),
            ("test_rate", test_rate),
            ("test_metric", test_metric),
        )
    }

    try:
        result = bd_rate_report(
            values["anchor_rate"],
            values["anchor_metric"],
            values["test_rate"],
            values["test_metric"],
            min_overlap,
            chosen,
            settings=cfg,
        )
    except BDRateError as exc:
        logger.debug("bd-rate computation failed", exc_info=True)
        typer.secho(f"error: {exc}", err=True)
        raise typer.Exit(code=1) from None

    if verbose:
        typer.echo(
            f"method={result.method.value} window=[{result.window.lo:g}, {result.window.hi:g}] "
            f"overlap={result.window.ratio:g}"
        )
    typer.echo(str(result.bd_rate))


@app.command()
def methods() -> None:
    """List the available interpolation methods."""

    for m in Method:
        typer.echo(m.value)


def main() -> None:
    """Execute the Typer application."""

    app()


if __name__ == "__main__":
    main()
