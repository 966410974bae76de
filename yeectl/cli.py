"""Typer CLI entrypoint."""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass

import typer

from yeectl.core.errors import YeectlError
from yeectl.core.model import SUDDEN, BulbConfig, ExchangeResult, PowerOnMode, Property, Smooth, TransitionEffect
from yeectl.core.service import BulbService

app = typer.Typer(help="Control a LAN-enabled light bulb, one command per invocation")


@dataclass(frozen=True)
class TargetOptions:
    bulb: str | None
    host: str | None
    port: int | None
    timeout_s: float | None


SmoothOption = typer.Option(None, "--smooth", help="Animate the change over MS milliseconds")


def _effect(smooth_ms: int | None) -> TransitionEffect:
    return Smooth(smooth_ms) if smooth_ms is not None else SUDDEN


def _build_service() -> BulbService:
    return BulbService()


def _run(ctx: typer.Context, action: Callable[[BulbService, BulbConfig], ExchangeResult]) -> None:
    target: TargetOptions = ctx.obj
    try:
        service = _build_service()
        bulb = service.resolve_bulb(
            target.bulb,
            host=target.host,
            port=target.port,
            timeout_s=target.timeout_s,
        )
        result = action(service, bulb)
        typer.echo(f"Sent {result.request.rstrip()} to {result.bulb.address}")
        typer.echo(f"Response: {result.response.rstrip()}")
    except YeectlError as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(code=1) from None


@app.callback()
def main(
    ctx: typer.Context,
    bulb: str | None = typer.Option(None, "--bulb", help="Configured bulb name"),
    host: str | None = typer.Option(None, "--host", help="Bulb address, bypasses the config file"),
    port: int | None = typer.Option(None, "--port", help="Bulb TCP port (default 55443)"),
    timeout: float | None = typer.Option(None, "--timeout", help="Socket timeout in seconds"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log wire traffic"),
) -> None:
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")
    ctx.obj = TargetOptions(bulb=bulb, host=host, port=port, timeout_s=timeout)


@app.command("bulbs")
def list_bulbs() -> None:
    """List bulbs defined in the config file."""
    try:
        bulbs = _build_service().list_bulbs()
    except YeectlError as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(code=1) from None
    if not bulbs:
        typer.echo("No bulbs configured")
        return
    for bulb in bulbs:
        typer.echo(f"{bulb.name}: {bulb.address} (timeout {bulb.timeout_s}s)")


@app.command("toggle")
def toggle(ctx: typer.Context) -> None:
    """Toggle the bulb's power."""
    _run(ctx, lambda service, bulb: service.toggle(bulb))


@app.command("on")
def power_on(
    ctx: typer.Context,
    mode: str | None = typer.Option(
        None,
        "--mode",
        help="Power-on mode: " + ", ".join(m.name.lower() for m in PowerOnMode),
    ),
    smooth: int | None = SmoothOption,
) -> None:
    """Switch the bulb on."""
    power_mode: PowerOnMode | None = None
    if mode is not None:
        try:
            power_mode = PowerOnMode[mode.upper()]
        except KeyError:
            raise typer.BadParameter(f"Unknown mode '{mode}'", param_hint="--mode") from None
    _run(ctx, lambda service, bulb: service.set_power(bulb, True, power_mode, _effect(smooth)))


@app.command("off")
def power_off(ctx: typer.Context, smooth: int | None = SmoothOption) -> None:
    """Switch the bulb off."""
    _run(ctx, lambda service, bulb: service.set_power(bulb, False, None, _effect(smooth)))


@app.command("bright")
def set_brightness(
    ctx: typer.Context,
    value: int = typer.Argument(..., help="Brightness percentage (1-100)"),
    smooth: int | None = SmoothOption,
) -> None:
    """Set brightness."""
    _run(ctx, lambda service, bulb: service.set_brightness(bulb, value, _effect(smooth)))


@app.command("ct")
def set_color_temp(
    ctx: typer.Context,
    kelvin: int = typer.Argument(..., help="Color temperature in Kelvin (1700-6500)"),
    smooth: int | None = SmoothOption,
) -> None:
    """Set white color temperature."""
    _run(ctx, lambda service, bulb: service.set_color_temp(bulb, kelvin, _effect(smooth)))


@app.command("rgb")
def set_rgb(
    ctx: typer.Context,
    r: int,
    g: int,
    b: int,
    smooth: int | None = SmoothOption,
) -> None:
    """Set color from red, green and blue channels (0-255 each)."""
    _run(ctx, lambda service, bulb: service.set_rgb(bulb, r, g, b, _effect(smooth)))


@app.command("hsv")
def set_hsv(
    ctx: typer.Context,
    hue: int = typer.Argument(..., help="Hue (0-359)"),
    sat: int = typer.Argument(..., help="Saturation (0-100)"),
    smooth: int | None = SmoothOption,
) -> None:
    """Set color from hue and saturation."""
    _run(ctx, lambda service, bulb: service.set_hsv(bulb, hue, sat, _effect(smooth)))


@app.command("get")
def get_prop(
    ctx: typer.Context,
    properties: list[Property] = typer.Argument(..., help="Property names to query"),
) -> None:
    """Query bulb properties."""
    _run(ctx, lambda service, bulb: service.get_prop(bulb, properties))


def run() -> None:
    app()


if __name__ == "__main__":
    run()
