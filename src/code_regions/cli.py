"""Command-line interface for code-regions."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer

from . import session
from .colorspace import hex_to_rgb, parse_color, rgb_to_hsl
from .config import HighlightConfig, discover_config
from .exceptions import CodeRegionsError, InvalidColorFormat
from .host import MemoryHost
from .logger import setup_logger
from .painter import Region
from .policy import color_for_level
from .registry import style_name_for_level

app = typer.Typer(
    name="code-regions",
    help="Nesting-level background colors for code regions",
    add_completion=False,
)

PREVIEW_BUFFER = 1


@app.callback()
def main_callback(
    verbose: Annotated[
        int,
        typer.Option(
            "--verbose",
            "-v",
            help="Verbosity level: 0=silent (default), 1=show changes, 2=show all checks, 3=debug",
            min=0,
            max=3,
        ),
    ] = 0,
    config: Annotated[
        Path | None,
        typer.Option(
            "--config",
            "-c",
            help="Path to config file (default: code_regions.yaml)",
        ),
    ] = None,
) -> None:
    """Global options for code-regions commands."""
    setup_logger(verbose)
    session.set_config_path(config)


def _load_config() -> HighlightConfig:
    try:
        return discover_config()
    except CodeRegionsError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1) from e


def _make_host(background: str | None, light: bool) -> MemoryHost:
    host = MemoryHost(background="light" if light else "dark")
    if background is not None:
        try:
            host.set_user_style("Normal", parse_color(background))
        except InvalidColorFormat as e:
            typer.echo(f"Error: {e}", err=True)
            raise typer.Exit(1) from e
    return host


@app.command()
def colors(
    background: Annotated[
        str | None,
        typer.Option("--background", "-b", help="Editor background color (#rrggbb)"),
    ] = None,
    light: Annotated[
        bool, typer.Option("--light", help="Assume a light editor when no background is given")
    ] = False,
    levels: Annotated[
        int, typer.Option("--levels", "-n", help="Number of nesting levels to show", min=1)
    ] = 6,
) -> None:
    """Show the style and color used for each nesting level."""
    config = _load_config()
    host = _make_host(background, light)
    painter = session.setup(host, config)

    if not config.enable_colors:
        typer.echo("Region colors are disabled")
        return

    for level in range(1, levels + 1):
        name = painter.registry.ensure_style(level, color_for_level(level, config, host))
        entry = painter.registry.get(level)
        color = entry.color if entry is not None else "-"
        typer.echo(f"{level:>3}  {color}  {name or '-'}")


@app.command()
def convert(
    color: Annotated[str, typer.Argument(help="Color to convert (#rrggbb)")],
) -> None:
    """Print the RGB and HSL components of a color."""
    try:
        canonical = parse_color(color)
    except InvalidColorFormat as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1) from e

    rgb = hex_to_rgb(canonical)
    hsl = rgb_to_hsl(rgb)
    if rgb is None or hsl is None:
        typer.echo(f"Error: cannot convert {color!r}", err=True)
        raise typer.Exit(1)
    typer.echo(f"hex  {canonical}")
    typer.echo(f"rgb  {rgb.r:.4f} {rgb.g:.4f} {rgb.b:.4f}")
    typer.echo(f"hsl  {hsl.h:.4f} {hsl.s:.4f} {hsl.l:.4f}")


def _parse_region(spec: str) -> Region:
    parts = spec.split(":")
    if len(parts) != 3:  # noqa: PLR2004
        raise ValueError(f"Region must be START:END:LEVEL, got: {spec}")
    start, end, level = (int(p) for p in parts)
    return Region(start_line=start, end_line=end, level=level)


@app.command()
def preview(
    file: Annotated[Path, typer.Argument(help="Text file to highlight")],
    region: Annotated[
        list[str] | None,
        typer.Option(
            "--region",
            "-r",
            help="Region as START:END:LEVEL (1-based marker lines); repeatable",
        ),
    ] = None,
    background: Annotated[
        str | None,
        typer.Option("--background", "-b", help="Editor background color (#rrggbb)"),
    ] = None,
    light: Annotated[
        bool, typer.Option("--light", help="Assume a light editor when no background is given")
    ] = False,
) -> None:
    """Paint regions of a file and print each line with its style."""
    if not file.exists():
        typer.echo(f"Error: File not found: {file}", err=True)
        raise typer.Exit(1)

    try:
        regions = [_parse_region(r) for r in region or []]
    except ValueError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1) from e

    config = _load_config()
    host = _make_host(background, light)
    lines = file.read_text(encoding="utf-8").splitlines()
    host.add_buffer(PREVIEW_BUFFER, len(lines))

    painter = session.setup(host, config)
    painted = painter.refresh(PREVIEW_BUFFER, regions)

    width = max((len(style_name_for_level(r.level)) for r in regions), default=0)
    for style, text in zip(host.line_styles(PREVIEW_BUFFER), lines, strict=True):
        typer.echo(f"{(style or ''):<{width}} | {text}")
    typer.echo(f"{painted} of {len(regions)} regions painted")


def main() -> None:
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
