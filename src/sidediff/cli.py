"""sidediff CLI — Typer application with render, log, and init commands."""

from __future__ import annotations

import logging
import os
import sys
from pathlib import Path
from typing import Iterable, Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from sidediff import __version__

app = typer.Typer(
    name="sidediff",
    help="Show git diffs and logs side by side in the terminal.",
    add_completion=False,
    no_args_is_help=True,
)

console = Console(stderr=True)

logger = logging.getLogger("sidediff")


def _configure_logging(verbose: bool, debug: bool) -> None:
    level = logging.DEBUG if debug else logging.INFO if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=debug, markup=False)],
        force=True,
    )


def _load_settings(config: Optional[str], width: Optional[int], align: Optional[str]):
    """Load config and apply CLI overrides, exit 2 on failure."""
    from sidediff.config.loader import ConfigError, load_config
    from sidediff.config.schema import ALIGN_MODES

    try:
        cfg = load_config(Path.cwd(), config)
    except ConfigError as exc:
        console.print(f"[bold red]Config error:[/bold red] {escape(str(exc))}")
        raise typer.Exit(code=2) from exc

    if width is not None:
        if width <= 0:
            console.print(f"[bold red]Invalid width:[/bold red] {width}")
            raise typer.Exit(code=2)
        cfg.layout.width = width
    if align:
        if align not in ALIGN_MODES:
            console.print(f"[bold red]Invalid align mode:[/bold red] {align}")
            raise typer.Exit(code=2)
        cfg.parser.align = align  # type: ignore[assignment]
    return cfg


def _emit(lines: Iterable[str], cfg, *, plain: bool) -> None:
    """Run *lines* through the pipeline and write the result to stdout."""
    from sidediff.git.diff_parser import DiffParseError
    from sidediff.output.plain import PlainRenderer
    from sidediff.output.terminal import TerminalRenderer
    from sidediff.pipeline import side_by_side

    out = Console(highlight=False, width=cfg.layout.width)
    width = out.width
    logger.info("rendering at width %d, align=%s", width, cfg.parser.align)

    try:
        if plain:
            for unit in side_by_side(lines, PlainRenderer(width, cfg.layout), cfg.parser.align):
                print(unit)
        else:
            renderer = TerminalRenderer(width, cfg.layout, cfg.theme)
            for unit in side_by_side(lines, renderer, cfg.parser.align):
                out.print(unit, soft_wrap=True)
    except DiffParseError as exc:
        console.print(f"[bold red]Parse error:[/bold red] {escape(str(exc))}")
        raise typer.Exit(code=2) from exc
    except BrokenPipeError:
        # Reader went away (e.g. `| head`); silence the flush at interpreter exit.
        devnull = os.open(os.devnull, os.O_WRONLY)
        os.dup2(devnull, sys.stdout.fileno())
        raise typer.Exit(code=0)


# ── render ────────────────────────────────────────────────────────────────────


@app.command()
def render(
    file: Optional[str] = typer.Argument(None, help="Diff or log file to read (default: stdin)"),
    config: Optional[str] = typer.Option(None, "--config", "-c", help="Path to .sidediff.toml"),
    width: Optional[int] = typer.Option(None, "--width", "-w", help="Total output width"),
    align: Optional[str] = typer.Option(None, "--align", help="Hunk alignment: collected | declared"),
    plain: bool = typer.Option(False, "--plain", help="Plain text output without colour"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose output"),
    debug: bool = typer.Option(False, "--debug", help="Debug output"),
) -> None:
    """Render a diff log from FILE or stdin side by side."""
    from sidediff.streams import iter_stream

    _configure_logging(verbose, debug)
    cfg = _load_settings(config, width, align)

    if file is None or file == "-":
        _emit(iter_stream(sys.stdin), cfg, plain=plain)
        return

    try:
        with open(file, encoding="utf-8", errors="replace") as fh:
            _emit(iter_stream(fh), cfg, plain=plain)
    except OSError as exc:
        console.print(f"[bold red]Error:[/bold red] cannot read {file}: {exc.strerror}")
        raise typer.Exit(code=2) from exc


# ── log ───────────────────────────────────────────────────────────────────────


@app.command(context_settings={"allow_extra_args": True, "ignore_unknown_options": True})
def log(
    ctx: typer.Context,
    config: Optional[str] = typer.Option(None, "--config", "-c", help="Path to .sidediff.toml"),
    width: Optional[int] = typer.Option(None, "--width", "-w", help="Total output width"),
    align: Optional[str] = typer.Option(None, "--align", help="Hunk alignment: collected | declared"),
    plain: bool = typer.Option(False, "--plain", help="Plain text output without colour"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose output"),
    debug: bool = typer.Option(False, "--debug", help="Debug output"),
) -> None:
    """Run `git log -p` with any extra arguments and render it side by side."""
    from sidediff.git.adapter import GitError, get_repo_root, iter_git_log

    _configure_logging(verbose, debug)
    cfg = _load_settings(config, width, align)

    try:
        repo_root = get_repo_root()
        logger.debug("repo root: %s", repo_root)
        _emit(iter_git_log(ctx.args, repo_root), cfg, plain=plain)
    except GitError as exc:
        console.print(f"[bold red]Git error:[/bold red] {escape(str(exc))}")
        raise typer.Exit(code=2) from exc


# ── init ──────────────────────────────────────────────────────────────────────


@app.command()
def init() -> None:
    """Generate a starter .sidediff.toml in the current directory."""
    from sidediff.config.defaults import CONFIG_FILENAME, DEFAULT_TOML

    config_path = Path.cwd() / CONFIG_FILENAME

    if config_path.exists():
        console.print(f"[yellow]⚠[/yellow]  {CONFIG_FILENAME} already exists at {config_path}")
        raise typer.Exit(code=1)

    config_path.write_text(DEFAULT_TOML, encoding="utf-8")
    console.print(f"[green]✓[/green] Created {config_path}")


# ── version ───────────────────────────────────────────────────────────────────


def _version_callback(value: bool) -> None:
    if value:
        print(f"sidediff {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        False, "--version", "-V", callback=_version_callback,
        is_eager=True, help="Show version and exit",
    ),
) -> None:
    """sidediff — side-by-side git diffs for the terminal."""
