"""Shared helpers for the PyNoiseFlow click commands."""

from __future__ import annotations

import sys

import click

from ..noise import NOISE_KINDS, SeedSource
from ..palette import GradientPalette, get_default_palette, list_default_palettes, load_hex_palette


def noise_kind_option(default):
    return click.option(
        "--noise",
        type=click.Choice(NOISE_KINDS),
        default=default,
        show_default=True,
        help="Noise generator",
    )


seed_option = click.option(
    "--seed",
    type=int,
    default=None,
    help="Random seed (default: OS entropy)",
)

verbose_option = click.option("--verbose", "-v", is_flag=True, help="Enable verbose output")


def make_seed_source(seed, verbose=False) -> SeedSource:
    seeds = SeedSource(seed)
    if verbose:
        click.echo(f"Seed: {seed if seed is not None else 'entropy'}")
    return seeds


def click_progress(verbose):
    """Progress hook for renderers: a click progress bar on stderr when verbose."""

    def progress(iterable, length, label):
        if not verbose:
            return iterable
        return _bar(iterable, length, label)

    return progress


def _bar(iterable, length, label):
    with click.progressbar(iterable, length=length, label=label, file=sys.stderr) as bar:
        yield from bar


def load_palette_option(palette_file=None, palette_name=None, colormap=None):
    """
    Resolve the mutually exclusive palette options of a command.

    Returns None when no option is set, so the renderer picks its default.
    """
    chosen = [opt for opt in (palette_file, palette_name, colormap) if opt is not None]
    if len(chosen) > 1:
        raise click.UsageError("Use only one of --palette-file, --palette and --colormap")
    if palette_file is not None:
        return load_hex_palette(palette_file)
    if palette_name is not None:
        return get_default_palette(palette_name)
    if colormap is not None:
        return GradientPalette.from_colormap(colormap)
    return None


def palette_options(f):
    """Attach --palette-file / --palette / --colormap to a command."""
    f = click.option(
        "--colormap",
        type=str,
        default=None,
        help="Use a matplotlib colormap (e.g. viridis) as a gradient palette",
    )(f)
    f = click.option(
        "--palette",
        "palette_name",
        type=click.Choice(list_default_palettes()),
        default=None,
        help="Use a bundled palette",
    )(f)
    f = click.option(
        "--palette-file",
        type=click.Path(exists=True, dir_okay=False),
        default=None,
        help="Hex palette file, one RRGGBB color per line",
    )(f)
    return f


def fail(error):
    click.echo(f"Error: {error}", err=True)
    sys.exit(1)
