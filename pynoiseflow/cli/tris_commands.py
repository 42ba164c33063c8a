"""
Triangle Rendering CLI Commands for PyNoiseFlow

Command line interface filling the image with a triangle tessellation
colored from a palette.
"""

import click

from .. import constants as cte
from ..config import COLOR_MODES, CanvasConfig, TrisConfig
from ..render import render_noise_tris
from .clihelper import (
    click_progress,
    fail,
    load_palette_option,
    make_seed_source,
    noise_kind_option,
    palette_options,
    seed_option,
    verbose_option,
)


@click.command()
@click.option("-o", "--out", type=click.Path(dir_okay=False), default="noise_tris.png",
              show_default=True, help="Output PNG path")
@click.option("--width", type=int, default=cte.WIDTH, show_default=True, help="Image width")
@click.option("--height", type=int, default=cte.HEIGHT, show_default=True, help="Image height")
@click.option("--triangle-size", type=float, default=cte.TRIANGLE_SIDE, show_default=True,
              help="Triangle side length")
@seed_option
@noise_kind_option(cte.TRIS_NOISE)
@click.option("--scale", type=float, default=cte.TRIS_SCALE, show_default=True,
              help="Height noise scale in pixels")
@click.option("--color-mode", type=click.Choice(COLOR_MODES), default="noise", show_default=True,
              help="Color triangles from the height noise or at random")
@click.option("--stagger/--no-stagger", default=True, show_default=True,
              help="Shift odd rows by half a triangle")
@palette_options
@verbose_option
def tris(out, width, height, triangle_size, seed, noise, scale, color_mode, stagger,
         palette_file, palette_name, colormap, verbose):
    """
    Draw a grid of triangles with colors derived from a noise field.

    Examples:

        # Default palette, noise colored
        pnf-tris -o tris.png --seed 3

        # Random colors from a custom palette
        pnf-tris --color-mode random --palette-file colors.hex

        # Smooth gradient colors
        pnf-tris --colormap magma --triangle-size 16
    """
    try:
        palette = load_palette_option(palette_file, palette_name, colormap)
        config = TrisConfig(
            canvas=CanvasConfig(width, height),
            side=triangle_size,
            noise=noise,
            scale=scale,
            color_mode=color_mode,
            stagger=stagger,
            palette=palette,
        )
        seeds = make_seed_source(seed, verbose)

        if verbose:
            click.echo(f"Rendering {width}x{height} triangles of side {triangle_size}...")

        canvas = render_noise_tris(config, seeds, progress=click_progress(verbose))

        if verbose:
            click.echo(f"Saving PNG to '{out}'...")
        canvas.save(out)
        click.echo(f"Saved '{out}'")

    except click.ClickException:
        raise

    except Exception as e:
        fail(e)


if __name__ == "__main__":
    tris()
