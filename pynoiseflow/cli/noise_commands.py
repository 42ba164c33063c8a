"""
Noise Preview CLI Commands for PyNoiseFlow

Command line interface drawing the raw output of a noise generator, useful
to choose generator kinds and scales.
"""

import click

from .. import constants as cte
from ..config import CanvasConfig, NoiseImageConfig
from ..render import render_noise_image
from .clihelper import (
    fail,
    load_palette_option,
    make_seed_source,
    noise_kind_option,
    palette_options,
    seed_option,
    verbose_option,
)


@click.command()
@click.option("-o", "--out", type=click.Path(dir_okay=False), default="noise_debug.png",
              show_default=True, help="Output PNG path")
@click.option("--width", type=int, default=cte.WIDTH, show_default=True, help="Image width")
@click.option("--height", type=int, default=cte.HEIGHT, show_default=True, help="Image height")
@seed_option
@noise_kind_option(cte.PREVIEW_NOISE)
@click.option("--noise-scale", type=float, default=cte.PREVIEW_SCALE, show_default=True,
              help="Noise scale in pixels")
@click.option("--noise-norm", is_flag=True,
              help="Treat --noise-scale as noise units across the longer image side")
@palette_options
@verbose_option
def noise_debug(out, width, height, seed, noise, noise_scale, noise_norm,
                palette_file, palette_name, colormap, verbose):
    """
    Draw the output of a noise function for debugging.

    Values in [-1, 1] map to gray levels, or through a palette when one is
    given.

    Examples:

        pnf-noise --noise perlin --noise-scale 50

        # Four Perlin cells across the image, colored
        pnf-noise --noise perlin --noise-scale 4 --noise-norm --colormap viridis
    """
    try:
        config = NoiseImageConfig(
            canvas=CanvasConfig(width, height),
            noise=noise,
            scale=noise_scale,
            relative=noise_norm,
            palette=load_palette_option(palette_file, palette_name, colormap),
        )
        seeds = make_seed_source(seed, verbose)

        if verbose:
            click.echo(f"Sampling {noise} noise over {width}x{height} pixels "
                       f"(field scale {config.field_scale:g})...")

        canvas = render_noise_image(config, seeds)
        canvas.save(out)
        click.echo(f"Saved '{out}'")

    except click.ClickException:
        raise

    except Exception as e:
        fail(e)


if __name__ == "__main__":
    noise_debug()
