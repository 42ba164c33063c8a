"""
Flow Rendering CLI Commands for PyNoiseFlow

Command line interface drawing flow tails and curved walks through a biased
2D noise field.
"""

import click

from .. import constants as cte
from ..config import CanvasConfig, FlowConfig
from ..palette import load_hex_palette
from ..render import render_flow
from .clihelper import click_progress, fail, make_seed_source, noise_kind_option, seed_option, verbose_option


@click.command()
@click.option("-o", "--out", type=click.Path(dir_okay=False), default="noise_flow.png",
              show_default=True, help="Output PNG path")
@click.option("--width", type=int, default=cte.WIDTH, show_default=True, help="Image width")
@click.option("--height", type=int, default=cte.HEIGHT, show_default=True, help="Image height")
@seed_option
@noise_kind_option(cte.FLOW_NOISE)
@click.option("--scale", type=float, default=cte.FLOW_SCALE, show_default=True,
              help="Flow noise scale in pixels")
@click.option("--bias-x", type=float, default=cte.FLOW_BIAS_X, show_default=True,
              help="Constant drift added to the x flow component")
@click.option("--bias-y", type=float, default=cte.FLOW_BIAS_Y, show_default=True,
              help="Constant drift added to the y flow component")
@click.option("--normalize/--no-normalize", default=cte.FLOW_NORMALIZE, show_default=True,
              help="Normalize flow vectors before adding the bias")
@click.option("--draw-flow-tails/--no-draw-flow-tails", default=False, show_default=True,
              help="Draw a grid of flow tails")
@click.option("--tail-stride", type=float, default=cte.TAIL_STRIDE, show_default=True,
              help="Spacing of the tail grid")
@click.option("--tail-length", type=float, default=cte.TAIL_LENGTH, show_default=True,
              help="Tail length")
@click.option("--draw-flow-walks/--no-draw-flow-walks", default=True, show_default=True,
              help="Draw curved flow walks")
@click.option("--flow-walk-n", type=int, default=cte.WALK_COUNT, show_default=True,
              help="Number of walks")
@click.option("--flow-walk-steps", type=int, default=cte.WALK_STEPS, show_default=True,
              help="Maximum curve segments per walk")
@click.option("--flow-walk-step-size", type=float, default=cte.WALK_STEP_SIZE, show_default=True,
              help="Step size of the walk integrator")
@click.option("--color-scale", type=float, default=cte.COLOR_SCALE, show_default=True,
              help="Color noise scale, relative to --scale")
@click.option("--color-range", type=float, default=cte.COLOR_RANGE, show_default=True,
              help="Gain from color noise to palette index")
@click.option("--palette-file", type=click.Path(exists=True, dir_okay=False), default=None,
              help="Hex palette for walk colors (default: built-in gradient)")
@verbose_option
def flow(out, width, height, seed, noise, scale, bias_x, bias_y, normalize,
         draw_flow_tails, tail_stride, tail_length, draw_flow_walks, flow_walk_n,
         flow_walk_steps, flow_walk_step_size, color_scale, color_range, palette_file, verbose):
    """
    Draw flow tails and walks through a noise flow field.

    Walks start at random points and follow the field as chained cubic
    curves until they leave the image. Their colors come from a second,
    coarser noise field.

    Examples:

        # Default walks
        pnf-flow -o flow.png --seed 42

        # Tails only, unbiased field
        pnf-flow --draw-flow-tails --no-draw-flow-walks --bias-x 0 --bias-y 0
    """
    try:
        config = FlowConfig(
            canvas=CanvasConfig(width, height),
            noise=noise,
            scale=scale,
            bias=(bias_x, bias_y),
            normalize=normalize,
            draw_tails=draw_flow_tails,
            tail_stride=tail_stride,
            tail_length=tail_length,
            draw_walks=draw_flow_walks,
            n_walks=flow_walk_n,
            walk_steps=flow_walk_steps,
            step_size=flow_walk_step_size,
            color_scale=color_scale,
            color_range=color_range,
            palette=load_hex_palette(palette_file) if palette_file else None,
        )
        seeds = make_seed_source(seed, verbose)

        if verbose:
            click.echo(f"Rendering {width}x{height} flow image...")

        canvas = render_flow(config, seeds, progress=click_progress(verbose))

        if verbose:
            click.echo(f"Saving PNG to '{out}'...")
        canvas.save(out)
        click.echo(f"Saved '{out}'")

    except click.ClickException:
        raise

    except Exception as e:
        fail(e)


if __name__ == "__main__":
    flow()
