"""
Featherweight CLI Commands for PyNoiseFlow

Command line interface illustrating Perlin noise flow at pixel level.
"""

import click

from .. import constants as cte
from ..config import FeatherweightConfig
from ..render import render_featherweight
from .clihelper import click_progress, fail, make_seed_source, noise_kind_option, seed_option, verbose_option


@click.command()
@click.option("-o", "--out", type=click.Path(dir_okay=False), default="featherweight.png",
              show_default=True, help="Output PNG path")
@click.option("--size", type=int, default=cte.FEATHER_SIZE, show_default=True,
              help="Width and height of the square image")
@click.option("--scale", type=float, default=cte.FEATHER_SCALE, show_default=True,
              help="Noise units across the image")
@seed_option
@noise_kind_option("perlin")
@click.option("--draw-flow-bg", is_flag=True, help="Draw a visualization of flow in the background")
@click.option("--draw-flow-tails", is_flag=True, help="Draw a visualization of flow as tails")
@click.option("--flow-tail-freq", type=int, default=cte.FEATHER_TAIL_FREQ, show_default=True,
              help="How many flow tails to draw in a row across the image")
@click.option("--flow-tail-length", type=int, default=cte.FEATHER_TAIL_LENGTH, show_default=True,
              help="Tail length in flow steps")
@click.option("--draw-flow-walks/--no-draw-flow-walks", default=True, show_default=True,
              help="Trace walks through the flow")
@click.option("--flow-walk-freq", type=int, default=cte.FEATHER_WALK_COUNT, show_default=True,
              help="Number of walks")
@click.option("--flow-walk-length", type=int, default=cte.FEATHER_WALK_LENGTH, show_default=True,
              help="Maximum pixels per walk")
@click.option("--flow-walk-norm", is_flag=True, help="Normalize walk velocity")
@verbose_option
def featherweight(out, size, scale, seed, noise, draw_flow_bg, draw_flow_tails, flow_tail_freq,
                  flow_tail_length, draw_flow_walks, flow_walk_freq, flow_walk_length,
                  flow_walk_norm, verbose):
    """
    Illustrate noise flow with pixel traces on a black square.

    Examples:

        pnf-featherweight --seed 1 --draw-flow-bg

        pnf-featherweight --size 512 --draw-flow-tails --no-draw-flow-walks
    """
    try:
        config = FeatherweightConfig(
            size=size,
            scale=scale,
            noise=noise,
            draw_flow_bg=draw_flow_bg,
            draw_tails=draw_flow_tails,
            tail_freq=flow_tail_freq,
            tail_length=flow_tail_length,
            draw_walks=draw_flow_walks,
            walk_count=flow_walk_freq,
            walk_length=flow_walk_length,
            walk_normalize=flow_walk_norm,
        )
        seeds = make_seed_source(seed, verbose)

        if verbose:
            click.echo(f"Rendering {size}x{size} featherweight image...")

        canvas = render_featherweight(config, seeds, progress=click_progress(verbose))
        canvas.save(out)
        click.echo(f"Saved '{out}'")

    except click.ClickException:
        raise

    except Exception as e:
        fail(e)


if __name__ == "__main__":
    featherweight()
