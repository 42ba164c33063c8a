"""
Palette CLI Commands for PyNoiseFlow

Command line interface to validate hex palette files and inspect the
palettes bundled with the package.
"""

import click

from ..palette import get_default_palette, list_default_palettes, load_hex_palette
from .clihelper import fail


@click.command()
@click.argument("palette_file", type=click.Path(exists=True, dir_okay=False), required=False)
@click.option("--name", "-n", type=click.Choice(list_default_palettes()), default=None,
              help="Show a bundled palette instead of a file")
@click.option("--list", "list_palettes", is_flag=True, help="List the bundled palettes")
def palette(palette_file, name, list_palettes):
    """
    Validate and print a hex palette.

    PALETTE_FILE: Text file with one RRGGBB color per line

    Examples:

        pnf-palette colors.hex

        pnf-palette --list

        pnf-palette --name ocaso
    """
    try:
        if list_palettes:
            for palette_name in list_default_palettes():
                click.echo(palette_name)
            return

        if palette_file is None and name is None:
            raise click.UsageError("Give a PALETTE_FILE, --name or --list")

        colors = load_hex_palette(palette_file) if palette_file else get_default_palette(name)
        for index, color in enumerate(colors):
            r, g, b, _ = color.to_rgba8()
            click.echo(f"{index:3d}  {color.to_hex()}  rgb({r}, {g}, {b})")
        click.echo(f"{len(colors)} colors")

    except click.ClickException:
        raise

    except Exception as e:
        fail(e)


if __name__ == "__main__":
    palette()
