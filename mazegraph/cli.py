"""
Command-line interface for mazegraph.

Generates maze images and dumps the graph extracted from a maze image.
"""

import sys

import click
from pydantic import ValidationError

from mazegraph import __version__
from mazegraph.config import MazeConfig, load_config_file
from mazegraph.geometry.graph import MazeNetwork
from mazegraph.utils.exceptions import MazeError
from mazegraph.utils.maze_logging import configure_development_logging, configure_logging


@click.group()
@click.version_option(version=__version__, prog_name="mazegraph")
def main():
    """
    mazegraph: perfect maze images and maze graphs

    Generate mazes by randomized depth-first search and turn maze images back
    into graphs of decision points.
    """


@main.command()
@click.option("--seed", "-s", type=click.IntRange(min=0), default=None, help="Random seed (default: current time)")
@click.option("--width", "-w", type=int, default=None, help="Image width in pixels, border included [default: 21]")
@click.option("--height", "-h", type=int, default=None, help="Image height in pixels, border included [default: 21]")
@click.option("--output", "-o", type=click.Path(dir_okay=False), default=None, help="Output image [default: maze.bmp]")
@click.option("--config", "-c", "config_path", type=click.Path(), default=None, help="JSON or YAML config file")
@click.option("--ascii", "show_ascii", is_flag=True, help="Print the maze as text")
@click.option("--verbose", "-v", is_flag=True, help="Trace every step of the walk")
def generate(seed, width, height, output, config_path, show_ascii, verbose):
    """
    Generate a perfect maze and write it as an image.

    Command-line options override values from --config.

    Examples:
        mazegraph generate --seed 42 --width 41 --height 41
        mazegraph generate -c maze.yaml -o big.png
    """
    if verbose:
        configure_development_logging(include_location=False)
    else:
        configure_logging(level="WARNING")

    try:
        params = load_config_file(config_path) if config_path else {}
        overrides = {"seed": seed, "width": width, "height": height, "output": output}
        params.update({k: v for k, v in overrides.items() if v is not None})
        config = MazeConfig(**params)

        maze = config.create_generator(trace=verbose)
        path = maze.render_to_file(config.output)
    except (MazeError, ValidationError, FileNotFoundError, ValueError) as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    if show_ascii:
        click.echo(maze.to_ascii())

    click.echo(f"Seed: {maze.seed}")
    click.echo(f"Size: {maze.width} x {maze.height}")
    click.echo(f"Cells: {len(maze.grid)}")
    click.echo(f"Saved to: {path}")
    click.echo("Maze created!")


@main.command()
@click.argument("image", type=click.Path())
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output")
def extract(image, verbose):
    """
    Parse a maze image and print its node graph.

    Open pixels must be pure white; everything else is wall.

    Examples:
        mazegraph extract maze.bmp
    """
    configure_logging(level="DEBUG" if verbose else "WARNING")

    try:
        network = MazeNetwork(image)
    except MazeError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    click.echo(network.describe())


if __name__ == "__main__":
    main()
