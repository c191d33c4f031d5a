"""Command-line interface for flatland."""

import logging
import sys

import click

from . import __version__
from .point_io import read_text, write_text, parse_points, format_points
from .geometry import (
    Envelope,
    PrecisionModel,
    FLOATING_SINGLE,
    envelope_of,
    filter_by_envelope,
    has_repeated_points,
    is_ring,
    remove_repeated_points,
    scroll,
)

logger = logging.getLogger(__name__)


def _load_points(input):
    try:
        return parse_points(read_text(input if input != '-' else None))
    except (OSError, ValueError) as e:
        click.echo(f"Error reading input: {e}", err=True)
        sys.exit(1)


def _emit(points, output):
    try:
        write_text(format_points(points), output if output != '-' else None)
    except OSError as e:
        click.echo(f"Error writing output: {e}", err=True)
        sys.exit(1)


@click.group()
@click.version_option(version=__version__)
@click.option('--verbose', '-v', is_flag=True, help='Log debug messages to stderr')
def main(verbose):
    """flatland: planar points, envelopes and precision models.

    Point lists are read as text, one point per line (x y [z]).

    Examples:

        flatland envelope points.txt

        cat ring.txt | flatland scroll - 12 > scrolled.txt
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )


@main.command()
@click.argument('input', default='-', required=False)
def envelope(input):
    """Print the envelope of a point list and its metrics."""
    points = _load_points(input)
    env = envelope_of(points)

    click.echo(str(env))
    if env.is_null():
        click.echo("null envelope")
        return
    centre = env.centre()
    click.echo(f"width:    {env.width():g}")
    click.echo(f"height:   {env.height():g}")
    click.echo(f"area:     {env.area():g}")
    click.echo(f"diameter: {env.diameter():g}")
    click.echo(f"centre:   {centre.x:g} {centre.y:g}")


@main.command()
@click.argument('input', default='-', required=False)
@click.option('-o', '--output', default='-', help='Output file (default: stdout)')
@click.option('--scale', '-s', type=float, default=None,
              help='Fixed precision scale, e.g. 1000 for three decimals')
@click.option('--single', is_flag=True, help='Round to single precision floats')
def snap(input, output, scale, single):
    """Round point x and y onto a precision model grid. z is left as is."""
    if single and scale is not None:
        click.echo("Use either --scale or --single, not both", err=True)
        sys.exit(1)
    if single:
        pm = PrecisionModel(FLOATING_SINGLE)
    elif scale is not None:
        try:
            pm = PrecisionModel.fixed(scale)
        except ValueError as e:
            click.echo(f"Error: {e}", err=True)
            sys.exit(1)
    else:
        pm = PrecisionModel()

    points = _load_points(input)
    for p in points:
        pm.make_precise_point(p)
    logger.debug("Snapped %d points with %s", len(points), pm)
    _emit(points, output)


@main.command()
@click.argument('input', default='-', required=False)
@click.option('-o', '--output', default='-', help='Output file (default: stdout)')
@click.option('--wrap', is_flag=True,
              help='Also treat the last point as adjacent to the first')
def dedup(input, output, wrap):
    """Remove points identical to the point before them."""
    points = _load_points(input)
    if not has_repeated_points(points, wrap):
        logger.debug("No repeated points in %d points", len(points))
    _emit(remove_repeated_points(points, wrap), output)


@main.command('scroll')
@click.argument('input')
@click.argument('index', type=int)
@click.option('-o', '--output', default='-', help='Output file (default: stdout)')
@click.option('--ring/--no-ring', default=None,
              help='Preserve ring closure (default: detect)')
def scroll_command(input, index, output, ring):
    """Rotate a point list so the point at INDEX comes first."""
    points = _load_points(input)
    if ring is None:
        ring = is_ring(points)
    scroll(points, index, ring)
    _emit(points, output)


@main.command('filter')
@click.argument('input', default='-', required=False)
@click.option('-o', '--output', default='-', help='Output file (default: stdout)')
@click.option('--bbox', nargs=4, type=float, required=True,
              metavar='MINX MINY MAXX MAXY', help='Bounding box to keep')
def filter_command(input, output, bbox):
    """Keep the points lying in a bounding box, boundary included."""
    points = _load_points(input)
    kept = filter_by_envelope(points, Envelope.from_bounds(bbox))
    logger.debug("Kept %d of %d points", len(kept), len(points))
    _emit(kept, output)


if __name__ == '__main__':
    main()
