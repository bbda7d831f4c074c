"""Click CLI entry point for dotgen."""

from __future__ import annotations

import logging
from pathlib import Path

import click

from dotgen import __version__
from dotgen.attributes import (
    ATTRIBUTE_SPECS,
    CLUSTER_ATTRIBUTES,
    EDGE_ATTRIBUTES,
    GRAPH_ATTRIBUTES,
    NODE_ATTRIBUTES,
    SUBGRAPH_ATTRIBUTES,
)
from dotgen.errors import DotError

logger = logging.getLogger(__name__)

LEGAL_SETS = {
    "graph": GRAPH_ATTRIBUTES,
    "cluster": CLUSTER_ATTRIBUTES,
    "subgraph": SUBGRAPH_ATTRIBUTES,
    "node": NODE_ATTRIBUTES,
    "edge": EDGE_ATTRIBUTES,
}


@click.group()
@click.version_option(version=__version__, prog_name="dotgen")
@click.option("--verbose", is_flag=True, default=False, help="Log debug output to stderr")
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    """dotgen: build and validate GraphViz DOT documents."""
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")


@cli.command()
@click.argument("kind", type=click.Choice(sorted(LEGAL_SETS)))
def attributes(kind: str) -> None:
    """List the attributes legal for an entity KIND."""
    for attr in LEGAL_SETS[kind]:
        spec = ATTRIBUTE_SPECS[attr]
        line = f"{attr.value}: {spec.kind_names}"
        if spec.low is not None or spec.high is not None:
            low = "" if spec.low is None else f"{spec.low:g}"
            high = "" if spec.high is None else f"{spec.high:g}"
            line += f" [{low}..{high}]"
        click.echo(line)


@cli.command()
@click.argument("name")
@click.pass_context
def color(ctx: click.Context, name: str) -> None:
    """Print the RGB literal of an X11 color NAME."""
    from dotgen.colors import x11_color

    try:
        rgb = x11_color(name)
    except ValueError as e:
        click.echo(f"Error: {e}", err=True)
        ctx.exit(1)
        return
    click.echo(rgb.render())


@cli.command()
@click.argument("hue", type=float)
@click.argument("saturation", type=float)
@click.argument("value", type=float)
@click.pass_context
def hsv(ctx: click.Context, hue: float, saturation: float, value: float) -> None:
    """Print the RGB literal of an HSV color (components in 0.0-1.0)."""
    from dotgen.colors import HSV

    try:
        result = HSV(hue, saturation, value)
    except ValueError as e:
        click.echo(f"Error: {e}", err=True)
        ctx.exit(1)
        return
    click.echo(result.render())


@cli.command()
@click.argument("file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--out", "out", type=click.Path(dir_okay=False, path_type=Path), default=None,
              help="Write the DOT document here instead of stdout")
@click.option("--config", "config_path", type=click.Path(path_type=Path), default=None,
              help="JSON render config")
@click.pass_context
def build(ctx: click.Context, file: Path, out: Path | None, config_path: Path | None) -> None:
    """Build a DOT document from a YAML graph description."""
    from dotgen.config import RenderConfig, load_config
    from dotgen.loader import load_graph

    try:
        config = load_config(config_path) if config_path is not None else RenderConfig()
        graph = load_graph(file)
    except (DotError, ValueError, FileNotFoundError) as e:
        click.echo(f"Error: {e}", err=True)
        ctx.exit(1)
        return

    text = graph.render(config)
    if out is None:
        click.echo(text, nl=False)
        return
    out.parent.mkdir(parents=True, exist_ok=True)
    out.write_text(text)
    logger.info("Wrote %s", out)
    click.echo(f"Wrote {out}")
