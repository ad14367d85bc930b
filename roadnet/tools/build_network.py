import logging
from dataclasses import dataclass
from typing import Optional

import click

from ..data.network import RoadNetwork
from ..errors import RoadNetworkError
from ..log import set_debug
from ..osm.reader import ON_DANGLING
from ..utils import Timer

logger = logging.getLogger(__name__)


@dataclass
class BuildSettings:
    osm_path: str = "saarland.osm"
    on_dangling: str = "fail"
    out: Optional[str] = None
    separator: str = ";"


def build_network(settings: BuildSettings) -> RoadNetwork:
    with Timer("load") as timer:
        network = RoadNetwork.from_osm_file(settings.osm_path, on_dangling=settings.on_dangling)
    logger.info(f"{network.node_count} nodes and {network.arc_count} arcs built in {timer.duration_ms:.0f} ms.")

    if settings.out is not None:
        network.to_dataframe().to_csv(settings.out, sep=settings.separator, index=False)
        logger.info(f"Arcs saved into: '{settings.out}'.")
    return network


@click.command()
@click.argument("osm-path", type=click.Path(dir_okay=False), default="saarland.osm")
@click.option("--on-dangling", type=click.Choice(ON_DANGLING), default="fail",
              help="What to do with an edge whose node has no declared location: "
                   "stop with an error (fail) or drop the edge (skip).")
@click.option("--out", type=click.Path(dir_okay=False),
              help="Path to csv file where the arcs of the network are stored.")
@click.option("--separator", type=str, default=";")
@click.option("--debug/--no-debug", default=False)
def build_network_cmd(osm_path, on_dangling, out, separator, debug):
    """Build the road network of an OSM XML export and print its size."""
    set_debug(debug)
    settings = BuildSettings(osm_path=osm_path, on_dangling=on_dangling, out=out, separator=separator)
    try:
        network = build_network(settings)
    except RoadNetworkError as e:
        raise click.ClickException(str(e)) from e
    click.echo(f"nodes: {network.node_count}")
    click.echo(f"arcs: {network.arc_count}")


if __name__ == "__main__":
    build_network_cmd()
