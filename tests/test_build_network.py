import pandas as pd
import pytest
from click.testing import CliRunner

from roadnet.tools.build_network import BuildSettings, build_network, build_network_cmd

OSM = """<?xml version="1.0" encoding="UTF-8"?>
<osm version="0.6">
  <node id="1" lat="49.0" lon="6.0"/>
  <node id="2" lat="49.0" lon="6.001"/>
  <node id="3" lat="49.01" lon="6.001"/>
  <way id="10">
    <nd ref="1"/>
    <nd ref="2"/>
    <nd ref="3"/>
    <tag k="highway" v="residential"/>
  </way>
  <way id="11">
    <nd ref="3"/>
    <nd ref="42"/>
    <tag k="highway" v="primary"/>
  </way>
</osm>
"""


@pytest.fixture
def osm_path(tmp_path):
    path = tmp_path / "test.osm"
    path.write_text(OSM)
    return path


def test_build_network_skip_and_export(osm_path, tmp_path):
    out = tmp_path / "arcs.csv"
    network = build_network(BuildSettings(osm_path=str(osm_path), on_dangling="skip", out=str(out)))

    assert network.node_count == 3
    df = pd.read_csv(out, sep=";")
    assert len(df) == network.arc_count == 4
    assert set(df["osm_id_from"]) == {1, 2, 3}


def test_cli_prints_summary(osm_path, tmp_path):
    out = tmp_path / "arcs.csv"
    result = CliRunner().invoke(build_network_cmd,
                                [str(osm_path), "--on-dangling", "skip", "--out", str(out), "--separator", ","])

    assert result.exit_code == 0, result.output
    assert "nodes: 3" in result.output
    assert "arcs: 4" in result.output
    assert list(pd.read_csv(out).columns) == ["index_from", "index_to", "osm_id_from", "osm_id_to", "travel_time"]


def test_cli_fails_on_dangling_reference(osm_path):
    result = CliRunner().invoke(build_network_cmd, [str(osm_path)])

    assert result.exit_code != 0
    assert "Node 42" in result.output


def test_cli_fails_on_missing_file(tmp_path):
    result = CliRunner().invoke(build_network_cmd, [str(tmp_path / "missing.osm")])

    assert result.exit_code != 0
    assert "Cannot read map file" in result.output


def test_cli_rejects_unknown_policy(osm_path):
    result = CliRunner().invoke(build_network_cmd, [str(osm_path), "--on-dangling", "ignore"])

    assert result.exit_code == 2
