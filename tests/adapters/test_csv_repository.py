"""Tests for the CSV graph repository adapter."""

from pathlib import Path

import pytest

import transit_router
from transit_router.adapters.graph import CSVGraphRepository
from transit_router.config import GraphConfig
from transit_router.domain.errors import DuplicateNodeError, GraphError
from transit_router.domain.models import Vertex
from transit_router.graph import ShortestPath

DATA_DIR = Path(transit_router.__file__).resolve().parent / "data"


def write_network(directory: Path, nodes: str, lanes: str) -> GraphConfig:
    (directory / "nodes.csv").write_text(nodes, encoding="utf-8")
    (directory / "lanes.csv").write_text(lanes, encoding="utf-8")
    return GraphConfig(data_dir=directory)


NODES = "node_id,lat,lon,name\n1,33.42,-111.93,Union\n2,33.43,-111.94,\n3,33.41,-111.91,Rural\n"
LANES = "lane_id,from_node_id,to_node_id,duration\nL1,1,2,4\nL2,2,3,1.5\n,1,3,9\n"


def test_load_graph_contains_all_nodes():
    repository = CSVGraphRepository(GraphConfig(data_dir=DATA_DIR))

    graph = repository.load()

    with (DATA_DIR / "nodes.csv").open(encoding="utf-8") as f:
        f.readline()
        node_ids = [line.split(",")[0] for line in f if line.strip()]

    assert [v.id for v in graph.vertices] == node_ids


def test_bundled_network_routes():
    graph = CSVGraphRepository(GraphConfig(data_dir=DATA_DIR)).load()

    tree = ShortestPath(graph).execute(Vertex("1"))

    assert [v.id for v in tree.path_to(Vertex("4"))] == ["1", "3", "2", "4"]
    assert tree.distance_to(Vertex("4")) == 3
    assert not tree.is_reachable(Vertex("5"))


def test_load_builds_vertices_and_lanes(tmp_path):
    repository = CSVGraphRepository(write_network(tmp_path, NODES, LANES))

    graph = repository.load()

    assert [str(v) for v in graph.vertices] == ["Union", "2", "Rural"]
    assert [e.id for e in graph.edges] == ["L1", "L2", "Lane_2"]
    assert graph.edges[1].weight == 1.5
    assert graph.vertices[0].location.latitude == pytest.approx(33.42)


def test_load_is_cached_until_cleared(tmp_path):
    repository = CSVGraphRepository(write_network(tmp_path, NODES, LANES))

    first = repository.load()
    assert repository.load() is first

    repository.clear_cache()
    assert repository.load() is not first


def test_node_lookup(tmp_path):
    repository = CSVGraphRepository(write_network(tmp_path, NODES, LANES))

    assert repository.get_node(3).name == "Rural"
    assert repository.get_node(99) is None
    assert [n.node_id for n in repository.list_nodes()] == [1, 2, 3]


def test_rows_without_identifiers_are_skipped(tmp_path):
    nodes = NODES + ",0,0,blank\n"
    lanes = LANES + "L9,,3,1\n"
    repository = CSVGraphRepository(write_network(tmp_path, nodes, lanes))

    graph = repository.load()

    assert len(graph.vertices) == 3
    assert len(graph.edges) == 3


def test_missing_file_raises_graph_error(tmp_path):
    repository = CSVGraphRepository(GraphConfig(data_dir=tmp_path))

    with pytest.raises(GraphError) as exc:
        repository.load()

    assert exc.value.file_path == str(tmp_path / "nodes.csv")
    assert isinstance(exc.value.cause, OSError)


def test_duplicate_node_ids_are_reported(tmp_path):
    nodes = NODES + "2,0,0,again\n"
    repository = CSVGraphRepository(write_network(tmp_path, nodes, LANES))

    with pytest.raises(DuplicateNodeError) as exc:
        repository.load()

    assert exc.value.node_id == 2


@pytest.mark.parametrize(
    "nodes",
    [
        "node_id,lat,lon\n1,north,0\n",
        "node_id,lat,lon\n1,100,0\n",
        "node_id,latitude,longitude\n1,0,0\n",
    ],
)
def test_invalid_node_rows_raise_graph_error(tmp_path, nodes):
    repository = CSVGraphRepository(write_network(tmp_path, nodes, "lane_id\n"))

    with pytest.raises(GraphError):
        repository.load()


def test_lane_to_unknown_node_raises_graph_error(tmp_path):
    lanes = LANES + "L4,3,42,1\n"
    repository = CSVGraphRepository(write_network(tmp_path, NODES, lanes))

    with pytest.raises(GraphError) as exc:
        repository.load()

    assert "42" in exc.value.message
    assert exc.value.file_path == str(tmp_path / "lanes.csv")


def test_negative_duration_raises_graph_error(tmp_path):
    lanes = LANES + "L4,3,1,-2\n"
    repository = CSVGraphRepository(write_network(tmp_path, NODES, lanes))

    with pytest.raises(GraphError) as exc:
        repository.load()

    assert isinstance(exc.value.cause, ValueError)
