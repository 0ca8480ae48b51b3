"""Tests for the CSV graph repository adapter."""

from pathlib import Path

import pytest

from campus_nav.adapters.graph import CSVGraphRepository
from campus_nav.config import GraphConfig
from campus_nav.domain.errors import GraphError, InvalidWeightError
from campus_nav.domain.models import Position
from campus_nav.graph.store import build_default_campus

DATA_DIR = Path(__file__).resolve().parents[2] / "campus_nav" / "data"


def _write_files(tmp_path: Path, locations: str, roads: str) -> GraphConfig:
    (tmp_path / "locations.csv").write_text(locations, encoding="utf-8")
    (tmp_path / "roads.csv").write_text(roads, encoding="utf-8")
    return GraphConfig(data_dir=tmp_path)


class TestBundledCampus:
    """The shipped data files describe the default campus."""

    @pytest.fixture
    def repository(self):
        return CSVGraphRepository(GraphConfig(data_dir=DATA_DIR))

    def test_matches_build_default_campus(self, repository):
        loaded = repository.load()
        expected = build_default_campus()

        assert loaded.locations() == expected.locations()
        assert list(loaded.iter_roads()) == list(expected.iter_roads())

    def test_load_is_cached(self, repository):
        assert repository.load() is repository.load()

    def test_clear_cache_reloads(self, repository):
        first = repository.load()
        repository.clear_cache()
        assert repository.load() is not first

    def test_get_location(self, repository):
        assert repository.get_location(4).name == "Hostel"
        assert repository.get_location(99) is None

    def test_list_locations_in_index_order(self, repository):
        names = [loc.name for loc in repository.list_locations()]
        assert names == ["Block A", "Block B", "Block C", "Block D", "Hostel"]


def test_default_config_loads_packaged_campus(monkeypatch):
    monkeypatch.delenv("CAMPUS_GRAPH_DATA_DIR", raising=False)

    graph = CSVGraphRepository(GraphConfig()).load()

    assert graph.location_count() == 5
    assert graph.road_count() == 7
    assert graph.location_at(0).name == "Block A"


def test_positions_are_optional(tmp_path):
    config = _write_files(
        tmp_path,
        "location_id,name,description,x,y\n0,Gate,,10,20\n1,Library,Books,,\n",
        "from_location_id,to_location_id,distance_km\n0,1,0.3\n",
    )
    graph = CSVGraphRepository(config).load()

    assert graph.location_at(0).position == Position(10.0, 20.0)
    assert graph.location_at(1).position is None
    assert graph.location_at(1).description == "Books"


def test_blank_road_rows_are_skipped(tmp_path):
    config = _write_files(
        tmp_path,
        "location_id,name\n0,A\n1,B\n",
        "from_location_id,to_location_id,distance_km\n0,1,1.0\n,,\n1,0,\n",
    )
    graph = CSVGraphRepository(config).load()
    assert graph.road_count() == 1


def test_non_dense_location_ids_raise(tmp_path):
    config = _write_files(
        tmp_path,
        "location_id,name\n0,A\n2,C\n",
        "from_location_id,to_location_id,distance_km\n",
    )
    with pytest.raises(GraphError) as exc:
        CSVGraphRepository(config).load()
    assert "expected location_id 1" in exc.value.message


def test_negative_distance_raises_graph_error(tmp_path):
    config = _write_files(
        tmp_path,
        "location_id,name\n0,A\n1,B\n",
        "from_location_id,to_location_id,distance_km\n0,1,-2\n",
    )
    with pytest.raises(GraphError) as exc:
        CSVGraphRepository(config).load()
    assert isinstance(exc.value.cause, InvalidWeightError)
    assert exc.value.file_path == str(tmp_path / "roads.csv")


def test_unknown_road_endpoint_raises_graph_error(tmp_path):
    config = _write_files(
        tmp_path,
        "location_id,name\n0,A\n",
        "from_location_id,to_location_id,distance_km\n0,3,1.0\n",
    )
    with pytest.raises(GraphError):
        CSVGraphRepository(config).load()


def test_malformed_distance_raises_graph_error(tmp_path):
    config = _write_files(
        tmp_path,
        "location_id,name\n0,A\n1,B\n",
        "from_location_id,to_location_id,distance_km\n0,1,far\n",
    )
    with pytest.raises(GraphError) as exc:
        CSVGraphRepository(config).load()
    assert isinstance(exc.value.cause, ValueError)


def test_missing_file_raises_graph_error(tmp_path):
    with pytest.raises(GraphError) as exc:
        CSVGraphRepository(GraphConfig(data_dir=tmp_path)).load()
    assert isinstance(exc.value.cause, OSError)
