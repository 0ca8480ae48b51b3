import logging
from pathlib import Path
from unittest.mock import patch

import pytest
from pydantic import ValidationError

import campus_nav
from campus_nav.config import (
    AppConfig,
    ObservabilityConfig,
    RoutingConfig,
    configure_logging,
    get_config,
    reset_config,
)
from campus_nav.domain.errors import ConfigurationError


@pytest.fixture(autouse=True)
def fresh_config():
    reset_config()
    yield
    reset_config()


def test_defaults():
    config = get_config()

    assert config.routing.minutes_per_km == 2.0
    assert config.graph.locations_path.name == "locations.csv"
    assert config.graph.roads_path.parent == Path(campus_nav.__file__).resolve().parent / "data"
    assert config.graph.locations_path.is_file()
    assert config.map_output_path.name == "campus_route.html"


def test_get_config_is_cached():
    assert get_config() is get_config()


def test_env_override(monkeypatch, tmp_path):
    monkeypatch.setenv("CAMPUS_ROUTING_MINUTES_PER_KM", "12")
    monkeypatch.setenv("CAMPUS_GRAPH_DATA_DIR", str(tmp_path))

    config = get_config()

    assert config.routing.minutes_per_km == 12.0
    assert config.graph.locations_path == tmp_path / "locations.csv"


def test_negative_time_factor_is_rejected():
    with pytest.raises(ValidationError):
        RoutingConfig(minutes_per_km=-1)


def test_configure_logging_sets_level():
    observability = ObservabilityConfig(level="debug", format="%(message)s")

    with patch("campus_nav.config.logging.basicConfig") as basic_config:
        configure_logging(AppConfig(observability=observability))

    basic_config.assert_called_once_with(
        level=logging.DEBUG, format="%(message)s", force=True
    )


def test_configure_logging_rejects_unknown_level():
    with pytest.raises(ConfigurationError) as exc:
        configure_logging(AppConfig(observability=ObservabilityConfig(level="chatty")))
    assert exc.value.setting_name == "CAMPUS_LOG_LEVEL"
