"""Tests for utils module."""

import logging
from unittest.mock import patch

import pytest

from climb_areas.exceptions import ConfigError
from climb_areas.settings import MAP_STYLE, HeatmapConfig
from climb_areas.utils import (
    ColorFormatter,
    build_heatmap_config,
    get_logger,
    load_heatmap_config,
)


class TestBuildHeatmapConfig:
    """Tests for build_heatmap_config."""

    def test_defaults(self):
        config = build_heatmap_config()

        assert config == HeatmapConfig()
        assert config.radius == 2000
        assert config.upper_percentile == 100
        assert config.coverage == 1
        assert config.map_style == MAP_STYLE

    def test_overrides(self):
        config = build_heatmap_config({"radius": 5000, "coverage": 0.8, "map_style": "dark"})

        assert config.radius == 5000
        assert config.coverage == 0.8
        assert config.map_style == "dark"
        assert config.upper_percentile == 100

    def test_unknown_key_ignored(self):
        config = build_heatmap_config({"colour": "red"})

        assert config == HeatmapConfig()

    @pytest.mark.parametrize(
        "key, value",
        [
            ("radius", 0),
            ("radius", -10),
            ("radius", "big"),
            ("radius", True),
            ("coverage", 1.5),
            ("coverage", 0),
            ("upper_percentile", 101),
            ("request_timeout", 0),
            ("map_style", ""),
            ("data_url", 42),
        ],
    )
    def test_invalid_values(self, key, value):
        with pytest.raises(ConfigError) as excinfo:
            build_heatmap_config({key: value})

        assert excinfo.value.key == key


class TestLoadHeatmapConfig:
    """Tests for load_heatmap_config."""

    def test_reads_secrets_section(self):
        with patch("climb_areas.utils.st") as mock_st:
            mock_st.secrets.get.return_value = {"radius": 3000}

            config = load_heatmap_config()

        mock_st.secrets.get.assert_called_once_with("heatmap")
        assert config.radius == 3000

    def test_no_section(self):
        with patch("climb_areas.utils.st") as mock_st:
            mock_st.secrets.get.return_value = None

            assert load_heatmap_config() == HeatmapConfig()

    def test_no_secrets_file(self):
        with patch("climb_areas.utils.st") as mock_st:
            mock_st.secrets.get.side_effect = FileNotFoundError("secrets.toml")

            assert load_heatmap_config() == HeatmapConfig()


class TestGetLogger:
    """Tests for get_logger."""

    @pytest.fixture(autouse=True)
    def bare_root_logger(self, monkeypatch):
        """Detach root handlers (pytest adds its own capture handlers there)."""
        monkeypatch.setattr(logging.getLogger(), "handlers", [])

    def test_attaches_color_handler(self):
        """Test that a fresh logger gets a stream handler with ColorFormatter."""
        logger = get_logger("climb_areas.tests.fresh")

        assert len(logger.handlers) == 1
        assert isinstance(logger.handlers[0].formatter, ColorFormatter)

    def test_single_handler(self):
        """Test that repeated calls do not stack handlers."""
        logger = get_logger("climb_areas.tests.single")
        get_logger("climb_areas.tests.single")

        assert len(logger.handlers) == 1

    def test_level(self):
        logger = get_logger("climb_areas.tests.debug", log_level="debug")

        assert logger.level == logging.DEBUG

    def test_unknown_level_defaults_to_info(self):
        logger = get_logger("climb_areas.tests.unknown", log_level="chatty")

        assert logger.level == logging.INFO


class TestColorFormatter:
    """Tests for ColorFormatter."""

    def _record(self):
        return logging.LogRecord("test", logging.WARNING, __file__, 1, "careful", None, None)

    def test_colored_level(self):
        formatter = ColorFormatter(use_color=True, fmt="%(levelname)s %(message)s")

        output = formatter.format(self._record())

        assert "WARNING" in output
        assert output != "WARNING careful"

    def test_plain_level(self):
        formatter = ColorFormatter(use_color=False, fmt="%(levelname)s %(message)s")

        assert formatter.format(self._record()) == "WARNING careful"

    def test_record_not_modified(self):
        """Test that colouring does not leak into other handlers."""
        formatter = ColorFormatter(use_color=True, fmt="%(levelname)s")
        record = self._record()

        formatter.format(record)

        assert record.levelname == "WARNING"
