"""
Tests for config.py - EngineConfig defaults, parsing and validation.
"""

import sys
import os
from unittest.mock import patch

import pytest

# Add backend to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from config import EngineConfig, coerce_config
from domain import ConfigurationError


class TestEngineConfig:

    def test_defaults(self):
        config = EngineConfig()
        assert config.grid_width == 30
        assert config.grid_height == 30
        assert config.wrap_enabled is False
        assert config.obstacles_enabled is False
        assert config.obstacle_count == 12
        assert config.initial_speed_ms == 110

    def test_from_dict_accepts_ui_option_names(self):
        config = EngineConfig.from_dict({
            "gridWidth": 12,
            "gridHeight": 8,
            "wrapEnabled": True,
            "obstaclesEnabled": True,
            "obstacleCount": 4,
            "initialSpeedMs": 90,
        })
        assert config == EngineConfig(12, 8, True, True, 4, 90)

    def test_from_dict_accepts_field_names(self):
        assert EngineConfig.from_dict({"grid_width": 12}).grid_width == 12

    def test_from_dict_rejects_unknown_option(self):
        with pytest.raises(ConfigurationError):
            EngineConfig.from_dict({"difficulty": "hard"})

    @pytest.mark.parametrize("changes", [
        {"grid_width": 0},
        {"grid_width": 2, "grid_height": 2},
        {"obstacle_count": -1},
        {"initial_speed_ms": 39},
        {"grid_width": "10"},
        {"grid_height": None},
        {"initial_speed_ms": 110.0},
        {"obstacle_count": True},
        {"wrap_enabled": "yes"},
        {"obstacles_enabled": 1},
    ])
    def test_validate_rejects(self, changes):
        with pytest.raises(ConfigurationError):
            EngineConfig().with_changes(**changes).validate()

    def test_smallest_valid_board(self):
        assert EngineConfig(grid_width=3, grid_height=2).validate()

    def test_configuration_error_is_value_error(self):
        with pytest.raises(ValueError):
            EngineConfig(grid_width=-1).validate()

    def test_coerce_config(self):
        assert coerce_config(None) is None
        config = EngineConfig()
        assert coerce_config(config) is config
        assert coerce_config({"gridWidth": 9}).grid_width == 9
        with pytest.raises(ConfigurationError):
            coerce_config(["gridWidth", 9])


class TestFromEnv:

    @patch('config.load_dotenv')
    def test_reads_snake_variables(self, mock_load_dotenv, monkeypatch):
        monkeypatch.setenv("SNAKE_GRID_WIDTH", "20")
        monkeypatch.setenv("SNAKE_GRID_HEIGHT", "15")
        monkeypatch.setenv("SNAKE_WRAP", "true")
        monkeypatch.setenv("SNAKE_OBSTACLES", "0")
        monkeypatch.setenv("SNAKE_OBSTACLE_COUNT", "7")
        monkeypatch.setenv("SNAKE_SPEED_MS", "80")

        config = EngineConfig.from_env()

        mock_load_dotenv.assert_called_once()
        assert config == EngineConfig(20, 15, True, False, 7, 80)

    @patch('config.load_dotenv')
    def test_missing_variables_use_defaults(self, mock_load_dotenv, monkeypatch):
        for name in ("SNAKE_GRID_WIDTH", "SNAKE_GRID_HEIGHT", "SNAKE_WRAP",
                     "SNAKE_OBSTACLES", "SNAKE_OBSTACLE_COUNT", "SNAKE_SPEED_MS"):
            monkeypatch.delenv(name, raising=False)
        assert EngineConfig.from_env() == EngineConfig()

    @patch('config.load_dotenv')
    def test_bad_integer(self, mock_load_dotenv, monkeypatch):
        monkeypatch.setenv("SNAKE_GRID_WIDTH", "wide")
        with pytest.raises(ConfigurationError):
            EngineConfig.from_env()
