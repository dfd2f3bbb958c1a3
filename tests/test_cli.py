"""
Tests for edgelink.cli
"""

import pytest

from edgelink.cli import build_config, main, parse_args
from edgelink.core.types import CellColor


class TestParseArgs:

    def test_defaults(self):
        args = parse_args([])
        assert args.size == 5
        assert args.depth == 5
        assert args.ai_color == "white"
        assert args.seed is None
        assert args.self_play is False
        assert args.log_level == "WARNING"

    def test_overrides(self):
        args = parse_args(["-s", "4", "-d", "2", "-c", "black", "--seed", "7",
                           "--node-budget", "100", "--self-play"])
        assert args.size == 4
        assert args.depth == 2
        assert args.ai_color == "black"
        assert args.seed == 7
        assert args.node_budget == 100
        assert args.self_play is True

    def test_rejects_unknown_colour(self):
        with pytest.raises(SystemExit):
            parse_args(["--ai-color", "green"])


class TestBuildConfig:

    def test_maps_arguments(self):
        config = build_config(parse_args(["--size", "3", "--depth", "2", "--ai-color", "black",
                                          "--time-limit", "0.5"]))
        assert config.size == 3
        assert config.max_depth == 2
        assert config.ai_color is CellColor.BLACK
        assert config.limits.time_limit == 0.5


class TestMain:

    def test_invalid_size_exits_with_error(self, capsys):
        assert main(["--size", "0"]) == 2
        assert "Invalid configuration" in capsys.readouterr().err

    def test_invalid_depth_exits_with_error(self, capsys):
        assert main(["--depth", "0"]) == 2

    def test_self_play_game(self, capsys):
        assert main(["--size", "3", "--depth", "1", "--seed", "0", "--self-play"]) == 0
        assert "Game Over!" in capsys.readouterr().out
