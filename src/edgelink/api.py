"""
Public API for playing the connection game.

Usage:
    from edgelink import Config, play_vs_ai

    play_vs_ai(Config(size=5, max_depth=3))
"""

from __future__ import annotations

import logging
from typing import Callable, TYPE_CHECKING

from edgelink.core.types import CellColor, Move
from edgelink.simulation.match import MatchResult, MoveRecord, play_match
from edgelink.utils.config import Config
from edgelink.utils.factory import create_agent, create_game

if TYPE_CHECKING:
    from edgelink.games.game_base import GameBase

logger = logging.getLogger(__name__)


class HumanPlayer:
    """
    Console player. Lists the legal moves numbered from 1 and reads the
    number of the chosen move, re-prompting until it is valid.
    """

    def __init__(self, input_fn: Callable[[str], str] = input, output: Callable[[str], None] = print):
        self._input = input_fn
        self._output = output

    def select_move(self, game: "GameBase") -> Move:
        moves = game.valid_moves()
        self._output("Your turn. Enter the number of the move you want to play.")
        for i, move in enumerate(moves, start=1):
            self._output(f"Move {i}: {move}")

        while True:
            raw = self._input("Move: ").strip()
            try:
                number = int(raw)
            except ValueError:
                self._output("Invalid input. Please enter a move number.")
                continue
            if not 1 <= number <= len(moves):
                self._output("That's not a valid move number. Please try again.")
                continue
            return moves[number - 1]


def _announce(game: "GameBase", output: Callable[[str], None]) -> None:
    output(f"Current player: {game.current_player().name}")
    output("Game Board:")
    output(game.state_string())


def _report(result: MatchResult, game: "GameBase", ai_colors, output: Callable[[str], None]) -> None:
    output("Game Over!")
    output("Final Game Board:")
    output(game.state_string())
    if result.is_draw:
        output("It's a draw!")
    elif len(ai_colors) == 2:
        output(f"{result.winner.name} wins!")
    elif result.winner in ai_colors:
        output("The AI wins!")
    else:
        output("You win!")


def play_vs_ai(
    config: Config,
    input_fn: Callable[[str], str] = input,
    output: Callable[[str], None] = print,
    self_play: bool = False,
) -> MatchResult:
    """
    Main entry point: play one console game.

    Parameters
    ----------
    config : Config
        Board size, search depth, AI colour, seed and budgets.
    input_fn, output : callables
        Console I/O, injectable for tests.
    self_play : bool
        If True, the AI plays both colours.
    """
    logger.info(
        "Starting %dx%d game: AI plays %s at depth %d%s",
        config.size, config.size, config.ai_color.name, config.max_depth,
        " (self-play)" if self_play else "",
    )
    game = create_game(config)
    ai_colors = {config.ai_color}
    players = {config.ai_color: create_agent(config, config.ai_color)}
    if self_play:
        ai_colors.add(config.human_color)
        players[config.human_color] = create_agent(config, config.human_color, seed_offset=1)
    else:
        players[config.human_color] = HumanPlayer(input_fn, output)

    def on_move(g: "GameBase", record: MoveRecord) -> None:
        if record.player in ai_colors:
            output(f"AI's move: {record.move}")
        if not g.is_over():
            _announce(g, output)

    _announce(game, output)
    result = play_match(game, players, on_move=on_move)
    _report(result, game, ai_colors, output)
    return result


__all__ = ["HumanPlayer", "play_vs_ai"]
