"""
Reversi game module.
Handles game flow between two players and the undo history.
"""
import logging
from dataclasses import dataclass
from typing import Any, Callable, List, Optional, Tuple, Union

from .board import Board, Coord, Side
from .errors import EndedGame, NoUndo
from .turn import State, Turn

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Move:
    """Play a disk on `coord`."""
    coord: Coord


@dataclass(frozen=True)
class Undo:
    """Go back to the previous turn of the side asking for it."""


@dataclass(frozen=True)
class Other:
    """Any other action. The game leaves it to the caller."""
    payload: Any = None


PlayerAction = Union[Move, Undo, Other]

# A player looks at the current turn and returns the action to take
Player = Callable[[Turn], PlayerAction]


class Game:
    """
    A match between two players.
    Keeps the current turn and the history of (turn, move) pairs that led to it.
    """

    def __init__(self, dark: Player, light: Player, turn: Optional[Turn] = None):
        """
        Initialize a new game.

        Args:
            dark: Player moving the dark disks
            light: Player moving the light disks
            turn: Position to start from (default: the standard first turn)
        """
        self._dark = dark
        self._light = light
        self._current_turn = turn.copy() if turn is not None else Turn.first_turn()
        self._history: List[Tuple[Turn, Coord]] = []

    @property
    def current_turn(self) -> Turn:
        return self._current_turn

    @property
    def current_board(self) -> Board:
        return self._current_turn.board

    @property
    def current_state(self) -> State:
        return self._current_turn.state

    @property
    def is_ended(self) -> bool:
        return self._current_turn.is_ended

    @property
    def history(self) -> Tuple[Tuple[Turn, Coord], ...]:
        """Turns played so far, each with the move applied to it."""
        return tuple(self._history)

    def play_turn(self) -> PlayerAction:
        """
        Ask the player on turn for an action and apply it.

        Returns:
            The action returned by the player

        Raises:
            EndedGame: if the game is over
            Any error from the player or from applying its action. The game
            is left unchanged in that case.
        """
        state = self._current_turn.state
        if state is None:
            raise EndedGame(self._current_turn)

        player = self._dark if state is Side.DARK else self._light
        action = player(self._current_turn)

        if isinstance(action, Move):
            self.make_move(action.coord)
        elif isinstance(action, Undo):
            self.undo()
        return action

    def make_move(self, coord) -> None:
        """Apply a move for the side on turn and record it in the history."""
        new_turn = self._current_turn.make_move(coord)
        self._history.append((self._current_turn, Coord(*coord)))
        self._current_turn = new_turn

    def undo(self) -> None:
        """
        Undo the last move(s) until the side asking can play again.

        While the game runs, the side on turn goes back to its own previous
        turn, skipping the opponent's moves and any forced pass. Once the game
        has ended, the last move is taken back and the opponent of its author
        goes back to its own previous turn.

        Raises:
            NoUndo: if no such turn exists. History and current turn are left unchanged.
        """
        backup_history = list(self._history)
        backup_turn = self._current_turn

        state = self._current_turn.state
        if state is None:
            if not self._history:
                raise NoUndo()
            last_turn, _ = self._history.pop()
            target = last_turn.state.opposite()
        else:
            target = state

        while self._history:
            previous_turn, coord = self._history.pop()
            if previous_turn.state is target:
                self._current_turn = previous_turn
                logger.debug(f"{target.name} takes back its move at {tuple(coord)}")
                return

        self._history = backup_history
        self._current_turn = backup_turn
        raise NoUndo()

    def run(self, max_turns: Optional[int] = None) -> Turn:
        """
        Play turns until the game ends.

        Args:
            max_turns: Stop after this many calls to play_turn (default: no limit)

        Returns:
            The current turn
        """
        played = 0
        while not self.is_ended and (max_turns is None or played < max_turns):
            self.play_turn()
            played += 1
        if self.is_ended:
            logger.info(f"Game over after {len(self._history)} moves, score {self._current_turn.score}")
        return self._current_turn
