"""
The Game class is the entrypoint into the domain layer for the service layer (or any other caller, like a console UI).
It is responsible for orchestrating all the rules needed to play a turn:
validating a move, executing it (simple step or capture, including capture chains), tracking whose turn it is,
detecting the end of the game, and undo / end / restart.
"""

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Optional, Self

from loguru import logger

from src.checkers.board import Board
from src.checkers.pieces import Color, Direction, Piece
from src.checkers.position import PositionState
from src.checkers.square import Square, is_valid_square_token
from src.core.exceptions import GameStateError, IllegalMoveError
from src.core.models import GameModel
from src.core.shared_types import Status

# (player's direction token, backward?) -> board direction, per color.
# Black looks at the board from the other side: its forward is the board's backward.
COMMAND_DIRECTIONS: dict[Color, dict[tuple[str, bool], Direction]] = {
    Color.WHITE: {
        ("l", False): Direction.FORWARD_LEFT,
        ("r", False): Direction.FORWARD_RIGHT,
        ("l", True): Direction.BACKWARD_LEFT,
        ("r", True): Direction.BACKWARD_RIGHT,
    },
    Color.BLACK: {
        ("l", False): Direction.BACKWARD_LEFT,
        ("r", False): Direction.BACKWARD_RIGHT,
        ("l", True): Direction.FORWARD_LEFT,
        ("r", True): Direction.FORWARD_RIGHT,
    },
}


class GameState(Enum):
    ACTIVE = auto()
    CHAIN_IN_PROGRESS = auto()
    OVER = auto()


@dataclass(frozen=True)
class Snapshot:
    """Board copy + turn, taken right before a move (or a capture chain) starts."""

    board: Board
    white_to_move: bool


@dataclass
class Game:
    # --- DOMAIN LAYER API CALLED BY SERVICE ---

    board: Board = field(default_factory=Board.starting_position)
    white_to_move: bool = True
    forced_piece: Optional[Piece] = None
    history: list[Snapshot] = field(default_factory=list)
    user_ended: bool = False

    @classmethod
    def new_game(cls, starting_position: Optional[str] = None) -> Self:
        """Standard layout unless a position string is supplied."""
        if starting_position is None:
            return cls()
        return cls._from_position(PositionState.from_fen(starting_position))

    @classmethod
    def from_model(cls, model: GameModel) -> Self:
        """Define how to construct a Game from the information the Service layer actually has"""

        if model.status not in {status.value for status in Status}:
            raise GameStateError(
                f"Invalid status code: {model.status!r}. \nPick one from {','.join(status.value for status in Status)}"
            )

        game = cls._from_position(PositionState.from_fen(model.current_position))
        for fen in model.history:
            state = PositionState.from_fen(fen)
            game.history.append(Snapshot(state.to_board(), state.white_to_move))
        game.user_ended = model.user_ended
        return game

    @classmethod
    def _from_position(cls, state: PositionState) -> Self:
        board = state.to_board()
        forced_piece = None
        if state.chain_square is not None:
            forced_piece = board.piece_at(state.chain_square)
            if forced_piece is None or forced_piece.color != state.color_to_move:
                raise GameStateError(
                    f"Chain square {state.chain_square} does not hold a piece of the side to move."
                )
        return cls(board=board, white_to_move=state.white_to_move, forced_piece=forced_piece)

    def to_model(self) -> GameModel:
        """Encode back into a format the Service layer uses"""
        chain_square = self.forced_piece.square if self.forced_piece else None
        current = PositionState.from_board(self.board, self.white_to_move, chain_square)
        return GameModel(
            current_position=current.to_fen(),
            history=[
                PositionState.from_board(snapshot.board, snapshot.white_to_move).to_fen()
                for snapshot in self.history
            ],
            status=self.status.value,
            user_ended=self.user_ended,
        )

    # --- QUERIES ---
    @property
    def color_to_move(self) -> Color:
        return Color.WHITE if self.white_to_move else Color.BLACK

    def is_white_to_move(self) -> bool:
        return self.white_to_move

    def has_undo(self) -> bool:
        return len(self.history) > 0

    def is_game_over(self) -> bool:
        if self.user_ended:
            return True
        if self.board.winner() != Color.NONE:
            return True
        return not self.board.any_legal_move(self.color_to_move, self.forced_piece)

    @property
    def state(self) -> GameState:
        if self.is_game_over():
            return GameState.OVER
        if self.forced_piece is not None:
            return GameState.CHAIN_IN_PROGRESS
        return GameState.ACTIVE

    @property
    def status(self) -> Status:
        """Finer grained than `state`: says why the game is over."""
        if self.user_ended:
            return Status.ENDED_BY_USER
        match self.board.winner():
            case Color.WHITE:
                return Status.WHITE_WINS
            case Color.BLACK:
                return Status.BLACK_WINS
            case Color.NONE:
                pass
        if not self.board.any_legal_move(self.color_to_move, self.forced_piece):
            return Status.NO_LEGAL_MOVES
        if self.forced_piece is not None:
            return Status.CAPTURE_CHAIN
        return Status.IN_PROGRESS

    def result_text(self) -> str:
        match self.status:
            case Status.ENDED_BY_USER:
                return "Game ended by user."
            case Status.WHITE_WINS:
                return "White has captured all opponent pieces. White wins."
            case Status.BLACK_WINS:
                return "Black has captured all opponent pieces. Black wins."
            case Status.NO_LEGAL_MOVES:
                side = "White" if self.white_to_move else "Black"
                return f"{side} has no legal moves. Draw or stalemate by no-move."
            case Status.CAPTURE_CHAIN | Status.IN_PROGRESS:
                return "Game in progress."

    # --- ACTIONS ---
    def undo(self) -> None:
        """Undo the last completed move (or the whole capture chain). No effect if there is no history or the game is over."""
        if not self.history or self.is_game_over():
            logger.debug(
                f"Undo ignored (history empty={not self.history}, game over={self.is_game_over()})"
            )
            return

        snapshot = self.history.pop()
        # copy again: the snapshot must never alias the live board
        self.board = snapshot.board.copy()
        self.white_to_move = snapshot.white_to_move
        self.forced_piece = None
        logger.info(f"Undo applied. Restored turn: {self.color_to_move.name}")

    def end_game(self) -> None:
        self.user_ended = True
        logger.info("Game flagged as ended by user.")

    def restart_game(self) -> None:
        logger.info("Restarting game: fresh board, history cleared.")
        self.board = Board.starting_position()
        self.white_to_move = True
        self.forced_piece = None
        self.history = []
        self.user_ended = False

    def move_from_command(self, square: str, direction: str, backward: bool = False) -> None:
        """
        Play a move given as the player types it: '<square> <l|r> [b]'.
        ----

        * 'l' / 'r' are seen from the player's side of the board, so for Black they map to the board's backward directions.
        * Only kings may request a backward move.
        * No mandatory capture, but once a capture chain has started the same piece must keep capturing.
        """
        if self.is_game_over():
            raise IllegalMoveError("Game is already over.")

        if not is_valid_square_token(square):
            logger.debug(f"Illegal: cannot read square {square!r}")
            raise IllegalMoveError(f"Invalid square: {square!r}. Use a file a-h and a rank 1-8, e.g. 'c3'.")

        piece = self._piece_to_move(Square.from_algebraic(square))

        token = direction.strip().lower()
        if token not in {"l", "r"}:
            logger.debug(f"Illegal: direction must be 'l' or 'r' (got {direction!r})")
            raise IllegalMoveError("Direction must be 'l' or 'r'.")

        if backward and not piece.is_king:
            logger.debug(f"Illegal: non-king {piece.color.name} piece tried to move backward.")
            raise IllegalMoveError("Only kings can move backward.")

        self.move_by_direction(piece.square, COMMAND_DIRECTIONS[piece.color][(token, backward)])

    def move_by_direction(self, square: Square, direction: Direction) -> None:
        """
        Attempt to move the piece on `square` one diagonal step along `direction`, capturing if the step is occupied.
        -----

        1. make sure the game is still on, the piece exists and belongs to the side to move
        2. mid-chain, make sure it is the piece that is chaining
        3. empty destination: simple move (not allowed mid-chain)
        4. occupied destination: capture, if the landing square behind it is free
        5. continue the chain if the same piece can capture again, otherwise end the turn

        Every check is done before the board gets touched, so a rejected move leaves the game as it was.
        """
        if self.is_game_over():
            raise IllegalMoveError("Game is already over.")

        piece = self._piece_to_move(square)

        if self.forced_piece is not None and piece is not self.forced_piece:
            logger.debug("Illegal: must continue capture chain with same piece.")
            raise IllegalMoveError("You must continue the capture chain with the same piece.")

        step = piece.one_step(direction)
        if step is None:
            logger.debug(f"Illegal: direction {direction.name} not allowed for piece on {square}")
            raise IllegalMoveError("That direction is not allowed.")

        victim = self.board.piece_at(step)
        if victim is None:
            self._simple_move(piece, step)
        else:
            self._capture(piece, victim)

    # -- PRIVATE HELPERS ---
    def _piece_to_move(self, square: Square) -> Piece:
        piece = self.board.piece_at(square)
        if piece is None:
            logger.debug(f"Illegal: no piece at {square}")
            raise IllegalMoveError("No piece at that square.")

        if piece.color != self.color_to_move:
            logger.debug(
                f"Illegal: it's {self.color_to_move.name}'s turn, but {piece.color.name} piece selected."
            )
            raise IllegalMoveError("It's not that side's turn.")
        return piece

    def _simple_move(self, piece: Piece, destination: Square) -> None:
        if self.forced_piece is not None:
            logger.debug("Illegal: attempted simple move while in capture chain.")
            raise IllegalMoveError("You must continue the capture chain with the same piece.")

        self._snapshot()
        self.board.move_piece_to(piece, destination)
        self._promote_if_eligible(piece)
        self._end_turn()

    def _capture(self, piece: Piece, victim: Piece) -> None:
        if victim.color != piece.color.opponent():
            logger.debug(f"Illegal: square blocked by same-color piece at {victim.square}")
            raise IllegalMoveError("Square blocked.")

        landing = piece.skip_over(victim.square)
        if not landing.is_within_bounds() or not self.board.is_empty(landing):
            logger.debug("Illegal: no valid landing square after capture.")
            raise IllegalMoveError("No landing square to complete the capture.")

        # undo reverts a whole chain: only snapshot on its first hop
        if self.forced_piece is None:
            self._snapshot()

        logger.debug(f"Capture {piece.color.name} {piece.square} x {victim.square} -> {landing}")
        self.board.remove_piece(victim)
        self.board.move_piece_to(piece, landing)
        self.board.increment_capture(piece.color)
        self._promote_if_eligible(piece)

        if self.board.can_piece_capture(piece):
            self.forced_piece = piece
            logger.debug("Capture chain continues for the same piece.")
        else:
            self._end_turn()

    def _promote_if_eligible(self, piece: Piece) -> None:
        if self.board.apply_promotion_if_eligible(piece):
            logger.info(f"Promotion: {piece.color.name} crowned at {piece.square}")

    def _end_turn(self) -> None:
        self.forced_piece = None
        self.white_to_move = not self.white_to_move
        logger.debug(f"Turn ended. Next to move: {self.color_to_move.name}")

    def _snapshot(self) -> None:
        self.history.append(Snapshot(self.board.copy(), self.white_to_move))
        logger.trace(f"Snapshot saved (history size = {len(self.history)}).")
