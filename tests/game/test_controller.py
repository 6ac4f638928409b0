"""Tests for GameController — the orchestrator."""

from shufflechess.core.board import Board
from shufflechess.core.enums import Color, GameResult, PieceType
from shufflechess.core.position import Position
from shufflechess.core.roles import PROMOTION_ROLES
from shufflechess.core.types import A8, D7, E2, E3, E4, E5, Square, parse_square
from shufflechess.game.config import GameConfig
from shufflechess.game.controller import GameController
from shufflechess.game.interfaces import GamePhase
from shufflechess.game.state import GameState, MoveRecord

STANDARD = GameConfig(seed=0, shuffle_roles=False)


def _make_controller(
    config: GameConfig = STANDARD,
    position: Position | None = None,
) -> GameController:
    ctrl = GameController()
    ctrl.new_game(config, position=position)
    return ctrl


def _submit(ctrl: GameController, uci: str) -> bool:
    return ctrl.submit_move(parse_square(uci[:2]), parse_square(uci[2:]))


class TestNewGame:
    def test_phase_awaiting(self) -> None:
        ctrl = _make_controller()
        assert ctrl.state.phase == GamePhase.AWAITING_MOVE
        assert ctrl.state.side_to_move == Color.WHITE

    def test_phase_event_emitted(self) -> None:
        ctrl = GameController()
        phases: list[GamePhase] = []
        ctrl.events.on_phase_changed.append(phases.append)
        ctrl.new_game(STANDARD)
        assert phases == [GamePhase.AWAITING_MOVE]

    def test_same_seed_same_roles(self) -> None:
        first = _make_controller(GameConfig(seed=99))
        second = _make_controller(GameConfig(seed=99))
        assert first.state.roles == second.state.roles

    def test_games_are_independent(self) -> None:
        first = _make_controller()
        second = _make_controller()
        assert _submit(first, "e2e4")
        assert second.state.ply_count == 0
        assert second.state.position.board == Board.initial()


class TestSelect:
    def test_own_piece_lists_destinations(self) -> None:
        ctrl = _make_controller()
        assert set(ctrl.select(E2)) == {E3, E4}

    def test_empty_square(self) -> None:
        ctrl = _make_controller()
        assert ctrl.select(E4) == []

    def test_opponent_piece(self) -> None:
        ctrl = _make_controller()
        assert ctrl.select(D7) == []


class TestSubmitMove:
    def test_legal_move_accepted(self) -> None:
        ctrl = _make_controller()
        seen: list[MoveRecord] = []
        ctrl.events.on_move.append(lambda record, state: seen.append(record))
        assert ctrl.submit_move(E2, E4)
        assert ctrl.state.side_to_move == Color.BLACK
        assert len(seen) == 1
        assert seen[0].to_sq == E4

    def test_illegal_move_rejected(self) -> None:
        ctrl = _make_controller()
        assert not ctrl.submit_move(E2, E5)  # can't jump 3 ranks
        assert ctrl.state.side_to_move == Color.WHITE
        assert ctrl.state.ply_count == 0

    def test_wrong_side_rejected(self) -> None:
        ctrl = _make_controller()
        assert not _submit(ctrl, "d7d5")

    def test_empty_source_rejected(self) -> None:
        ctrl = _make_controller()
        assert not ctrl.submit_move(E4, E5)

    def test_move_callback_receives_state(self) -> None:
        ctrl = _make_controller()
        states: list[GameState] = []
        ctrl.events.on_move.append(lambda record, state: states.append(state))
        _submit(ctrl, "g1f3")
        assert states == [ctrl.state]


class TestPromotion:
    def test_single_promotion_event(self) -> None:
        board = Board.from_diagram(
            "\n".join(
                (
                    ".......k",
                    "P.......",
                    "........",
                    "........",
                    "........",
                    "........",
                    "........",
                    "....K...",
                )
            )
        )
        ctrl = _make_controller(GameConfig(seed=8), Position(board=board))
        events: list[tuple[Square, PieceType]] = []
        ctrl.events.on_promotion.append(lambda sq, role: events.append((sq, role)))

        assert ctrl.submit_move(Square(1, 0), A8)
        assert len(events) == 1
        sq, role = events[0]
        assert sq == A8
        assert role in PROMOTION_ROLES
        promoted = ctrl.state.position.board[A8]
        assert promoted is not None
        assert ctrl.state.roles[promoted.piece_type] == role

    def test_no_event_for_ordinary_move(self) -> None:
        ctrl = _make_controller()
        events: list[tuple[Square, PieceType]] = []
        ctrl.events.on_promotion.append(lambda sq, role: events.append((sq, role)))
        _submit(ctrl, "e2e4")
        assert events == []


class TestGameOver:
    def test_fools_mate_ends_game(self) -> None:
        ctrl = _make_controller()
        results: list[GameResult] = []
        phases: list[GamePhase] = []
        ctrl.events.on_game_over.append(results.append)
        ctrl.events.on_phase_changed.append(phases.append)

        for uci in ("f2f3", "e7e5", "g2g4", "d8h4"):
            assert _submit(ctrl, uci), uci

        assert results == [GameResult.BLACK_WINS]
        assert phases[-1] == GamePhase.GAME_OVER
        assert ctrl.state.is_game_over

    def test_decided_start_fires_game_over(self) -> None:
        board = Board.from_diagram(
            "\n".join(
                (
                    ".......k",
                    "........",
                    ".....KQ.",
                    "........",
                    "........",
                    "........",
                    "........",
                    "........",
                )
            )
        )
        ctrl = GameController()
        results: list[GameResult] = []
        phases: list[GamePhase] = []
        ctrl.events.on_game_over.append(results.append)
        ctrl.events.on_phase_changed.append(phases.append)

        start = Position(board=board, side_to_move=Color.BLACK)
        ctrl.new_game(STANDARD, position=start)

        assert results == [GameResult.DRAW]
        assert phases == [GamePhase.GAME_OVER]
        assert ctrl.state.phase == GamePhase.GAME_OVER
        assert ctrl.select(Square(0, 7)) == []
        assert not ctrl.submit_move(Square(0, 7), Square(0, 6))

    def test_moves_rejected_after_game_over(self) -> None:
        ctrl = _make_controller()
        for uci in ("f2f3", "e7e5", "g2g4", "d8h4"):
            _submit(ctrl, uci)
        assert ctrl.select(parse_square("h2")) == []
        assert not _submit(ctrl, "h2h3")


class TestUndo:
    def test_undo_without_moves(self) -> None:
        ctrl = _make_controller()
        assert not ctrl.undo_move()

    def test_undo_after_move(self) -> None:
        ctrl = _make_controller()
        _submit(ctrl, "e2e4")
        assert ctrl.undo_move()
        assert ctrl.state.side_to_move == Color.WHITE
        assert ctrl.state.position.board == Board.initial()

    def test_undo_after_mate_resumes_play(self) -> None:
        ctrl = _make_controller()
        for uci in ("f2f3", "e7e5", "g2g4", "d8h4"):
            _submit(ctrl, uci)
        assert ctrl.undo_move()
        assert ctrl.state.phase == GamePhase.AWAITING_MOVE
        assert _submit(ctrl, "d8e7")
