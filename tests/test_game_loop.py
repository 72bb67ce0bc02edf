import curses
import random
from typing import List

from termtris.commands import NO_KEY, Command
from termtris.config import GameConfig
from termtris.game_state import GameSession
from termtris.piece import Piece
from termtris.render import Frame
from termtris.runner import GameLoop, Phase
from termtris.shapes import ShapeType, shape_offsets


class FakeClock:
    def __init__(self):
        self.current = 0.0

    def advance(self, delta: float):
        self.current += delta

    def __call__(self) -> float:
        return self.current


class RecordingDisplay:
    def __init__(self):
        self.frames: List[Frame] = []

    def show_frame(self, frame: Frame):
        self.frames.append(frame)


class ScriptedKeys:
    def __init__(self, keys: List[int]):
        self.keys = list(keys)

    def read_key(self) -> int:
        return self.keys.pop(0) if self.keys else NO_KEY


def make_loop(seed: int = 0):
    clock = FakeClock()
    display = RecordingDisplay()
    session = GameSession(rng=random.Random(seed))
    session.reset_game()
    loop = GameLoop(session, display, clock=clock, sleep=lambda _s: None)
    return loop, session, display, clock


def test_first_step_spawns_and_renders_live_piece():
    loop, session, display, _ = make_loop()
    session.upcoming = ShapeType.O

    assert loop.step() is Phase.FALLING
    assert len(display.frames) == 1
    frame = display.frames[0]
    for x, y in [(5, 0), (6, 0), (5, 1), (6, 1)]:
        assert frame.grid[y][x]
    assert frame.score == 0


def test_gravity_moves_piece_once_per_interval():
    loop, session, _, clock = make_loop()
    loop.step()
    assert session.active.anchor == (5, 0)

    clock.advance(0.1)
    loop.step()
    assert session.active.anchor == (5, 0)

    clock.advance(0.1)
    loop.step()
    assert session.active.anchor == (5, 1)


def test_blocked_gravity_lands_piece_and_spawns_next():
    loop, session, display, clock = make_loop()
    loop.step()
    session.active = Piece(ShapeType.O, shape_offsets(ShapeType.O), (0, 18))
    session.upcoming = ShapeType.T

    clock.advance(0.2)
    assert loop.step() is Phase.FALLING
    assert session.pieces == 1
    assert session.active.shape is ShapeType.T
    assert session.board.is_occupied(0, 19)
    # The frame after landing already shows the committed cells.
    assert display.frames[-1].grid[19][0]


def test_landing_that_completes_a_row_adds_bonus():
    loop, session, display, clock = make_loop()
    loop.step()
    session.board.grid[19, 2:] = 1
    session.active = Piece(ShapeType.O, shape_offsets(ShapeType.O), (0, 18))

    clock.advance(0.2)
    loop.step()
    assert session.score == 100
    assert display.frames[-1].score == 100
    assert session.board.grid[19].tolist() == [1, 1] + [0] * 8


def test_blocked_soft_drop_command_lands_piece():
    loop, session, _, _ = make_loop()
    loop.step()
    session.active = Piece(ShapeType.O, shape_offsets(ShapeType.O), (3, 18))
    loop.commands.put(Command.DOWN)
    loop.commands.put(Command.LEFT)

    loop.step()
    assert session.pieces == 1
    assert session.board.is_occupied(3, 18)
    # Commands after the landing stay queued for the next piece.
    assert loop.commands.get_nowait() is Command.LEFT


def test_queued_commands_move_piece_between_ticks():
    loop, session, _, _ = make_loop()
    loop.step()
    anchor = session.active.anchor
    for command in (Command.LEFT, Command.LEFT, Command.DOWN):
        loop.commands.put(command)

    loop.step()
    assert session.active.anchor == (anchor[0] - 2, anchor[1] + 1)


def test_blocked_spawn_ends_game_and_still_renders():
    loop, session, display, _ = make_loop()
    session.score = 400
    session.board.grid[0:2, :] = 1
    session.board.grid[0:2, 0] = 0

    assert loop.step() is Phase.GAME_OVER
    assert session.game_over
    assert session.score == 400
    assert len(display.frames) == 1


def test_run_plays_until_board_tops_out():
    clock = FakeClock()
    display = RecordingDisplay()
    session = GameSession(rng=random.Random(3))
    session.score = 700
    config = GameConfig(gravity_ms=200)
    loop = GameLoop(session, display, config=config, clock=clock, sleep=lambda _s: clock.advance(0.2))

    score = loop.run()

    assert score == 0
    assert session.game_over
    assert loop.phase is Phase.GAME_OVER
    assert session.pieces > 0
    assert display.frames


def test_run_stops_input_reader_on_game_over():
    clock = FakeClock()
    session = GameSession(rng=random.Random(5))
    keys = ScriptedKeys([curses.KEY_LEFT, curses.KEY_RIGHT, ord("x"), ord(" ")])
    loop = GameLoop(
        session, RecordingDisplay(), keys, clock=clock, sleep=lambda _s: clock.advance(0.2)
    )

    loop.run()

    assert loop.reader is None
    assert session.game_over
