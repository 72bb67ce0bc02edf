"""Falling-block puzzle game for the text terminal."""

from .board import Board
from .shapes import ShapeType, random_shape, rotate_offsets, shape_offsets
from .piece import Piece
from .commands import Command, InputReader, decode_key
from .config import GameConfig
from .game_state import GameSession
from .render import Frame, build_frame, preview_grid
from .runner import GameLoop, Phase
from .utils import can_place, render_grid

__all__ = [
    "Board",
    "ShapeType",
    "Piece",
    "Command",
    "InputReader",
    "GameConfig",
    "GameSession",
    "Frame",
    "GameLoop",
    "Phase",
    "build_frame",
    "can_place",
    "decode_key",
    "preview_grid",
    "random_shape",
    "render_grid",
    "rotate_offsets",
    "shape_offsets",
]
