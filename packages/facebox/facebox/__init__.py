"""facebox - A tap-driven, tick-paced square face box animation."""

from facebox.clock import Clock
from facebox.config import FIVE_PART, FOUR_PART, PRESETS, FaceBoxConfig
from facebox.driver import DriverState, TickDriver
from facebox.easing import clamped_linear, divide_scale, ease
from facebox.renderer import draw_square_face_box
from facebox.sequence import SequenceNode, SquareFaceBox, build_chain
from facebox.stage import Stage
from facebox.state import AnimationState
from facebox.surface import DrawCall, DrawingSurface, RecordingSurface, Style
from facebox.types import PaletteIndexError, SurfaceStateError, TickContext

__all__ = [
    "AnimationState",
    "Clock",
    "DrawCall",
    "DrawingSurface",
    "DriverState",
    "FIVE_PART",
    "FOUR_PART",
    "FaceBoxConfig",
    "PRESETS",
    "PaletteIndexError",
    "RecordingSurface",
    "SequenceNode",
    "SquareFaceBox",
    "Stage",
    "Style",
    "SurfaceStateError",
    "TickContext",
    "TickDriver",
    "build_chain",
    "clamped_linear",
    "divide_scale",
    "draw_square_face_box",
    "ease",
]
