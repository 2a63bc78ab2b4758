from .log import LOGGER
from .errors import CubeError, InvalidMoveToken, CorruptedState
from .state import Color, Face, Corner, Edge, CubeState, IDENTITY
from .generators import MoveGenerator, GENERATORS
from .moves import Modifier, Move, MOVES, parse_move, parse_sequence, invert_sequence, reset, apply, apply_turn, apply_sequence, random_moves, scramble, AXES, layer_move
from .validate import ViolationKind, ValidationReport, validate, assert_valid, permutation_parity
from .facelets import CubieKind, Cubie, Sticker, FaceletSnapshot, project
from .session import CubeSession
from .fuzz import FuzzConfig, FuzzResult, run_random_walk
