import asyncio, logging, typing
from . import log
from .state import CubeState
from .moves import Move, MoveLike, parse_move, parse_sequence, apply_turn, reset, layer_move
from .validate import ValidationReport, validate, assert_valid
from .facelets import FaceletSnapshot, project

#Handlers get the new state and the move that produced it (None for a reset)
MoveCallback = typing.Callable[[CubeState, typing.Optional[Move]], None]

class CubeSession:
    name: str
    strict: bool
    cur_state: CubeState
    num_moves: int

    _lock: asyncio.Lock
    _handlers: typing.List[MoveCallback]

    def __init__(self, name: str = "cube", strict: bool = False):
        self.name = name
        self.strict = strict
        self.cur_state = reset()
        self.num_moves = 0

        self._lock = asyncio.Lock()
        self._handlers = []

    async def register_handler(self, cb: MoveCallback):
        async with self._lock: self._handlers.append(cb)

    async def unregister_handler(self, cb: MoveCallback):
        async with self._lock: self._handlers.remove(cb)

    async def apply_move(self, token: MoveLike) -> CubeState:
        move = parse_move(token)

        async with self._lock:
            st = apply_turn(self.cur_state, move.face, move.modifier)
            if self.strict: assert_valid(st, f"[{self}] after {move}")

            self.cur_state = st
            self.num_moves += 1
            log.LOGGER.log(logging.DEBUG, f"[{self}] move | {move!s:3s} -> {st}")

            for h in self._handlers: h(st, move)

        return st

    async def apply_sequence(self, moves: typing.Union[str, typing.Iterable[MoveLike]]) -> CubeState:
        #Reject the whole sequence before touching the state
        for move in parse_sequence(moves): await self.apply_move(move)
        return self.cur_state

    async def rotate_layer(self, axis: str, index: int, direction: int) -> CubeState:
        move = layer_move(axis, index, direction)
        if move is None:
            log.LOGGER.log(logging.DEBUG, f"[{self}] ignoring middle layer turn about {axis}")
            return self.cur_state
        return await self.apply_move(move)

    async def reset(self) -> CubeState:
        async with self._lock:
            self.cur_state = reset()
            self.num_moves = 0
            log.LOGGER.log(logging.DEBUG, f"[{self}] reset")

            for h in self._handlers: h(self.cur_state, None)

        return self.cur_state

    def validate(self) -> ValidationReport:
        report = validate(self.cur_state)
        log.LOGGER.log(logging.DEBUG, f"[{self}] validate -> {report.describe()}")
        return report

    def snapshot(self) -> FaceletSnapshot: return project(self.cur_state)

    def __str__(self): return self.name
