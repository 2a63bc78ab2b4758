import logging, typing, random, dataclasses, time
from . import log
from .state import CubeState
from .moves import MOVES, reset, apply_turn
from .validate import validate
from .errors import CorruptedState

@dataclasses.dataclass
class FuzzConfig:
    iterations: int = 1_000_000
    check_interval: int = 100_000
    seed: typing.Optional[int] = None

    def __post_init__(self):
        if self.iterations < 0: raise ValueError("iterations must not be negative")
        if self.check_interval <= 0: raise ValueError("check_interval must be positive")

@dataclasses.dataclass
class FuzzResult:
    moves_applied: int
    final_state: CubeState
    elapsed: float

    @property
    def moves_per_second(self) -> float: return self.moves_applied / self.elapsed if self.elapsed > 0 else float("inf")

def run_random_walk(config: FuzzConfig, rng: typing.Optional[random.Random] = None) -> FuzzResult:
    rng = rng or random.Random(config.seed)
    state = reset()
    start_time = time.perf_counter()

    for i in range(config.iterations):
        move = rng.choice(MOVES)
        state = apply_turn(state, move.face, move.modifier)

        #Check integrity after every single move
        report = validate(state)
        if not report.valid:
            log.LOGGER.log(logging.ERROR, f"Corrupted state at iteration {i} after move {move}: {report.describe()}")
            log.LOGGER.log(logging.ERROR, f"State dump: {state}")
            raise CorruptedState(report, f"iteration {i} after move {move}")

        if (i + 1) % config.check_interval == 0:
            log.LOGGER.log(logging.INFO, f"{i + 1} moves verified ({time.perf_counter() - start_time:.2f}s)")

    return FuzzResult(config.iterations, state, time.perf_counter() - start_time)
