import typing, enum, dataclasses
from .state import CubeState, NUM_CORNERS, NUM_EDGES
from .errors import CorruptedState

class ViolationKind(enum.Enum):
    DUPLICATE_OR_MISSING_CORNER = "corner permutation is not a bijection"
    DUPLICATE_OR_MISSING_EDGE = "edge permutation is not a bijection"
    TWIST_SUM_INVALID = "corner twist sum is not divisible by 3"
    FLIP_SUM_INVALID = "edge flip sum is not divisible by 2"
    PARITY_MISMATCH = "corner and edge permutation parities differ"

@dataclasses.dataclass(frozen=True)
class ValidationReport:
    violations: typing.Tuple[ViolationKind, ...]
    twist_sum: int
    flip_sum: int
    corner_parity: int
    edge_parity: int

    @property
    def valid(self) -> bool: return len(self.violations) == 0

    def __bool__(self): return self.valid

    def describe(self) -> str:
        if self.valid: return "valid cube state"
        details = {
            ViolationKind.TWIST_SUM_INVALID: f" (sum {self.twist_sum})",
            ViolationKind.FLIP_SUM_INVALID: f" (sum {self.flip_sum})",
            ViolationKind.PARITY_MISMATCH: f" (corner {self.corner_parity}, edge {self.edge_parity})"
        }
        return "; ".join(v.value + details.get(v, "") for v in self.violations)

def _is_int(v) -> bool: return isinstance(v, int)

def is_bijection(perm: typing.Sequence[int], n: int) -> bool:
    return len(perm) == n and all(map(_is_int, perm)) and sorted(perm) == list(range(n))

def permutation_parity(perm: typing.Sequence[int]) -> int:
    n = len(perm)
    visited = [False] * n
    swaps = 0
    for i in range(n):
        if visited[i]: continue

        #Walk the cycle through i, a k-cycle takes k-1 transpositions
        #The walk stops at entries that are not slot indices
        cur, cycle_len = i, 0
        while _is_int(cur) and 0 <= cur < n and not visited[cur]:
            visited[cur] = True
            cur = perm[cur]
            cycle_len += 1
        swaps += cycle_len - 1

    return swaps % 2

def validate(state: CubeState) -> ValidationReport:
    violations = []

    if not is_bijection(state.cp, NUM_CORNERS): violations.append(ViolationKind.DUPLICATE_OR_MISSING_CORNER)
    if not is_bijection(state.ep, NUM_EDGES): violations.append(ViolationKind.DUPLICATE_OR_MISSING_EDGE)

    #Non-integer orientations are left out of the sums and fail the check
    twist_sum, flip_sum = sum(filter(_is_int, state.co)), sum(filter(_is_int, state.eo))
    if twist_sum % 3 != 0 or not all(map(_is_int, state.co)): violations.append(ViolationKind.TWIST_SUM_INVALID)
    if flip_sum % 2 != 0 or not all(map(_is_int, state.eo)): violations.append(ViolationKind.FLIP_SUM_INVALID)

    corner_parity, edge_parity = permutation_parity(state.cp), permutation_parity(state.ep)
    if corner_parity != edge_parity: violations.append(ViolationKind.PARITY_MISMATCH)

    return ValidationReport(tuple(violations), twist_sum, flip_sum, corner_parity, edge_parity)

def assert_valid(state: CubeState, context: typing.Optional[str] = None) -> ValidationReport:
    report = validate(state)
    if not report.valid: raise CorruptedState(report, context)
    return report
