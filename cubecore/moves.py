import typing, enum, random
from .state import Face, CubeState, IDENTITY
from .generators import GENERATORS
from .errors import InvalidMoveToken

class Modifier(enum.Enum):
    CLOCKWISE = ""
    HALF = "2"
    COUNTERCLOCKWISE = "'"

    #Number of clockwise generator applications, 4 of them are the identity
    @property
    def turns(self) -> int: return {
        Modifier.CLOCKWISE: 1,
        Modifier.HALF: 2,
        Modifier.COUNTERCLOCKWISE: 3
    }[self]

    @property
    def inverse(self) -> "Modifier": return {
        Modifier.CLOCKWISE: Modifier.COUNTERCLOCKWISE,
        Modifier.HALF: Modifier.HALF,
        Modifier.COUNTERCLOCKWISE: Modifier.CLOCKWISE
    }[self]

class Move(enum.Enum):
    U = "U"
    Ur = "U'"
    U2 = "U2"
    D = "D"
    Dr = "D'"
    D2 = "D2"
    L = "L"
    Lr = "L'"
    L2 = "L2"
    R = "R"
    Rr = "R'"
    R2 = "R2"
    F = "F"
    Fr = "F'"
    F2 = "F2"
    B = "B"
    Br = "B'"
    B2 = "B2"

    @property
    def face(self) -> Face: return Face[self.name[0:1]]
    @property
    def modifier(self) -> Modifier: return Modifier(self.value[1:])
    @property
    def is_ccw(self) -> bool: return 'r' in self.name
    @property
    def is_double_rot(self) -> bool: return '2' in self.name

    @property
    def inverse(self) -> "Move": return Move(self.face.name + self.modifier.inverse.value)

    @staticmethod
    def of(face: Face, modifier: Modifier = Modifier.CLOCKWISE) -> "Move": return Move(face.name + modifier.value)

    def __str__(self): return self.value

MOVES: typing.List[Move] = list(Move)

MoveLike = typing.Union[str, Move]

def parse_move(token: MoveLike) -> Move:
    if isinstance(token, Move): return token
    if not isinstance(token, str): raise InvalidMoveToken(token, "not a string")
    if len(token) == 0: raise InvalidMoveToken(token, "empty token")
    if len(token) > 2: raise InvalidMoveToken(token, "expected a face letter and at most one modifier")

    #First character is the face, second the optional modifier
    face, mod = token[0], token[1:]
    if face not in Face.__members__: raise InvalidMoveToken(token, f"unknown face {face!r}")
    if mod not in (m.value for m in Modifier): raise InvalidMoveToken(token, f"unknown modifier {mod!r}")

    return Move(token)

def parse_sequence(seq: typing.Union[str, typing.Iterable[MoveLike]]) -> typing.List[Move]:
    if isinstance(seq, str): seq = seq.split()
    return [parse_move(t) for t in seq]

def invert_sequence(moves: typing.Iterable[MoveLike]) -> typing.List[Move]:
    return [m.inverse for m in reversed(parse_sequence(moves))]

def reset() -> CubeState: return IDENTITY

def apply_turn(state: CubeState, face: Face, modifier: Modifier = Modifier.CLOCKWISE) -> CubeState:
    gen = GENERATORS[face]
    for _ in range(modifier.turns): state = gen.apply(state)
    return state

def apply(state: CubeState, token: MoveLike) -> CubeState:
    move = parse_move(token)
    return apply_turn(state, move.face, move.modifier)

def apply_sequence(state: CubeState, moves: typing.Union[str, typing.Iterable[MoveLike]]) -> CubeState:
    #Parse everything up front so a bad token leaves nothing half applied
    for move in parse_sequence(moves): state = apply_turn(state, move.face, move.modifier)
    return state

AXES = ("x", "y", "z")

def layer_move(axis: str, index: int, direction: int) -> typing.Optional[Move]:
    if axis not in AXES: raise ValueError(f"unknown axis {axis!r}")
    if index not in (-1, 0, 1): raise ValueError(f"layer index must be -1, 0 or 1, got {index!r}")
    if direction not in (-1, 1): raise ValueError(f"direction must be -1 or 1, got {direction!r}")

    #Middle slices have no generator
    if index == 0: return None

    vec = [0, 0, 0]
    vec[AXES.index(axis)] = index
    face = next(f for f in Face if f.direction == tuple(vec))

    #direction +1 turns the layer right-handed about the positive axis,
    #which is counterclockwise seen from the + side and clockwise seen from the - side
    clockwise = (direction > 0) == (index < 0)
    return Move.of(face, Modifier.CLOCKWISE if clockwise else Modifier.COUNTERCLOCKWISE)

def random_moves(n: int, rng: typing.Optional[random.Random] = None) -> typing.List[Move]:
    rng = rng or random.Random()
    return [rng.choice(MOVES) for _ in range(n)]

def scramble(n: int = 20, rng: typing.Optional[random.Random] = None) -> typing.Tuple[CubeState, typing.List[Move]]:
    moves = random_moves(n, rng)
    return apply_sequence(IDENTITY, moves), moves
