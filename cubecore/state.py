import typing, enum, dataclasses

class Color(enum.Enum):
    WHITE = 'W'
    YELLOW = 'Y'
    RED = 'R'
    GREEN = 'G'
    BLUE = 'B'
    ORANGE = 'O'

class Face(enum.Enum):
    L = enum.auto()
    R = enum.auto()
    U = enum.auto()
    D = enum.auto()
    F = enum.auto()
    B = enum.auto()

    @property
    def direction(self) -> typing.Tuple[int, int, int]: return {
        Face.L: (-1,  0,  0),
        Face.R: (+1,  0,  0),
        Face.U: ( 0, +1,  0),
        Face.D: ( 0, -1,  0),
        Face.F: ( 0,  0, +1),
        Face.B: ( 0,  0, -1)
    }[self]

    @property
    def color(self) -> Color: return {
        Face.L: Color.ORANGE,
        Face.R: Color.RED,
        Face.U: Color.WHITE,
        Face.D: Color.YELLOW,
        Face.F: Color.GREEN,
        Face.B: Color.BLUE
    }[self]

def _position(faces: typing.Iterable[Face]) -> typing.Tuple[int, int, int]:
    return tuple(sum(f.direction[i] for f in faces) for i in range(3))

class Corner(enum.IntEnum):
    URF = 0
    UFL = 1
    ULB = 2
    UBR = 3
    DFR = 4
    DLF = 5
    DBL = 6
    DRB = 7

    #faces of the slot, clockwise seen from outside, U/D face first
    @property
    def faces(self) -> typing.Tuple[Face, Face, Face]: return tuple(Face[c] for c in self.name)

    @property
    def position(self) -> typing.Tuple[int, int, int]: return _position(self.faces)

class Edge(enum.IntEnum):
    UR = 0
    UF = 1
    UL = 2
    UB = 3
    DR = 4
    DF = 5
    DL = 6
    DB = 7
    FR = 8
    FL = 9
    BL = 10
    BR = 11

    #faces of the slot, U/D (or F/B for the middle layer) face first
    @property
    def faces(self) -> typing.Tuple[Face, Face]: return tuple(Face[c] for c in self.name)

    @property
    def position(self) -> typing.Tuple[int, int, int]: return _position(self.faces)

NUM_CORNERS = len(Corner)
NUM_EDGES = len(Edge)

@dataclasses.dataclass(frozen=True)
class CubeState:
    cp: typing.Tuple[int, ...] = tuple(range(NUM_CORNERS))
    co: typing.Tuple[int, ...] = (0,) * NUM_CORNERS
    ep: typing.Tuple[int, ...] = tuple(range(NUM_EDGES))
    eo: typing.Tuple[int, ...] = (0,) * NUM_EDGES

    def __post_init__(self):
        #Freeze whatever sequences we were handed
        for name, size in (("cp", NUM_CORNERS), ("co", NUM_CORNERS), ("ep", NUM_EDGES), ("eo", NUM_EDGES)):
            vec = tuple(getattr(self, name))
            if len(vec) != size: raise ValueError(f"{name} must have {size} entries, got {len(vec)}")
            object.__setattr__(self, name, vec)

    def clone(self) -> "CubeState": return CubeState(self.cp, self.co, self.ep, self.eo)

    @property
    def is_solved(self) -> bool: return self == IDENTITY

    def __str__(self):
        return (
            f"cp={''.join(map(str, self.cp))} co={''.join(map(str, self.co))} "
            f"ep={' '.join(map(str, self.ep))} eo={''.join(map(str, self.eo))}"
        )

IDENTITY = CubeState()
