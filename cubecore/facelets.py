import typing, enum, dataclasses, collections
from .state import Color, Face, Corner, Edge, CubeState

#Face order of the 54-facelet grid
FACELET_ORDER = [Face.U, Face.R, Face.F, Face.D, Face.L, Face.B]

Position = typing.Tuple[int, int, int]

class CubieKind(enum.Enum):
    CORE = 0
    CENTER = 1
    EDGE = 2
    CORNER = 3

@dataclasses.dataclass(frozen=True)
class Sticker:
    position: Position
    face: Face
    color: Color

@dataclasses.dataclass(frozen=True)
class Cubie:
    id: str
    kind: CubieKind
    position: Position
    faces: typing.Mapping[Face, Color]

    def get_face_color(self, face: Face) -> typing.Optional[Color]: return self.faces.get(face)

def _grid_cell(face: Face, pos: Position) -> typing.Tuple[int, int]:
    #(row, col) of a sticker on its face, as seen from outside with the usual net layout
    x, y, z = pos
    if face == Face.U: return z+1, x+1
    if face == Face.D: return 1-z, x+1
    if face == Face.F: return 1-y, x+1
    if face == Face.B: return 1-y, 1-x
    if face == Face.R: return 1-y, 1-z
    if face == Face.L: return 1-y, z+1
    assert False

def facelet_index(face: Face, pos: Position) -> int:
    row, col = _grid_cell(face, pos)
    return 9 * FACELET_ORDER.index(face) + 3 * row + col

@dataclasses.dataclass(frozen=True)
class FaceletSnapshot:
    cubies: typing.Tuple[Cubie, ...]

    def __iter__(self) -> typing.Iterator[Cubie]: return iter(self.cubies)
    def __len__(self): return len(self.cubies)

    def of_kind(self, kind: CubieKind) -> typing.List[Cubie]: return [c for c in self.cubies if c.kind == kind]

    def at(self, pos: Position) -> Cubie: return next(c for c in self.cubies if c.position == tuple(pos))

    def stickers(self) -> typing.List[Sticker]:
        return [Sticker(c.position, f, col) for c in self.cubies for f, col in c.faces.items()]

    def facelets(self) -> typing.List[Color]:
        grid = [None] * 54
        for s in self.stickers():
            idx = facelet_index(s.face, s.position)
            assert grid[idx] is None
            grid[idx] = s.color
        return grid

    def face_grid(self, face: Face) -> typing.List[typing.List[Color]]:
        base = 9 * FACELET_ORDER.index(face)
        cells = self.facelets()[base:base+9]
        return [cells[r*3:r*3+3] for r in range(3)]

    def color_counts(self) -> typing.Counter[Color]: return collections.Counter(s.color for s in self.stickers())

    def __str__(self):
        cells = self.facelets()
        return " ".join("".join(c.value for c in cells[i:i+9]) for i in range(0, 54, 9))

def project(state: CubeState) -> FaceletSnapshot:
    cubies = [Cubie(f"center-{f.name}", CubieKind.CENTER, f.direction, {f: f.color}) for f in FACELET_ORDER]
    cubies.append(Cubie("core", CubieKind.CORE, (0, 0, 0), {}))

    #Local face k of a slot shows piece color (k - orientation), so orientation is a cyclic shift
    for slot in Corner:
        piece, twist = Corner(state.cp[slot]), state.co[slot]
        colors = [f.color for f in piece.faces]
        faces = {f: colors[(k - twist) % 3] for k, f in enumerate(slot.faces)}
        cubies.append(Cubie(f"corner-{piece.name}", CubieKind.CORNER, slot.position, faces))

    for slot in Edge:
        piece, flip = Edge(state.ep[slot]), state.eo[slot]
        colors = [f.color for f in piece.faces]
        faces = {f: colors[(k - flip) % 2] for k, f in enumerate(slot.faces)}
        cubies.append(Cubie(f"edge-{piece.name}", CubieKind.EDGE, slot.position, faces))

    return FaceletSnapshot(tuple(cubies))
