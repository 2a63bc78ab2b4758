"""Quarter-turn generators of the cube group.

Each generator describes one clockwise quarter turn of a face (viewed from
outside that face): the piece in slot ``i`` moves to ``targets[i]`` and its
orientation grows by ``twists[i]`` (corners, mod 3) or ``flips[i]`` (edges,
mod 2). Orientation follows the per-slot face orders of :class:`Corner` and
:class:`Edge`, so the deltas are only non-zero where a piece's U/D (or F/B)
sticker leaves its reference face.
"""

import typing, dataclasses
from .state import Face, Corner, Edge, CubeState, NUM_CORNERS, NUM_EDGES

@dataclasses.dataclass(frozen=True)
class MoveGenerator:
    corner_targets: typing.Tuple[int, ...]
    corner_twists: typing.Tuple[int, ...]
    edge_targets: typing.Tuple[int, ...]
    edge_flips: typing.Tuple[int, ...]

    def __post_init__(self):
        for name, size, mod in [
            ("corner_targets", NUM_CORNERS, None), ("corner_twists", NUM_CORNERS, 3),
            ("edge_targets", NUM_EDGES, None), ("edge_flips", NUM_EDGES, 2)
        ]:
            vals = tuple(getattr(self, name))
            object.__setattr__(self, name, vals)

            if len(vals) != size: raise ValueError(f"{name} must have {size} entries, got {len(vals)}")
            if mod is None:
                if sorted(vals) != list(range(size)): raise ValueError(f"{name} is not a permutation: {vals}")
            elif any(not 0 <= v < mod for v in vals): raise ValueError(f"{name} entries must lie in [0;{mod}): {vals}")

    def apply(self, state: CubeState) -> CubeState:
        #Rebuild every vector from scratch, the old ones are only read
        cp, co = [0] * NUM_CORNERS, [0] * NUM_CORNERS
        for i, t in enumerate(self.corner_targets):
            cp[t] = state.cp[i]
            co[t] = (state.co[i] + self.corner_twists[i]) % 3

        ep, eo = [0] * NUM_EDGES, [0] * NUM_EDGES
        for i, t in enumerate(self.edge_targets):
            ep[t] = state.ep[i]
            eo[t] = (state.eo[i] + self.edge_flips[i]) % 2

        return CubeState(cp, co, ep, eo)

    def then(self, other: "MoveGenerator") -> "MoveGenerator":
        #Piece in slot i goes to self's target first, then on to other's
        return MoveGenerator(
            [other.corner_targets[t] for t in self.corner_targets],
            [(self.corner_twists[i] + other.corner_twists[t]) % 3 for i, t in enumerate(self.corner_targets)],
            [other.edge_targets[t] for t in self.edge_targets],
            [(self.edge_flips[i] + other.edge_flips[t]) % 2 for i, t in enumerate(self.edge_targets)]
        )

    def power(self, n: int) -> "MoveGenerator":
        gen = IDENTITY_GENERATOR
        for _ in range(n): gen = gen.then(self)
        return gen

    @property
    def is_identity(self) -> bool: return self == IDENTITY_GENERATOR

IDENTITY_GENERATOR = MoveGenerator(range(NUM_CORNERS), (0,) * NUM_CORNERS, range(NUM_EDGES), (0,) * NUM_EDGES)

def _generator(corner_cycle: typing.Sequence[Corner], corner_twists: typing.Sequence[int], edge_cycle: typing.Sequence[Edge], edge_flips: typing.Sequence[int]) -> MoveGenerator:
    #Cycles list the slots in the order pieces travel; deltas belong to the source slot
    ct, cd = list(range(NUM_CORNERS)), [0] * NUM_CORNERS
    for i, c in enumerate(corner_cycle):
        ct[c] = corner_cycle[(i+1) % len(corner_cycle)]
        cd[c] = corner_twists[i]

    et, ed = list(range(NUM_EDGES)), [0] * NUM_EDGES
    for i, e in enumerate(edge_cycle):
        et[e] = edge_cycle[(i+1) % len(edge_cycle)]
        ed[e] = edge_flips[i]

    return MoveGenerator(ct, cd, et, ed)

GENERATORS: typing.Mapping[Face, MoveGenerator] = {
    Face.U: _generator(
        [Corner.URF, Corner.UFL, Corner.ULB, Corner.UBR], [0, 0, 0, 0],
        [Edge.UR, Edge.UF, Edge.UL, Edge.UB], [0, 0, 0, 0]
    ),
    Face.D: _generator(
        [Corner.DFR, Corner.DRB, Corner.DBL, Corner.DLF], [0, 0, 0, 0],
        [Edge.DF, Edge.DR, Edge.DB, Edge.DL], [0, 0, 0, 0]
    ),
    Face.L: _generator(
        [Corner.UFL, Corner.DLF, Corner.DBL, Corner.ULB], [2, 1, 2, 1],
        [Edge.UL, Edge.FL, Edge.DL, Edge.BL], [0, 0, 0, 0]
    ),
    Face.R: _generator(
        [Corner.URF, Corner.UBR, Corner.DRB, Corner.DFR], [1, 2, 1, 2],
        [Edge.UR, Edge.BR, Edge.DR, Edge.FR], [0, 0, 0, 0]
    ),
    Face.F: _generator(
        [Corner.URF, Corner.DFR, Corner.DLF, Corner.UFL], [2, 1, 2, 1],
        [Edge.UF, Edge.FR, Edge.DF, Edge.FL], [1, 1, 1, 1]
    ),
    Face.B: _generator(
        [Corner.UBR, Corner.ULB, Corner.DBL, Corner.DRB], [1, 2, 1, 2],
        [Edge.UB, Edge.BL, Edge.DB, Edge.BR], [1, 1, 1, 1]
    )
}
