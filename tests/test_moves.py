import random, pytest
from cubecore import (
    Face, Modifier, Move, MOVES, CubeState, IDENTITY, InvalidMoveToken,
    parse_move, parse_sequence, invert_sequence, reset, apply, apply_turn, apply_sequence,
    random_moves, scramble, validate, permutation_parity, layer_move, project, Color
)

def test_reset_is_identity():
    st = reset()
    assert st == CubeState()
    assert st.cp == tuple(range(8)) and st.ep == tuple(range(12))
    assert st.co == (0,) * 8 and st.eo == (0,) * 12
    assert st.is_solved

def test_clone_is_equal():
    st = apply(reset(), "R")
    assert st.clone() == st
    assert not st.is_solved

@pytest.mark.parametrize("token", [m.value for m in Move])
def test_parse_all_tokens(token):
    move = parse_move(token)
    assert str(move) == token
    assert move.face == Face[token[0]]
    assert move.is_ccw == token.endswith("'")
    assert move.is_double_rot == token.endswith("2")

def test_parse_modifiers():
    assert parse_move("F").modifier == Modifier.CLOCKWISE
    assert parse_move("F2").modifier == Modifier.HALF
    assert parse_move("F'").modifier == Modifier.COUNTERCLOCKWISE
    assert parse_move(Move.Lr) is Move.Lr
    assert Move.of(Face.D, Modifier.HALF) is Move.D2

@pytest.mark.parametrize("token", ["", "X", "u", "r'", "R3", "R''", "R'2", "RU", "M", "x", " R", None, 7])
def test_invalid_tokens(token):
    with pytest.raises(InvalidMoveToken) as exc_info:
        parse_move(token)
    assert exc_info.value.token == token

def test_invalid_token_is_value_error():
    with pytest.raises(ValueError):
        apply(reset(), "Q")

def test_invalid_token_leaves_state_unchanged():
    st = apply(reset(), "F")
    before = st.clone()
    with pytest.raises(InvalidMoveToken):
        apply(st, "F3")
    assert st == before

def test_bad_token_in_sequence_applies_nothing():
    with pytest.raises(InvalidMoveToken):
        apply_sequence(reset(), "R U X U'")

@pytest.mark.parametrize("face", list(Face))
def test_order_four(face, scrambled_states):
    for st in [IDENTITY] + scrambled_states:
        cur = st
        for _ in range(4): cur = apply(cur, face.name)
        assert cur == st

@pytest.mark.parametrize("face", list(Face))
def test_inverse_cancellation(face, scrambled_states):
    cw, ccw, half = face.name, face.name + "'", face.name + "2"
    for st in [IDENTITY] + scrambled_states:
        assert apply(apply(st, cw), ccw) == st
        assert apply(apply(st, ccw), cw) == st
        assert apply(apply(st, cw), cw) == apply(st, half)
        assert apply(apply(st, half), half) == st
        assert apply(st, ccw) == apply(apply(apply(st, cw), cw), cw)

def test_apply_turn_matches_tokens():
    for move in MOVES:
        assert apply_turn(IDENTITY, move.face, move.modifier) == apply(IDENTITY, move)

def test_closure(scrambled_states):
    for st in [IDENTITY] + scrambled_states:
        for move in MOVES:
            assert validate(apply(st, move)).valid

def test_sexy_move_has_order_six():
    st = reset()
    for rep in range(6):
        for token in ["R", "U", "R'", "U'"]:
            st = apply(st, token)
            assert validate(st).valid
        if rep < 5: assert not st.is_solved
    assert st == reset()

@pytest.mark.parametrize("face", list(Face))
def test_single_quarter_turn_parity(face):
    st = apply(reset(), face.name)
    assert permutation_parity(st.cp) == 1
    assert permutation_parity(st.ep) == 1

def test_half_turn_parity_is_even():
    st = apply(reset(), "U2")
    assert permutation_parity(st.cp) == 0
    assert permutation_parity(st.ep) == 0

def test_move_inverse():
    for move in MOVES:
        assert move.inverse.inverse is move
        assert apply(apply(IDENTITY, move), move.inverse) == IDENTITY
    assert Move.R2.inverse is Move.R2
    assert Move.R.inverse is Move.Rr

def test_parse_sequence():
    assert parse_sequence("R U  R' U'") == [Move.R, Move.U, Move.Rr, Move.Ur]
    assert parse_sequence(["F2", Move.B]) == [Move.F2, Move.B]
    assert parse_sequence("") == []

def test_inverted_sequence_undoes_sequence(scrambled_states):
    seq = parse_sequence("R U F' L2 D B' R2")
    assert invert_sequence(seq) == parse_sequence("R2 B D' L2 F U' R'")
    for st in scrambled_states:
        assert apply_sequence(apply_sequence(st, seq), invert_sequence(seq)) == st

def test_random_moves_are_uniform_tokens():
    moves = random_moves(1800, random.Random(5))
    assert len(moves) == 1800
    assert set(moves) == set(MOVES)

def test_scramble_is_deterministic_for_fixed_seed():
    s1, m1 = scramble(30, random.Random(123))
    s2, m2 = scramble(30, random.Random(123))
    assert m1 == m2
    assert s1 == s2
    assert s1 == apply_sequence(reset(), m1)
    assert validate(s1).valid

def test_known_commutator():
    #Sune leaves the bottom two layers untouched
    st = apply_sequence(reset(), "R U R' U R U2 R'")
    assert st.cp[4:] == (4, 5, 6, 7) and st.co[4:] == (0, 0, 0, 0)
    assert st.ep[4:] == tuple(range(4, 12)) and st.eo[4:] == (0,) * 8
    assert not st.is_solved

@pytest.mark.parametrize("axis, index, direction, expected", [
    ("x",  1,  1, Move.Rr),
    ("x",  1, -1, Move.R),
    ("x", -1,  1, Move.L),
    ("x", -1, -1, Move.Lr),
    ("y",  1,  1, Move.Ur),
    ("y",  1, -1, Move.U),
    ("y", -1,  1, Move.D),
    ("y", -1, -1, Move.Dr),
    ("z",  1,  1, Move.Fr),
    ("z",  1, -1, Move.F),
    ("z", -1,  1, Move.B),
    ("z", -1, -1, Move.Br),
])
def test_layer_move(axis, index, direction, expected):
    assert layer_move(axis, index, direction) == expected
    assert layer_move(axis, index, -direction) == expected.inverse

@pytest.mark.parametrize("axis", ["x", "y", "z"])
@pytest.mark.parametrize("direction", [1, -1])
def test_middle_layer_has_no_move(axis, direction):
    assert layer_move(axis, 0, direction) is None

@pytest.mark.parametrize("axis, index, direction", [
    ("w", 1, 1),
    ("X", 1, 1),
    ("x", 2, 1),
    ("y", 1, 0),
    ("z", -1, 2),
])
def test_layer_move_rejects_bad_arguments(axis, index, direction):
    with pytest.raises(ValueError):
        layer_move(axis, index, direction)

def test_layer_move_turns_right_handed():
    #Turning about +y carries the left face's stickers onto the front
    grid = project(apply(reset(), layer_move("y", 1, 1))).face_grid(Face.F)
    assert list(grid[0]) == [Color.ORANGE] * 3

    #Turning about +x carries the top onto the front
    grid = project(apply(reset(), layer_move("x", 1, 1))).face_grid(Face.F)
    assert [row[2] for row in grid] == [Color.WHITE] * 3

    #Turning about +z carries the top onto the left
    grid = project(apply(reset(), layer_move("z", 1, 1))).face_grid(Face.L)
    assert [row[2] for row in grid] == [Color.WHITE] * 3
