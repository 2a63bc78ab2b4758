import random, pytest
from cubecore import scramble

@pytest.fixture
def rng():
    return random.Random(1234)

@pytest.fixture
def scrambled_states(rng):
    return [scramble(n, rng)[0] for n in (1, 5, 20, 60)]
