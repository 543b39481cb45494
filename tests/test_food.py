import random
from ripplesnake.core.food import place_food

def test_food_never_on_snake():
    rng = random.Random(1)
    snake = {(x, 0) for x in range(10)} | {(x, 1) for x in range(9)}
    for _ in range(200):
        cell = place_food(10, 10, snake, rng)
        assert cell not in snake
        assert 0 <= cell[0] < 10 and 0 <= cell[1] < 10

def test_fallback_scan_finds_the_only_free_cell():
    occ = {(x, y) for x in range(5) for y in range(5)} - {(3, 4)}
    # one attempt almost always collides; the full scan must still succeed
    assert place_food(5, 5, occ, random.Random(0), max_attempts=1) == (3, 4)

def test_full_board_has_no_food():
    occ = [(x, y) for x in range(3) for y in range(3)]
    assert place_food(3, 3, occ, random.Random(0)) is None

def test_same_seed_same_cells():
    a = [place_food(10, 10, set(), random.Random(42)) for _ in range(3)]
    b = [place_food(10, 10, set(), random.Random(42)) for _ in range(3)]
    assert a == b
