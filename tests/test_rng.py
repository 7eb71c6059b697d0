from duelsim.core.rng import RNG


def test_rng_determinism_same_seed() -> None:
    rng_a = RNG(12345)
    rng_b = RNG(12345)

    ints_a = [rng_a.randint(1, 100) for _ in range(5)]
    ints_b = [rng_b.randint(1, 100) for _ in range(5)]
    floats_a = [rng_a.random() for _ in range(5)]
    floats_b = [rng_b.random() for _ in range(5)]
    rolls_a = [rng_a.roll_percentile() for _ in range(5)]
    rolls_b = [rng_b.roll_percentile() for _ in range(5)]

    assert ints_a == ints_b
    assert floats_a == floats_b
    assert rolls_a == rolls_b


def test_rng_different_seed() -> None:
    rng_a = RNG(11111)
    rng_b = RNG(22222)

    draws_a = [rng_a.randint(1, 100) for _ in range(5)]
    draws_b = [rng_b.randint(1, 100) for _ in range(5)]

    assert draws_a != draws_b


def test_rng_exposes_only_combat_helpers() -> None:
    public = {name for name in vars(RNG) if not name.startswith("_")}

    assert public == {"randint", "random", "roll_percentile"}


def test_roll_percentile_covers_inclusive_range() -> None:
    rng = RNG(7)
    rolls = {rng.roll_percentile() for _ in range(5000)}

    assert min(rolls) == 0
    assert max(rolls) == 100
