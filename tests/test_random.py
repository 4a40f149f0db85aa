"""Tests for the Alea PRNG and random focus generation."""

import pytest

from py_voronoi.core.alea_prng import AleaPRNG
from py_voronoi.core.color import Color
from py_voronoi.core.focus import Focus, Point
from py_voronoi.utils import random as voronoi_random
from py_voronoi.utils.random import (
    get_prng, get_seed, random_color, random_foci, random_focus,
    random_point, set_random_seed,
)


class TestAleaPRNG:
    """Test the seeded generator."""

    def test_same_seed_same_sequence(self):
        a = AleaPRNG("test_seed")
        b = AleaPRNG("test_seed")
        assert [a.random() for _ in range(50)] == [b.random() for _ in range(50)]

    def test_different_seeds(self):
        a = AleaPRNG("seed1")
        b = AleaPRNG("seed2")
        assert [a.random() for _ in range(10)] != [b.random() for _ in range(10)]

    def test_numeric_and_sequence_seeds(self):
        assert AleaPRNG(42).random() == AleaPRNG("42").random()
        assert AleaPRNG(["a", "b"]).random() == AleaPRNG(["a", "b"]).random()

    def test_range(self):
        prng = AleaPRNG("range")
        values = [prng.random() for _ in range(10000)]
        assert all(0.0 <= v < 1.0 for v in values)
        # roughly uniform
        assert 0.45 < sum(values) / len(values) < 0.55

    def test_call_count(self):
        prng = AleaPRNG("count")
        for _ in range(7):
            prng.random()
        prng.randint_below(10)
        assert prng.call_count == 8

    def test_randint_below(self):
        prng = AleaPRNG("ints")
        values = [prng.randint_below(6) for _ in range(2000)]
        assert set(values) == set(range(6))

    def test_randint_below_one(self):
        prng = AleaPRNG("one")
        assert all(prng.randint_below(1) == 0 for _ in range(20))

    def test_randint_below_rejects_zero(self):
        with pytest.raises(ValueError):
            AleaPRNG("zero").randint_below(0)

    def test_choice(self):
        prng = AleaPRNG("choice")
        items = ["a", "b", "c"]
        assert all(prng.choice(items) in items for _ in range(50))
        with pytest.raises(IndexError):
            prng.choice([])


class TestGlobalPRNG:
    """Test module-level seeding."""

    def test_set_seed_returns_seed(self):
        assert set_random_seed("abc") == "abc"
        assert get_seed() == "abc"

    def test_reseeding_restarts_stream(self):
        set_random_seed("restart")
        first = [get_prng().random() for _ in range(5)]
        set_random_seed("restart")
        assert [get_prng().random() for _ in range(5)] == first

    def test_random_seed_when_omitted(self):
        seed_a = set_random_seed()
        seed_b = set_random_seed()
        assert isinstance(seed_a, str) and seed_a
        assert seed_a != seed_b

    def test_lazy_initialization(self, monkeypatch):
        monkeypatch.setattr(voronoi_random, "_prng", None)
        monkeypatch.setattr(voronoi_random, "_seed", None)
        prng = get_prng()
        assert isinstance(prng, AleaPRNG)
        assert get_seed() is not None


class TestRandomFoci:
    """Test focus generation."""

    def test_point_within_bounds(self):
        prng = AleaPRNG("points")
        for _ in range(1000):
            p = random_point(8, 5, prng)
            assert isinstance(p, Point)
            assert 0 <= p.row < 5
            assert 0 <= p.col < 8

    def test_color_channels_in_unit_interval(self):
        prng = AleaPRNG("colors")
        for _ in range(200):
            c = random_color(prng)
            assert isinstance(c, Color)
            assert all(0.0 <= ch < 1.0 for ch in (c.red, c.green, c.blue))

    def test_focus(self):
        f = random_focus(800, 600, AleaPRNG("focus"))
        assert isinstance(f, Focus)
        assert 0 <= f.point.row < 600
        assert 0 <= f.point.col < 800

    def test_count_and_reproducibility(self):
        foci_a = random_foci(800, 600, 20, prng=AleaPRNG("repro"))
        foci_b = random_foci(800, 600, 20, prng=AleaPRNG("repro"))
        assert len(foci_a) == 20
        assert foci_a == foci_b

    def test_uses_global_prng_by_default(self):
        set_random_seed("global")
        foci_a = random_foci(100, 100, 5)
        set_random_seed("global")
        assert random_foci(100, 100, 5) == foci_a

    def test_zero_count(self):
        assert random_foci(10, 10, 0, prng=AleaPRNG("none")) == []

    def test_five_draws_per_focus(self):
        """Row, column and three color channels."""
        prng = AleaPRNG("draws")
        random_foci(10, 10, 4, prng=prng)
        assert prng.call_count == 20
