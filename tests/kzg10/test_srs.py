"""
Tests for srs.py: randomness sources and public parameter generation.
"""
import pytest
from zkp.kzg10.field import FR, BN128, BLS12_381, CURVE_ORDER
from zkp.kzg10.srs import PublicParams, SeededRandomness, generate_public_params


# ─────────────────────────────────────────────────────────────────────
# Fixtures
# ─────────────────────────────────────────────────────────────────────

@pytest.fixture(scope="module")
def pp_small():
    """Small public params for fast tests (n=4)."""
    return generate_public_params(4, randomness=SeededRandomness(42))


# ─────────────────────────────────────────────────────────────────────
# Randomness
# ─────────────────────────────────────────────────────────────────────

class TestSeededRandomness:
    """SeededRandomness 테스트."""

    def test_same_seed_same_sequence(self):
        a, b = SeededRandomness(7), SeededRandomness(7)
        assert [a.randbelow(1000) for _ in range(5)] == [b.randbelow(1000) for _ in range(5)]

    def test_different_seeds_differ(self):
        assert SeededRandomness(1).randbelow(CURVE_ORDER) != SeededRandomness(2).randbelow(CURVE_ORDER)

    def test_successive_draws_differ(self):
        r = SeededRandomness(3)
        assert r.randbelow(CURVE_ORDER) != r.randbelow(CURVE_ORDER)

    def test_range(self):
        r = SeededRandomness("range")
        for _ in range(50):
            assert 0 <= r.randbelow(10) < 10


# ─────────────────────────────────────────────────────────────────────
# PublicParams
# ─────────────────────────────────────────────────────────────────────

class TestPublicParams:
    """generate_public_params 테스트."""

    @pytest.mark.parametrize("n", [1, 2, 3, 5])
    def test_shape(self, n):
        """Both power vectors have exactly n elements."""
        pp = generate_public_params(n, randomness=SeededRandomness(n))
        assert pp.n == n
        assert len(pp.g1_elements) == n
        assert len(pp.g2_elements) == n

    def test_first_elements_are_generators(self, pp_small):
        assert BN128.eq(pp_small.g1_elements[0], BN128.G1)
        assert BN128.eq(pp_small.g2_elements[0], BN128.G2)
        assert BN128.eq(pp_small.gen1, BN128.G1)
        assert BN128.eq(pp_small.gen2, BN128.G2)

    def test_elements_are_secret_powers(self, pp_small):
        """g1_elements[i] == s^i * G1 and g2_elements[i] == s^i * G2."""
        r = SeededRandomness(42)
        s = FR(r.randbelow(CURVE_ORDER - 1) + 1)
        for i in range(pp_small.n):
            assert BN128.eq(pp_small.g1_elements[i], BN128.mul(BN128.G1, s ** i))
            assert BN128.eq(pp_small.g2_elements[i], BN128.mul(BN128.G2, s ** i))

    def test_consecutive_powers_distinct(self, pp_small):
        for i in range(pp_small.n - 1):
            assert not BN128.eq(pp_small.g1_elements[i], pp_small.g1_elements[i + 1])

    def test_deterministic_with_same_seed(self):
        pp1 = generate_public_params(3, randomness=SeededRandomness(99))
        pp2 = generate_public_params(3, randomness=SeededRandomness(99))
        for a, b in zip(pp1.g1_elements, pp2.g1_elements):
            assert BN128.eq(a, b)

    def test_different_seeds_differ(self):
        pp1 = generate_public_params(2, randomness=SeededRandomness(1))
        pp2 = generate_public_params(2, randomness=SeededRandomness(2))
        assert not BN128.eq(pp1.g1_elements[1], pp2.g1_elements[1])

    def test_default_randomness(self):
        """Without an injected source the secrets module is used."""
        pp = generate_public_params(2)
        assert len(pp.g1_elements) == 2

    def test_injected_source_is_used(self):
        class FixedSource:
            def randbelow(self, k):
                return 4  # s = 5

        pp = generate_public_params(2, randomness=FixedSource())
        assert BN128.eq(pp.g1_elements[1], BN128.mul(BN128.G1, 5))
        assert BN128.eq(pp.g2_elements[1], BN128.mul(BN128.G2, 5))

    def test_other_curve(self):
        pp = generate_public_params(2, curve=BLS12_381, randomness=SeededRandomness(5))
        assert pp.curve is BLS12_381
        assert BLS12_381.eq(pp.g1_elements[0], BLS12_381.G1)

    @pytest.mark.parametrize("n", [0, -1])
    def test_rejects_non_positive_n(self, n):
        with pytest.raises(ValueError):
            generate_public_params(n, randomness=SeededRandomness(0))

    def test_immutable(self, pp_small):
        with pytest.raises(AttributeError):
            pp_small.n = 10
        assert isinstance(pp_small.g1_elements, tuple)
        assert isinstance(pp_small.g2_elements, tuple)

    def test_constructor_checks_lengths(self):
        with pytest.raises(ValueError):
            PublicParams(BN128, 2, BN128.G1, BN128.G2, [BN128.G1], [BN128.G2, BN128.G2])

    def test_repr(self, pp_small):
        assert repr(pp_small) == "PublicParams(curve=bn128, n=4)"
