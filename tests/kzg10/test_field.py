"""
Foundation module tests: field.py (scalar field, curve wrapper, power ladder)
"""
import pytest
from zkp.kzg10.field import (
    FR, BLS12_381_FR, CURVE_ORDER, BN128, BLS12_381, powers,
)


# =====================================================================
# Scalar field
# =====================================================================

class TestFR:
    def test_modulus_is_curve_order(self):
        assert FR.field_modulus == CURVE_ORDER
        assert FR.field_modulus == BN128.curve_order

    def test_negative_wraps(self):
        assert FR(-1) == FR(CURVE_ORDER - 1)

    def test_inverse(self):
        x = FR(3)
        assert x * (FR(1) / x) == FR(1)

    def test_bls_field_is_distinct(self):
        assert BLS12_381.field is BLS12_381_FR
        assert BLS12_381_FR.field_modulus == BLS12_381.curve_order
        assert BLS12_381.curve_order != BN128.curve_order

    def test_scalar_from_int(self):
        s = BN128.scalar(7)
        assert isinstance(s, FR)
        assert s == 7

    def test_scalar_keeps_own_field(self):
        x = FR(9)
        assert BN128.scalar(x) is x

    def test_scalar_from_other_field(self):
        s = BLS12_381.scalar(FR(11))
        assert isinstance(s, BLS12_381_FR)
        assert s == 11


# =====================================================================
# Power ladder
# =====================================================================

class TestPowers:
    def test_powers_of_two(self):
        assert powers(FR(2), 4) == [FR(1), FR(2), FR(4), FR(8)]

    def test_powers_of_one_all_ones(self):
        assert powers(FR(1), 5) == [FR(1)] * 5

    def test_powers_of_zero(self):
        """x = 0 yields the identity at index 0, then zeros."""
        assert powers(FR(0), 3) == [FR(1), FR(0), FR(0)]

    def test_empty(self):
        assert powers(FR(5), 0) == []

    def test_exact_length(self):
        assert len(powers(FR(3), 7)) == 7

    def test_each_entry_is_power(self):
        x = FR(123456789)
        ladder = powers(x, 6)
        for i, p in enumerate(ladder):
            assert p == x ** i

    def test_int_input_uses_default_field(self):
        ladder = powers(3, 3)
        assert all(isinstance(p, FR) for p in ladder)
        assert ladder == [FR(1), FR(3), FR(9)]

    def test_preserves_field_type(self):
        ladder = powers(BLS12_381_FR(2), 3)
        assert all(isinstance(p, BLS12_381_FR) for p in ladder)


# =====================================================================
# Curve operations
# =====================================================================

class TestCurve:
    def test_mul_generator(self):
        assert BN128.eq(BN128.mul(BN128.G1, 1), BN128.G1)

    def test_mul_zero_is_identity(self):
        assert BN128.is_identity(BN128.mul(BN128.G1, 0))

    def test_mul_fr_matches_int(self):
        assert BN128.eq(BN128.mul(BN128.G1, FR(5)), BN128.mul(BN128.G1, 5))

    def test_mul_modular(self):
        assert BN128.is_identity(BN128.mul(BN128.G1, CURVE_ORDER))

    def test_add_identity(self):
        assert BN128.eq(BN128.add(BN128.G1, BN128.Z1), BN128.G1)

    def test_add_same(self):
        assert BN128.eq(BN128.add(BN128.G1, BN128.G1), BN128.mul(BN128.G1, 2))

    def test_sub(self):
        P = BN128.mul(BN128.G1, 10)
        Q = BN128.mul(BN128.G1, 3)
        assert BN128.eq(BN128.sub(P, Q), BN128.mul(BN128.G1, 7))

    def test_neg_cancels(self):
        P = BN128.mul(BN128.G1, 5)
        assert BN128.is_identity(BN128.add(P, BN128.neg(P)))

    def test_neg_is_order_complement(self):
        P = BN128.mul(BN128.G1, 5)
        assert BN128.eq(BN128.neg(P), BN128.mul(BN128.G1, CURVE_ORDER - 5))
        assert BN128.eq(BN128.sub(BN128.Z1, P), BN128.neg(P))

    def test_on_curve(self):
        assert BN128.is_on_g1(BN128.G1)
        assert BN128.is_on_g1(BN128.Z1)
        assert BN128.is_on_g2(BN128.G2)
        x, y, z = BN128.G1
        assert not BN128.is_on_g1((x + 1, y, z))

    def test_on_curve_bls12_381(self):
        assert BLS12_381.is_on_g1(BLS12_381.mul(BLS12_381.G1, 9))
        assert BLS12_381.is_on_g2(BLS12_381.G2)

    def test_g2_arithmetic(self):
        P = BN128.add(BN128.mul(BN128.G2, 3), BN128.mul(BN128.G2, 4))
        assert BN128.eq(P, BN128.mul(BN128.G2, 7))

    def test_eq_ignores_projective_representation(self):
        """Same point reached two ways compares equal through Curve.eq."""
        P = BN128.mul(BN128.G1, 6)
        Q = BN128.add(BN128.mul(BN128.G1, 2), BN128.mul(BN128.G1, 4))
        assert BN128.eq(P, Q)
        assert BN128.to_affine(P) == BN128.to_affine(Q)

    def test_to_affine_identity_is_none(self):
        assert BN128.to_affine(BN128.Z1) is None

    def test_to_affine_generator(self):
        x, y = BN128.to_affine(BN128.G1)
        assert x == 1 and y == 2

    def test_pairing_bilinearity(self):
        a, b = 3, 5
        lhs = BN128.pairing(BN128.mul(BN128.G1, a * b), BN128.G2)
        rhs = BN128.pairing(BN128.mul(BN128.G1, a), BN128.mul(BN128.G2, b))
        assert lhs == rhs

    def test_pairing_with_identity_is_one(self):
        e = BN128.pairing(BN128.Z1, BN128.G2)
        assert e == BN128.pairing(BN128.G1, BN128.Z2)

    def test_repr(self):
        assert repr(BLS12_381) == "Curve(bls12_381)"
