import numpy as np
import pytest
import scipy.special

from wirtinger_ad import (
    AntiHolomorphic,
    CtoR,
    Dual,
    NonHolomorphic,
    SeedMismatchError,
    abs2,
    evaluate,
    isclose,
    partials,
    seed,
    total,
    value,
    wirtconj,
    wirtinger_pair,
    wirtprimal,
)
from wirtinger_ad.types.wirtinger import ABSENT, Role


class TestSeed:
    def test_single(self):
        x = seed(1.5)
        assert x.value == 1.5
        assert x.partials == (1,)

    def test_onehot(self):
        x, y, z = seed(1.0, 2.0, 3.0)
        assert x.partials == (1, 0, 0)
        assert y.partials == (0, 1, 0)
        assert z.partials == (0, 0, 1)

    def test_needs_a_value(self):
        with pytest.raises(TypeError):
            seed()

    def test_rejects_duals(self):
        with pytest.raises(TypeError):
            seed(seed(1.0))

    def test_no_nesting(self):
        with pytest.raises(TypeError):
            Dual(seed(1.0), (1,))

    def test_value_and_partials(self):
        x = seed(2.0)
        assert value(x) == 2.0
        assert value(3) == 3
        assert partials(x) == (1,)
        assert x.nseeds == 1


class TestArithmetic:
    """Binary operators on two seeded inputs"""

    @pytest.fixture
    def xy(self):
        return seed(0.5, 2.0)

    def test_add(self, xy):
        x, y = xy
        assert x + y == Dual(2.5, (1, 1))

    def test_subtract(self, xy):
        x, y = xy
        assert x - y == Dual(-1.5, (1, -1))

    def test_multiply(self, xy):
        x, y = xy
        assert x * y == Dual(1.0, (2.0, 0.5))

    def test_divide(self, xy):
        x, y = xy
        assert x / y == Dual(0.25, (0.5, -0.125))

    def test_power(self, xy):
        x, y = xy
        out = x**y
        assert np.isclose(out.value, 0.25)
        assert np.isclose(out.partials[0], 2.0 * 0.5)
        assert np.isclose(out.partials[1], 0.25 * np.log(0.5))

    def test_with_constants(self):
        x = seed(2.0)
        assert (3 - x).partials == (-1,)
        assert (x / 2).partials == (0.5,)
        assert (2 * x).partials == (2,)
        assert (x + 1).value == 3.0
        assert (-x).partials == (-1,)
        assert (+x).partials == (1,)

    def test_numpy_scalar_operand(self):
        x = seed(2.0)
        out = np.float64(3.0) * x
        assert isinstance(out, Dual)
        assert out.partials == (3.0,)

    def test_integer_power(self):
        out = seed(2.0) ** 3
        assert out.value == 8.0
        assert out.partials == (12.0,)

    def test_fractional_power_at_zero(self):
        """d/dx sqrt(x) is infinite at 0, like the sqrt rule."""
        out = seed(0.0) ** 0.5
        assert out.value == 0.0
        (p,) = out.partials
        assert np.isposinf(p)
        (q,) = np.sqrt(seed(0.0)).partials
        assert np.isposinf(q)

    def test_negative_integer_exponent(self):
        out = seed(2) ** -1
        assert out.value == 0.5
        assert out.partials == (-0.25,)

    def test_integer_base_and_exponent(self):
        out = seed(3) ** 2
        assert out.value == 9.0
        assert out.partials == (6.0,)
        assert np.isclose((2 ** seed(-1)).value, 0.5)

    def test_constant_base(self):
        out = 2 ** seed(1.5)
        assert np.isclose(out.value, 2**1.5)
        assert np.isclose(out.partials[0], 2**1.5 * np.log(2))

    def test_seed_mismatch(self):
        a = seed(1.0)
        b, _ = seed(1.0, 2.0)
        with pytest.raises(SeedMismatchError):
            a + b


class TestElementary:
    @pytest.mark.parametrize("x", [0.8, 0.3 + 0.6j])
    def test_sin(self, x):
        out = np.sin(seed(x))
        assert np.isclose(out.value, np.sin(x))
        assert np.isclose(out.partials[0], np.cos(x))

    @pytest.mark.parametrize("x", [0.8, 0.3 + 0.6j])
    def test_cos(self, x):
        out = np.cos(seed(x))
        assert np.isclose(out.partials[0], -np.sin(x))

    @pytest.mark.parametrize("x", [0.8, 0.3 + 0.6j])
    def test_log(self, x):
        out = np.log(seed(x))
        assert np.isclose(out.value, np.log(x))
        assert np.isclose(out.partials[0], 1 / x)

    def test_exp_chain(self):
        out = evaluate(lambda z: np.exp(np.sin(z)), 0.4)
        assert np.isclose(out.partials[0], np.exp(np.sin(0.4)) * np.cos(0.4))

    def test_scipy_special(self):
        out = scipy.special.erf(seed(0.5))
        assert np.isclose(out.value, scipy.special.erf(0.5))
        assert np.isclose(out.partials[0], 2 / np.sqrt(np.pi) * np.exp(-0.25))


def _f(x, y):
    return x * (2 * x + np.sin(y))


class TestHolomorphicComposition:
    """Nested holomorphic functions follow the ordinary chain rule"""

    @pytest.mark.parametrize("x,y", [(0.7, 1.3), (0.7 + 0.2j, 1.3 - 0.5j)])
    def test_two_inputs(self, x, y):
        out = evaluate(_f, x, y)
        assert np.isclose(out.value, _f(x, y))
        dfdx, dfdy = out.partials
        assert np.isclose(dfdx, 4 * x + np.sin(y))
        assert np.isclose(dfdy, x * np.cos(y))

    def test_partials_stay_unwrapped(self):
        out = evaluate(_f, 0.7 + 0.2j, 1.3)
        for p in out.partials:
            assert not isinstance(p, (NonHolomorphic, AntiHolomorphic, CtoR))

    def test_idempotent(self):
        assert evaluate(_f, 0.7, 1.3) == evaluate(_f, 0.7, 1.3)


class TestNonHolomorphic:
    z = 0.7 + 0.4j

    def test_abs2(self):
        out = abs2(seed(self.z))
        assert np.isclose(out.value, abs(self.z) ** 2)
        (p,) = out.partials
        assert isinstance(p, CtoR)
        assert np.isclose(wirtprimal(p), np.conj(self.z))

    def test_conj(self):
        out = np.conj(seed(self.z))
        assert out.value == np.conj(self.z)
        (p,) = out.partials
        assert isinstance(p, AntiHolomorphic)
        assert wirtprimal(p) == 0
        assert wirtconj(p) == 1

    def test_conj_methods(self):
        x = seed(self.z)
        assert x.conj() == np.conj(x)
        assert x.conjugate() == np.conj(x)

    def test_real_and_imag(self):
        x = seed(self.z)
        assert x.real.value == self.z.real
        assert x.real.partials == (CtoR(0.5),)
        assert x.imag.value == self.z.imag
        assert x.imag.partials == (CtoR(-0.5j),)
        assert np.real(x) == x.real

    def test_absolute(self):
        out = abs(seed(3 + 4j))
        assert out.value == 5.0
        (p,) = out.partials
        assert isinstance(p, CtoR)
        assert np.isclose(p.primal, (3 - 4j) / 10)

    def test_composed(self):
        """3z^2 * 5conj(z)^3 mixes holomorphic and antiholomorphic factors."""
        z = self.z
        out = evaluate(lambda w: 3 * w**2 * 5 * np.conj(w) ** 3, z)
        (p,) = out.partials
        assert isinstance(p, NonHolomorphic)
        assert np.isclose(p.primal, 6 * z * 5 * np.conj(z) ** 3)
        assert np.isclose(p.conjugate, np.conj(3 * z**2 * 15 * np.conj(z) ** 2))

    def test_scaled_nonholomorphic(self):
        """(2+i) z conj(z)^2 at z = 3+i"""
        z = 3 + 1j
        out = evaluate(lambda w: (2 + 1j) * w * np.conj(w) ** 2, z)
        assert np.isclose(out.value, (2 + 1j) * z * np.conj(z) ** 2)
        (p,) = out.partials
        assert isinstance(p, NonHolomorphic)
        dz, dzbar = wirtinger_pair(p)
        assert np.isclose(dz, (2 + 1j) * np.conj(z) ** 2)
        assert np.isclose(dzbar, (2 + 1j) * z * 2 * np.conj(z))
        # stored as dw̄/dz
        assert np.isclose(p.conjugate, np.conj((2 + 1j) * z * 2 * np.conj(z)))


class TestRealInputs:
    """A real seed recovers the ordinary derivative through `total`"""

    def test_abs2(self):
        (p,) = abs2(seed(3.0)).partials
        assert total(p) == 6.0

    def test_absolute(self):
        (p,) = abs(seed(-2.0)).partials
        assert np.isclose(total(p), -1.0)

    def test_mixed_sum(self):
        x = seed(1.5)
        (p,) = (x * x + abs2(x)).partials
        assert isinstance(p, NonHolomorphic)
        assert np.isclose(total(p), 6.0)


class TestEquality:
    def test_kind_independent(self):
        assert Dual(1.0, (NonHolomorphic(2, 0),)) == Dual(1.0, (2,))
        assert Dual(1.0, (AntiHolomorphic(0),)) == Dual(1.0, (0,))
        assert Dual(1.0, (CtoR(2.0),)) == Dual(1.0, (NonHolomorphic(2.0, 2.0),))

    def test_absent_equals_zero(self):
        assert Dual(1.0, (ABSENT,)) == Dual(1.0, (0,))

    def test_different_seed_counts(self):
        assert Dual(1.0, (1,)) != Dual(1.0, (1, 0))

    def test_different_values(self):
        assert Dual(1.0, (1,)) != Dual(2.0, (1,))
        assert Dual(1.0, (1,)) != Dual(1.0, (2,))

    def test_isclose(self):
        a = Dual(1.0, (NonHolomorphic(2.0, 1e-12),))
        b = Dual(1.0 + 1e-12, (2.0,))
        assert a != b
        assert a.isclose(b)
        assert isclose(a, b)
        assert not a.isclose(b, rtol=0.0, atol=0.0)

    def test_isclose_rejects_plain(self):
        with pytest.raises(TypeError):
            seed(1.0).isclose(1.0)

    def test_unhashable(self):
        with pytest.raises(TypeError):
            hash(seed(1.0))

    def test_repr(self):
        assert repr(Dual(1.0, (1,))) == "Dual(1.0, (1,))"

    def test_component_roles(self):
        p = CtoR(1 + 1j)
        assert wirtconj(p, Role.PERTURBATION) == wirtprimal(p)
