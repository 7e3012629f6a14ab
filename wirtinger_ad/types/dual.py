from __future__ import annotations

from collections.abc import Iterable
from typing import Any

import numpy as np

from wirtinger_ad.config import get_config
from wirtinger_ad.types.wirtinger import Role, _materialize, wirtconj, wirtprimal


def _compose(func, *args):
    from wirtinger_ad.forward.compose import compose  # local import to avoid cycles

    return compose(func, *args)


def _inexact(x):
    if isinstance(x, Dual):
        return Dual(_inexact(x.value), x.partials)
    if isinstance(x, (int, np.integer)) and not isinstance(x, bool):
        return float(x)
    return x


def _components(p) -> tuple[Any, Any]:
    return _materialize(wirtprimal(p)), _materialize(wirtconj(p, Role.PERTURBATION))


class Dual:
    """
    A primal value carried together with one perturbation per seed.

    Every operator and numpy ufunc applied to a Dual is evaluated on the
    primal values and differentiated through the rule registered for it.
    """

    __slots__ = ("_value", "_partials")

    def __init__(self, value: Any, partials: Iterable[Any]):
        if isinstance(value, Dual):
            raise TypeError("Nested duals are not supported")
        self._value = value
        self._partials = tuple(partials)

    @property
    def value(self) -> Any:
        return self._value

    @property
    def partials(self) -> tuple[Any, ...]:
        return self._partials

    @property
    def nseeds(self) -> int:
        return len(self._partials)

    def __repr__(self):
        return f"Dual({self._value!r}, {self._partials!r})"

    # Comparison
    def __eq__(self, other):
        if not isinstance(other, Dual):
            return NotImplemented
        if self.nseeds != other.nseeds:
            return False
        if not bool(self._value == other._value):
            return False
        for l, r in zip(self._partials, other._partials):
            (lp, lc), (rp, rc) = _components(l), _components(r)
            if not (bool(lp == rp) and bool(lc == rc)):
                return False
        return True

    __hash__ = None

    def isclose(self, other: Dual, rtol: float | None = None, atol: float | None = None) -> bool:
        """Approximate equality of the value and of every perturbation component."""
        if not isinstance(other, Dual):
            raise TypeError(f"Cannot compare Dual with {type(other)}")
        if self.nseeds != other.nseeds:
            return False

        cfg = get_config()
        rtol = cfg.rtol if rtol is None else rtol
        atol = cfg.atol if atol is None else atol

        def close(a, b) -> bool:
            return bool(np.isclose(a, b, rtol=rtol, atol=atol))

        if not close(self._value, other._value):
            return False
        for l, r in zip(self._partials, other._partials):
            (lp, lc), (rp, rc) = _components(l), _components(r)
            if not (close(lp, rp) and close(lc, rc)):
                return False
        return True

    # numpy integration: np.sin(d), np.conj(d), scipy.special.erf(d), ...
    def __array_ufunc__(self, ufunc, method, *inputs, **kwargs):
        if method != "__call__" or kwargs:
            return NotImplemented
        return _compose(ufunc, *inputs)

    # Operator overloading
    def __add__(self, other):
        return _compose(np.add, self, other)

    def __radd__(self, other):
        return _compose(np.add, other, self)

    def __sub__(self, other):
        return _compose(np.subtract, self, other)

    def __rsub__(self, other):
        return _compose(np.subtract, other, self)

    def __mul__(self, other):
        return _compose(np.multiply, self, other)

    def __rmul__(self, other):
        return _compose(np.multiply, other, self)

    def __truediv__(self, other):
        return _compose(np.divide, self, other)

    def __rtruediv__(self, other):
        return _compose(np.divide, other, self)

    # np.power rejects negative integer exponents of integers, so `**` works
    # on floats like Python's own operator does
    def __pow__(self, other):
        return _compose(np.power, _inexact(self), _inexact(other))

    def __rpow__(self, other):
        return _compose(np.power, _inexact(other), _inexact(self))

    def __neg__(self):
        return _compose(np.negative, self)

    def __pos__(self):
        return _compose(np.positive, self)

    def __abs__(self):
        return _compose(np.absolute, self)

    @property
    def real(self) -> Dual:
        return _compose(np.real, self)

    @property
    def imag(self) -> Dual:
        return _compose(np.imag, self)

    def conjugate(self) -> Dual:
        return _compose(np.conjugate, self)

    conj = conjugate


def isclose(l: Dual, r: Dual, rtol: float | None = None, atol: float | None = None) -> bool:
    return l.isclose(r, rtol=rtol, atol=atol)
