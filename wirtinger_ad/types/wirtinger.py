from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from typing import Any

import numpy as np

from wirtinger_ad.config import get_config
from wirtinger_ad.errors import AmbiguousConjugateError, NonHolomorphicConversionError


class Absent:
    """
    Structurally-zero partial.

    Additive identity and multiplicative absorber, so the general propagation
    formula can be written once and the missing terms drop out without
    branching. Compares equal to 0.
    """

    __slots__ = ()
    __array_ufunc__ = None  # numpy must defer to the reflected operators below

    _instance: Absent | None = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __add__(self, other):
        return other

    __radd__ = __add__

    def __sub__(self, other):
        return -other

    def __rsub__(self, other):
        return other

    def __mul__(self, other):
        return self

    __rmul__ = __mul__

    def __neg__(self):
        return self

    def conjugate(self):
        return self

    def __eq__(self, other):
        return other is self or other == 0

    def __hash__(self):
        return hash(0)

    def __bool__(self):
        return False

    def __complex__(self):
        return 0j

    def __float__(self):
        return 0.0

    def __repr__(self):
        return "Absent()"


ABSENT = Absent()


class Role(Enum):
    """What a Wirtinger value stands for; only matters for CtoR."""

    DERIVATIVE = "derivative"  # stores (df/du, df/dū)
    PERTURBATION = "perturbation"  # stores (dw/dz, dw̄/dz)


class Wirtinger:
    """Marker base for the wrapped (non-holomorphic) kinds."""

    __slots__ = ()
    __array_ufunc__ = None

    def __complex__(self) -> complex:
        c = wirtconj(self, Role.DERIVATIVE)
        if not _is_zero(c):
            raise NonHolomorphicConversionError(
                f"The conjugate component must be zero to convert {self!r} to complex"
            )
        return complex(wirtprimal(self))

    def __radd__(self, other):
        return add(other, self)

    def _show(self) -> str:
        return f"{type(self).__name__}(dz: {wirtprimal(self)}, dz̄: {wirtconj(self)})"

    def __repr__(self):
        return self._show()


@dataclass(frozen=True, slots=True, repr=False)
class NonHolomorphic(Wirtinger):
    """
    The general case: both partials are independent.

    As a derivative `primal` is df/du and `conjugate` is df/dū. As a
    perturbation they are dw/dz and dw̄/dz.
    """

    primal: Any
    conjugate: Any

    def __add__(self, other):
        if isinstance(other, NonHolomorphic):
            return NonHolomorphic(
                self.primal + other.primal, self.conjugate + other.conjugate
            )
        return add(self, other)

    def __neg__(self):
        return NonHolomorphic(-self.primal, -self.conjugate)


@dataclass(frozen=True, slots=True, repr=False)
class AntiHolomorphic(Wirtinger):
    """The primal partial is structurally zero; only the conjugate is kept."""

    conjugate: Any

    def __add__(self, other):
        if isinstance(other, AntiHolomorphic):
            return AntiHolomorphic(self.conjugate + other.conjugate)
        return add(self, other)

    def __neg__(self):
        return AntiHolomorphic(-self.conjugate)


@dataclass(frozen=True, slots=True, repr=False)
class CtoR(Wirtinger):
    """
    Partial of a real-valued function of a complex argument.

    The conjugate partial is never stored. For a derivative it is
    conj(primal); for a perturbation of a real quantity w, dw̄/dz equals
    dw/dz, i.e. the primal itself.
    """

    primal: Any

    def __add__(self, other):
        if isinstance(other, CtoR):
            return CtoR(self.primal + other.primal)
        return add(self, other)

    def __neg__(self):
        return CtoR(-self.primal)

    def _show(self) -> str:
        return f"CtoR(dz: {self.primal})"


def wirtprimal(x):
    """The partial with respect to z. Total over every kind."""
    if isinstance(x, NonHolomorphic):
        return x.primal
    if isinstance(x, CtoR):
        return x.primal
    if isinstance(x, AntiHolomorphic):
        return ABSENT
    return x


def wirtconj(x, role: Role | None = None):
    """
    The conjugate partial.

    For CtoR the value depends on whether `x` is a derivative or a
    perturbation, so the caller has to say which; without a role this raises
    AmbiguousConjugateError.
    """
    if isinstance(x, (NonHolomorphic, AntiHolomorphic)):
        return x.conjugate
    if isinstance(x, CtoR):
        if role is Role.DERIVATIVE:
            return conj(x.primal)
        if role is Role.PERTURBATION:
            return x.primal
        raise AmbiguousConjugateError(
            "wirtconj is not well-defined on CtoR without a role: "
            "pass Role.DERIVATIVE or Role.PERTURBATION"
        )
    return ABSENT


def conj(x):
    """Complex conjugate that also handles Absent and callable operators."""
    if x is ABSENT:
        return x
    if isinstance(x, Wirtinger):
        raise TypeError(f"Cannot conjugate a wrapped Wirtinger value {x!r}")
    if callable(x):
        return _conjugate_operator(x)
    return np.conjugate(x)


def _conjugate_operator(op: Callable) -> Callable:
    # conj(L) p = conj(L(conj(p))) for a linear operator L
    def conjugated(p):
        return conj(op(conj(p)))

    return conjugated


def _materialize(x):
    return 0 if x is ABSENT else x


def _is_zero(x) -> bool:
    if x is ABSENT:
        return True
    return bool(np.isclose(x, 0, rtol=0.0, atol=get_config().atol))


def promote(x, role: Role | None = None) -> NonHolomorphic:
    """Promote any kind, or a bare value, to NonHolomorphic."""
    if isinstance(x, NonHolomorphic):
        return x
    return NonHolomorphic(_materialize(wirtprimal(x)), _materialize(wirtconj(x, role)))


def add(l, r, role: Role | None = None):
    """
    Sum two partials of possibly different kinds.

    Same kinds add directly. Anything else is promoted to NonHolomorphic,
    which can represent every sum. `role` is needed when a CtoR is promoted.
    """
    l_wrapped = isinstance(l, Wirtinger)
    r_wrapped = isinstance(r, Wirtinger)
    if not l_wrapped and not r_wrapped:
        return l + r
    if type(l) is type(r):
        return l + r
    pl, pr = promote(l, role), promote(r, role)
    return NonHolomorphic(pl.primal + pr.primal, pl.conjugate + pr.conjugate)


def kind(x) -> str:
    if isinstance(x, Wirtinger):
        return type(x).__name__
    return "Holomorphic"


def wirtinger_pair(p) -> tuple[Any, Any]:
    """
    Convert a perturbation to the derivative convention.

    A perturbation stores (dw/dz, dw̄/dz); this returns (dw/dz, dw/dz̄).
    """
    primal = _materialize(wirtprimal(p))
    conjugate = _materialize(conj(wirtconj(p, Role.PERTURBATION)))
    return primal, conjugate


def total(p):
    """
    dw/dz + dw/dz̄.

    For a real input seeded with a holomorphic unit this is the ordinary
    derivative dw/dx.
    """
    primal, conjugate = wirtinger_pair(p)
    return primal + conjugate
