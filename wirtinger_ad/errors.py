class WirtingerADError(Exception):
    """Base exception for differentiation errors."""

    pass


class UnregisteredPrimitiveError(WirtingerADError, KeyError):
    """Raised when a dual is passed through an operation with no rule."""

    pass


class AmbiguousConjugateError(WirtingerADError, ValueError):
    """Raised when the conjugate component of a CtoR is read without a role."""

    pass


class RegistryFrozenError(WirtingerADError, RuntimeError):
    """Raised when registering a rule after the registry was frozen."""

    pass


class RuleArityError(WirtingerADError, ValueError):
    """Raised when a rule does not return one derivative per operand."""

    pass


class SeedMismatchError(WirtingerADError, ValueError):
    """Raised when duals with different numbers of seeds are combined."""

    pass


class NonHolomorphicConversionError(WirtingerADError, ValueError):
    """Raised when a Wirtinger value with a conjugate part is cast to complex."""

    pass


class PropagationDefect(AssertionError):
    """
    A derivative/perturbation pairing outside the composition table.

    This is a bug in a rule or in the engine, never a user error, so it is an
    AssertionError and should not be caught.
    """

    pass
