from __future__ import annotations

import logging
import warnings
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

import numpy as np

from wirtinger_ad.forward.core.registry import op_name, registry
from wirtinger_ad.types.wirtinger import Role, _materialize, wirtconj, wirtprimal


@dataclass
class DerivativeConfig:
    """Configuration for finite-difference Wirtinger derivatives"""

    step: float = 1e-4
    order: int = 4
    rtol: float = 1e-5
    atol: float = 1e-7


class WirtingerDifferentiator:
    """
    Numerical Wirtinger derivatives of scalar functions.

    Each argument is perturbed along the real and the imaginary axis with a
    central finite-difference stencil, and the two directional derivatives
    are combined as

        df/dz = (df/dx - i df/dy) / 2
        df/dz̄ = (df/dx + i df/dy) / 2
    """

    _STENCILS = {
        2: (np.array([-1.0, 1.0]) / 2.0, np.array([-1, 1])),
        4: (np.array([1.0, -8.0, 8.0, -1.0]) / 12.0, np.array([-2, -1, 1, 2])),
        6: (
            np.array([-1.0, 9.0, -45.0, 45.0, -9.0, 1.0]) / 60.0,
            np.array([-3, -2, -1, 1, 2, 3]),
        ),
    }

    def __init__(self, config: DerivativeConfig | None = None):
        self.config = config or DerivativeConfig()
        self.evaluation_count = 0
        self._logger = logging.getLogger("wirtinger_ad.numerical")

        if self.config.order not in self._STENCILS:
            raise ValueError(f"Unsupported finite difference order: {self.config.order}")

    def _directional(
        self, func: Callable, args: tuple[Any, ...], argnum: int, direction: complex
    ) -> complex:
        coefficients, points = self._STENCILS[self.config.order]
        x = complex(args[argnum])
        h = self.config.step * max(abs(x), 1.0)

        total = 0j
        for c, p in zip(coefficients, points):
            shifted = list(args)
            shifted[argnum] = x + p * h * direction
            total += c * complex(func(*shifted))
            self.evaluation_count += 1
        return total / h

    def wirtinger(self, func: Callable, *args: Any, argnum: int = 0) -> tuple[complex, complex]:
        """(df/dz, df/dz̄) of `func` with respect to argument `argnum`."""
        dfdx = self._directional(func, args, argnum, 1.0)
        dfdy = self._directional(func, args, argnum, 1j)
        if not (np.isfinite(dfdx) and np.isfinite(dfdy)):
            warnings.warn(
                f"Non-finite finite difference for argument {argnum} of "
                f"{getattr(func, '__name__', func)!s}",
                stacklevel=2,
            )
        return 0.5 * (dfdx - 1j * dfdy), 0.5 * (dfdx + 1j * dfdy)

    def compute_derivatives(self, func: Callable, *args: Any) -> list[tuple[complex, complex]]:
        return [self.wirtinger(func, *args, argnum=i) for i in range(len(args))]


def numerical_derivative(
    func: Callable, *args: Any, config: DerivativeConfig | None = None
) -> list[tuple[complex, complex]]:
    """Numerical (df/dz, df/dz̄) for every argument of `func`."""
    return WirtingerDifferentiator(config).compute_derivatives(func, *args)


def check_rule(func: Callable, *args: Any, config: DerivativeConfig | None = None) -> bool:
    """
    Compare the registered rule of `func` with finite differences at `args`.

    `func` is evaluated on plain numbers, so it can be a numpy ufunc or a
    function decorated with `primitive`.
    """
    config = config or DerivativeConfig()
    logger = logging.getLogger("wirtinger_ad.numerical")
    name = op_name(func)
    derivs = registry.lookup(name)(*args)
    numeric = numerical_derivative(func, *args, config=config)

    ok = True
    for i, (deriv, (dz, dzbar)) in enumerate(zip(derivs, numeric)):
        if callable(deriv):
            warnings.warn(
                f"Rule for '{name}' returns an operator for argument {i}; not checked",
                stacklevel=2,
            )
            continue
        expected_dz = _materialize(wirtprimal(deriv))
        expected_dzbar = _materialize(wirtconj(deriv, Role.DERIVATIVE))
        close = np.isclose(expected_dz, dz, rtol=config.rtol, atol=config.atol) and np.isclose(
            expected_dzbar, dzbar, rtol=config.rtol, atol=config.atol
        )
        if not close:
            logger.warning(
                "Rule for '%s' disagrees on argument %d: rule (%s, %s), numerical (%s, %s)",
                name, i, expected_dz, expected_dzbar, dz, dzbar,
            )
            ok = False
    return ok
