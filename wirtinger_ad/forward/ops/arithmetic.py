import numpy as np

from wirtinger_ad.forward.core.registry import registry

from .util import complex_log


@registry.register("add")
def _add_rule(a, b):
    return (1, 1)


@registry.register("subtract")
def _subtract_rule(a, b):
    return (1, -1)


@registry.register("multiply")
def _multiply_rule(a, b):
    return (b, a)


@registry.register("divide", aliases=["true_divide"])
def _divide_rule(a, b):
    return (1 / b, -a / b**2)


@registry.register("power")
def _power_rule(base, exp):
    # base**(exp - 1) is inf at base 0 for exp < 1, and log(base) is -inf at
    # 0 and complex for negative bases; the exponent partial is only used
    # when the exponent is a dual
    with np.errstate(divide="ignore", invalid="ignore"):
        grad_base = exp * np.power(base, exp - 1)
        grad_exp = np.power(base, exp) * complex_log(base)
    return (grad_base, grad_exp)


@registry.register("negative")
def _negative_rule(a):
    return (-1,)


@registry.register("positive")
def _positive_rule(a):
    return (1,)


@registry.register("square")
def _square_rule(z):
    return (2 * z,)


@registry.register("reciprocal")
def _reciprocal_rule(z):
    return (-1 / z**2,)
