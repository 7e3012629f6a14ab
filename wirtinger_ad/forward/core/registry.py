from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from typing import Any, Protocol, runtime_checkable

from wirtinger_ad.config import get_config
from wirtinger_ad.errors import RegistryFrozenError, UnregisteredPrimitiveError


@runtime_checkable
class RuleFunction(Protocol):
    def __call__(self, *operands: Any) -> tuple[Any, ...]: ...


def op_name(op: str | Callable) -> str:
    """The registry key of an operation: its name, or the name of the callable."""
    if isinstance(op, str):
        return op
    name = getattr(op, "__name__", None)
    if not name:
        raise TypeError(f"Cannot derive an operation name from {op!r}")
    return name


class RuleRegistry:
    """
    Maps operation names to their local derivative rules.

    A rule receives the numeric operands (never duals) and MUST return a
    tuple with one derivative per operand. Holomorphic derivatives are plain
    values; non-holomorphic ones are wrapped in NonHolomorphic,
    AntiHolomorphic or CtoR.

    The table is meant to be filled once, at import time, and read afterwards.
    Registering an existing name replaces the old rule (last one wins).
    `freeze()` makes the table read-only.
    """

    def __init__(self):
        self._registry: dict[str, RuleFunction] = {}
        self._frozen: bool = False
        self._logger = logging.getLogger("wirtinger_ad.registry")

    def register(
        self,
        op: str | Callable,
        rule: RuleFunction | None = None,
        *,
        aliases: Iterable[str] = (),
    ):
        """
        Register `rule` for `op`, or return a decorator when `rule` is omitted:

            @registry.register("sin")
            def _sin_rule(z):
                return (np.cos(z),)
        """

        def decorator(rule_func: RuleFunction) -> RuleFunction:
            for name in (op_name(op), *aliases):
                self._insert(name, rule_func)
            return rule_func

        if rule is None:
            return decorator
        return decorator(rule)

    def _insert(self, name: str, rule: RuleFunction) -> None:
        if self._frozen:
            raise RegistryFrozenError(
                f"Cannot register a rule for '{name}': the registry is frozen"
            )
        if not callable(rule):
            raise TypeError(f"Rule for '{name}' must be callable, got {type(rule)}")

        previous = self._registry.get(name)
        if previous is not None and previous is not rule and get_config().warn_on_overwrite:
            self._logger.warning("Overwriting the rule for '%s'", name)

        self._registry[name] = rule
        self._logger.debug("Registered rule for '%s'", name)

    def get(self, op: str | Callable) -> RuleFunction | None:
        return self._registry.get(op_name(op))

    def lookup(self, op: str | Callable) -> RuleFunction:
        name = op_name(op)
        try:
            return self._registry[name]
        except KeyError:
            raise UnregisteredPrimitiveError(
                f"No derivative rule registered for '{name}'"
            ) from None

    def freeze(self) -> None:
        self._frozen = True
        self._logger.debug("Registry frozen with %d rules", len(self._registry))

    @property
    def frozen(self) -> bool:
        return self._frozen

    def names(self) -> list[str]:
        return sorted(self._registry)

    def __contains__(self, op) -> bool:
        return op_name(op) in self._registry

    def __len__(self) -> int:
        return len(self._registry)


registry = RuleRegistry()
