from .registry import RuleFunction, RuleRegistry, op_name, registry

__all__ = ["RuleFunction", "RuleRegistry", "op_name", "registry"]
