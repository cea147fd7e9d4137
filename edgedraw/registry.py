"""Gradient policy auto-discovery and registration.

Scans edgedraw/policies/ for modules that define a `policy` object of
type GradientPolicy. Collects them into a dict keyed by name; `resolve`
also accepts the numeric method id (0, 1, ...) or its string form.
"""

import importlib
import pkgutil

from edgedraw.core.errors import UnsupportedMode
from edgedraw.core.types import GradientPolicy

_registry: dict[str, GradientPolicy] = {}


def discover() -> dict[str, GradientPolicy]:
    """Import all policy modules and return the registry."""
    if _registry:
        return _registry

    import edgedraw.policies as pkg

    found_modules = [
        modname for _importer, modname, _ispkg in pkgutil.iter_modules(pkg.__path__) if not modname.startswith('_')
    ]

    for modname in found_modules:
        module = importlib.import_module(f'edgedraw.policies.{modname}')
        policy = getattr(module, 'policy', None)
        if isinstance(policy, GradientPolicy):
            _registry[policy.name] = policy

    return _registry


def _choices(reg: dict[str, GradientPolicy]) -> str:
    return ', '.join(f'{p.method} ({p.name})' for p in sorted(reg.values(), key=lambda p: p.method))


def get(name: str) -> GradientPolicy:
    """Get a policy by name."""
    reg = discover()
    if name not in reg:
        raise UnsupportedMode(f'Unknown gradient policy: {name}. Available: {_choices(reg)}')
    return reg[name]


def resolve(method: int | str) -> GradientPolicy:
    """Get a policy by method id (0, '0') or name ('grayscale')."""
    reg = discover()
    key = method.strip().lower() if isinstance(method, str) else method
    if isinstance(key, str) and key.isdigit():
        key = int(key)
    if isinstance(key, int) and not isinstance(key, bool):
        for policy in reg.values():
            if policy.method == key:
                return policy
        raise UnsupportedMode(f'Unknown method: {method}. Available: {_choices(reg)}')
    return get(key)


def all_policies() -> dict[str, GradientPolicy]:
    """Return all registered policies."""
    return discover()
