"""Lazy package attributes.

Package ``__init__`` modules map their public names to the submodule that
defines them, so ``import fleet_cli`` does not pull in the SDK.
"""

from __future__ import annotations

import importlib
from collections.abc import Callable, Mapping


def make_getattr(package: str, exports: Mapping[str, str]) -> Callable[[str], object]:
    """Build a module-level ``__getattr__`` resolving ``exports`` on first use.

    Args:
        package: Name of the package defining the hook, for error messages.
        exports: Public name -> dotted path of the module that defines it.
    """

    def __getattr__(name: str) -> object:
        try:
            module_path = exports[name]
        except KeyError:
            raise AttributeError(f"module {package!r} has no attribute {name!r}") from None
        return getattr(importlib.import_module(module_path), name)

    return __getattr__
