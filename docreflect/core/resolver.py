"""Module path resolver for documentation targets.

Targets are resolved by their full dotted path using Python's import system.

Examples
--------
>>> from docreflect.core.resolver import resolve_class, resolve_target
>>> resolve_class("collections.OrderedDict")
<class 'collections.OrderedDict'>
>>> resolve_target("json.dumps")  # doctest: +ELLIPSIS
(None, <function dumps at ...>)
"""

from __future__ import annotations

import importlib
from types import ModuleType
from typing import Any

from docreflect.core.exceptions import DocReflectError


class ResolveError(DocReflectError):
    """Raised when a dotted path cannot be resolved."""

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Cannot resolve '{path}': {reason}")


def _import_longest_prefix(path: str) -> tuple[ModuleType, list[str]]:
    """Import the longest importable module prefix of ``path``.

    Returns the module and the remaining attribute names.
    """
    parts = path.split(".")
    for split in range(len(parts) - 1, 0, -1):
        module_path = ".".join(parts[:split])
        try:
            return importlib.import_module(module_path), parts[split:]
        except ModuleNotFoundError as e:
            # A missing dependency inside the module is a real import failure
            if e.name is not None and not module_path.startswith(e.name):
                raise ResolveError(path, f"Failed to import '{module_path}': {e}") from e
            continue
        except ImportError as e:
            raise ResolveError(path, f"Failed to import '{module_path}': {e}") from e
    raise ResolveError(path, f"Module '{parts[0]}' not found")


def _get_attribute(path: str, owner: Any, name: str) -> Any:
    try:
        return getattr(owner, name)
    except AttributeError as e:
        available = [attr for attr in dir(owner) if not attr.startswith("_")]
        owner_name = getattr(owner, "__name__", type(owner).__name__)
        raise ResolveError(
            path,
            f"'{name}' not found in '{owner_name}'. Available: {', '.join(available[:10])}",
        ) from e


def resolve_class(path: str) -> type[Any]:
    """Resolve a dotted path to a class.

    Parameters
    ----------
    path : str
        Full path to the class (e.g., "myapp.services.UserService")

    Returns
    -------
    type
        The resolved class

    Raises
    ------
    ResolveError
        If the module or class cannot be found
    """
    if "." not in path:
        raise ResolveError(path, "Must be a full module path (e.g., 'myapp.services.UserService')")

    module, names = _import_longest_prefix(path)
    obj: Any = module
    for name in names:
        obj = _get_attribute(path, obj, name)

    if not isinstance(obj, type):
        raise ResolveError(path, f"'{names[-1]}' is not a class (got {type(obj).__name__})")
    return obj


def resolve_function(path: str) -> Any:
    """Resolve a dotted path to a module-level function or callable.

    Raises
    ------
    ResolveError
        If the module or function cannot be found
    """
    if "." not in path:
        raise ResolveError(path, "Must be a full module path (e.g., 'json.loads')")

    module_path, func_name = path.rsplit(".", 1)
    try:
        module = importlib.import_module(module_path)
    except ModuleNotFoundError as e:
        raise ResolveError(path, f"Module '{module_path}' not found: {e}") from e
    except ImportError as e:
        raise ResolveError(path, f"Failed to import '{module_path}': {e}") from e

    func = _get_attribute(path, module, func_name)
    if not callable(func):
        raise ResolveError(path, f"'{func_name}' is not callable (got {type(func).__name__})")
    return func


def resolve_target(path: str) -> tuple[type[Any] | None, Any]:
    """Resolve a path naming either a free function or a class member.

    Parameters
    ----------
    path : str
        ``module.function`` or ``module.Class.member``

    Returns
    -------
    tuple[type | None, Any]
        ``(owner_class, member_name)`` for class members, or
        ``(None, function)`` for free functions
    """
    if "." not in path:
        raise ResolveError(path, "Must be a full module path (e.g., 'json.loads')")

    owner_path, member = path.rsplit(".", 1)
    _, names = _import_longest_prefix(path)
    if not names[:-1]:
        return None, resolve_function(path)

    owner = resolve_class(owner_path)
    return owner, member
