"""Reflective metadata extraction for docreflect.

This module turns live Python callables and classes into the
:class:`~docreflect.core.docs.models.MemberHandle` descriptors that the
signature builder consumes. Python conventions are mapped onto the
modifier vocabulary used in signatures:

- ``__name`` (mangled, not dunder) is ``private``, ``_name`` is
  ``protected``, everything else is ``public``
- ``staticmethod`` and ``classmethod`` members are ``static``
- abstract methods are ``abstract``, ``typing.final`` members are ``final``
"""

import inspect
import types
from collections.abc import Callable
from typing import Any, Literal, Union, get_args, get_origin, get_type_hints

from docreflect.core.docs.models import MemberHandle, ParameterHandle
from docreflect.core.exceptions import MemberNotFoundError
from docreflect.core.logging import get_logger

logger = get_logger(__name__)

# Defaults of native routines are only trusted when they are plain literals
_LITERAL_TYPES = (str, bytes, int, float, complex, bool, type(None))

_VARIADIC_PREFIX = {
    inspect.Parameter.VAR_POSITIONAL: "*",
    inspect.Parameter.VAR_KEYWORD: "**",
}


class DocExtractor:
    """Build member descriptors from Python code artifacts.

    All methods are static; the extractor keeps no state between calls.
    """

    @staticmethod
    def describe_function(func: Callable[..., Any]) -> MemberHandle:
        """Describe a free routine (module-level function or builtin).

        Parameters
        ----------
        func : Callable
            The function to describe

        Returns
        -------
        MemberHandle
            Descriptor without declaring type or modifiers
        """
        parameters, return_type = DocExtractor._inspect_callable(func, drop_first=False)
        return MemberHandle(
            name=getattr(func, "__name__", type(func).__name__),
            parameters=parameters,
            return_type=return_type,
            doc_comment=func.__doc__,
        )

    @staticmethod
    def describe_method(cls: type, name: str) -> MemberHandle:
        """Describe a method of a class, inherited members included.

        Parameters
        ----------
        cls : type
            Class to look the member up on
        name : str
            Member name

        Returns
        -------
        MemberHandle
            Descriptor bound to the class that declares the member

        Raises
        ------
        MemberNotFoundError
            If ``cls`` has no routine called ``name``
        """
        declaring = DocExtractor._declaring_class(cls, name)
        if declaring is None:
            raise MemberNotFoundError(
                cls.__qualname__, name, DocExtractor.list_method_names(cls)
            )

        raw = declaring.__dict__[name]
        func = raw.__func__ if isinstance(raw, staticmethod | classmethod) else raw

        modifiers = [DocExtractor._visibility(name, declaring)]
        if isinstance(raw, staticmethod | classmethod):
            modifiers.append("static")
        if getattr(raw, "__isabstractmethod__", False):
            modifiers.append("abstract")
        if getattr(raw, "__final__", False) or getattr(func, "__final__", False):
            modifiers.append("final")

        parameters, return_type = DocExtractor._inspect_callable(
            func, drop_first=not isinstance(raw, staticmethod)
        )
        return MemberHandle(
            name=name,
            declaring_type=declaring.__qualname__,
            modifiers=tuple(modifiers),
            parameters=parameters,
            return_type=return_type,
            doc_comment=func.__doc__,
        )

    @staticmethod
    def describe_methods(cls: type, *, skip_object: bool = True) -> list[MemberHandle]:
        """Describe every routine of a class, sorted by name.

        Parameters
        ----------
        cls : type
            Class to describe
        skip_object : bool, default=True
            Leave out members that are only declared by ``object``

        Returns
        -------
        list[MemberHandle]
            One descriptor per routine
        """
        handles = []
        for name in DocExtractor.list_method_names(cls):
            declaring = DocExtractor._declaring_class(cls, name)
            if skip_object and declaring is object:
                continue
            handles.append(DocExtractor.describe_method(cls, name))
        return handles

    @staticmethod
    def list_method_names(cls: type) -> list[str]:
        """Return the sorted names of all routines reachable on ``cls``."""
        return sorted(
            name for name in dir(cls) if DocExtractor._declaring_class(cls, name) is not None
        )

    @staticmethod
    def get_class_comment(cls: type) -> str | None:
        """Return the raw comment block attached to a class definition."""
        return cls.__doc__

    @staticmethod
    def _declaring_class(cls: type, name: str) -> type | None:
        """Find the first class in the MRO whose namespace defines routine ``name``."""
        for klass in inspect.getmro(cls):
            if name not in klass.__dict__:
                continue
            raw = klass.__dict__[name]
            if isinstance(raw, staticmethod | classmethod) or inspect.isroutine(raw):
                return klass
            return None
        return None

    @staticmethod
    def _visibility(name: str, owner: type) -> str:
        is_dunder = name.startswith("__") and name.endswith("__")
        # Double underscore names live in the class namespace in mangled form
        mangled_prefix = f"_{owner.__name__.lstrip('_')}__"
        if name.startswith(mangled_prefix) or (name.startswith("__") and not is_dunder):
            return "private"
        if name.startswith("_") and not is_dunder:
            return "protected"
        return "public"

    @staticmethod
    def _inspect_callable(
        func: Callable[..., Any], *, drop_first: bool
    ) -> tuple[tuple[ParameterHandle, ...], str | None]:
        """Extract parameters and return type from a callable.

        Builtins without a text signature expose nothing; they get an empty
        parameter list rather than an error.
        """
        try:
            sig = inspect.signature(func)
        except (ValueError, TypeError) as e:
            logger.debug("No signature available for {func}: {error}", func=func, error=e)
            return (), None

        try:
            hints = get_type_hints(func)
        except Exception:
            hints = {}

        native = not inspect.isfunction(func)
        params = list(sig.parameters.values())
        if drop_first and params and params[0].kind in (
            inspect.Parameter.POSITIONAL_ONLY,
            inspect.Parameter.POSITIONAL_OR_KEYWORD,
        ):
            params = params[1:]

        parameters = []
        for param in params:
            annotation = hints.get(param.name, param.annotation)
            type_name = (
                None
                if annotation is inspect.Parameter.empty
                else DocExtractor._format_type_hint(annotation)
            )
            is_optional = param.default is not inspect.Parameter.empty
            default_available = is_optional and not (
                native and not isinstance(param.default, _LITERAL_TYPES)
            )
            parameters.append(
                ParameterHandle(
                    name=_VARIADIC_PREFIX.get(param.kind, "") + param.name,
                    type_name=type_name,
                    is_optional=is_optional,
                    default=param.default if default_available else None,
                    default_available=default_available,
                )
            )

        return_annotation = hints.get("return", sig.return_annotation)
        return_type = (
            None
            if return_annotation is inspect.Signature.empty
            else DocExtractor._format_type_hint(return_annotation)
        )
        return tuple(parameters), return_type

    @staticmethod
    def _format_type_hint(hint: Any) -> str:
        """Format a type hint as a readable string.

        Parameters
        ----------
        hint : Any
            Type annotation

        Returns
        -------
        str
            Human-readable type string
        """
        if hint is None or hint is type(None):
            return "None"

        if isinstance(hint, str):
            return hint

        origin = get_origin(hint)
        args = get_args(hint)

        if origin is Union or origin is types.UnionType:
            non_none = [arg for arg in args if arg is not type(None)]
            if len(non_none) == 1 and len(args) == 2:
                return f"{DocExtractor._format_type_hint(non_none[0])} | None"
            return " | ".join(DocExtractor._format_type_hint(arg) for arg in args)

        if origin is Literal:
            values = ", ".join(repr(v) for v in args)
            return f"Literal[{values}]"

        if origin is not None:
            base = getattr(origin, "__name__", str(origin))
            if args:
                inner = ", ".join(DocExtractor._format_type_hint(arg) for arg in args)
                return f"{base}[{inner}]"
            return base

        if hasattr(hint, "__name__"):
            return hint.__name__

        return str(hint)
