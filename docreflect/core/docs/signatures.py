"""Canonical signature rendering from member descriptors.

A signature reads ``<modifiers> <return type> <Type>::<name>(<params>) throws
<exception>`` and is rebuilt from the descriptor on every call. Metadata that
introspection cannot provide (return type, exceptions) is backfilled from the
member's structured comment; metadata that cannot be backfilled is left out.

Examples
--------
>>> from docreflect.core.docs.models import MemberHandle, ParameterHandle
>>> member = MemberHandle(
...     name="read",
...     declaring_type="Service",
...     modifiers=("public",),
...     parameters=(ParameterHandle(name="id"),),
...     return_type="string",
... )
>>> build_signature(member)
'public string Service::read( $id)'
"""

from typing import Any

from docreflect.core.docs.fragments import find_fragment
from docreflect.core.docs.models import FragmentFound, MemberHandle, ParameterHandle
from docreflect.core.exceptions import DefaultValueUnavailableError
from docreflect.core.logging import get_logger

logger = get_logger(__name__)

# abstract/final, then visibility, then static
MODIFIER_ORDER = ("abstract", "final", "public", "protected", "private", "static")

PRIVATE = "private"


def render_modifiers(member: MemberHandle) -> str:
    """Render the modifier keywords of a bound member in canonical order.

    Keywords outside the known vocabulary are kept, after the known ones, in
    the order the descriptor lists them. Free routines render nothing.
    """
    if not member.is_bound:
        return ""
    known = [keyword for keyword in MODIFIER_ORDER if keyword in member.modifiers]
    extra = [keyword for keyword in member.modifiers if keyword not in MODIFIER_ORDER]
    return " ".join(known + extra)


def _comment_fragment(member: MemberHandle, fragment_name: str) -> str | None:
    result = find_fragment(member.doc_comment, fragment_name)
    if isinstance(result, FragmentFound):
        return result.content
    return None


def _render_return_type(member: MemberHandle) -> str:
    if member.return_type:
        return member.return_type
    if not member.is_bound:
        return ""
    return _comment_fragment(member, "return-type") or ""


def _render_throws(member: MemberHandle) -> str:
    if not member.is_bound:
        return ""
    exception = _comment_fragment(member, "exception")
    return f" throws {exception}" if exception else ""


def render_default(parameter: ParameterHandle, value: Any) -> str:
    """Render the ``= <default>`` suffix for a readable default value.

    Empty strings render as ``""`` but every other falsy non-boolean value
    renders as ``false``.
    """
    if value is None:
        return " = NULL"

    is_bool = isinstance(value, bool) or parameter.type_name == "bool"
    if is_bool and value:
        return " = true"
    if is_bool and not value and value != "":
        return " = false"
    if isinstance(value, str) and value == "":
        return ' = ""'
    if not value:
        return " = false"
    return f" = {value}"


def render_parameter(member: MemberHandle, parameter: ParameterHandle) -> str:
    """Render one parameter, including its leading separator space."""
    if parameter.type_name:
        text = f" {parameter.type_name} ${parameter.name}"
    else:
        text = f" ${parameter.name}"

    # Defaults are only looked up for members of a declaring type
    if not (member.is_bound and parameter.is_optional):
        return text

    try:
        value = parameter.read_default()
    except DefaultValueUnavailableError as e:
        logger.debug("Omitting default of {member}: {error}", member=member.name, error=e)
        return text
    return text + render_default(parameter, value)


def build_signature(member: MemberHandle) -> str:
    """Build the canonical signature string of a routine.

    Parameters
    ----------
    member : MemberHandle
        Descriptor of a bound method or free routine

    Returns
    -------
    str
        The signature, or an empty string for private members so that
        listings can skip them
    """
    modifiers = render_modifiers(member)
    if PRIVATE in modifiers.split():
        return ""

    if member.is_bound:
        qualified_name = f"{member.declaring_type}::{member.name}"
    else:
        qualified_name = member.name

    head = " ".join(
        segment
        for segment in (modifiers, _render_return_type(member), qualified_name)
        if segment
    )
    params = ",".join(render_parameter(member, parameter) for parameter in member.parameters)

    return f"{head}({params}){_render_throws(member)}".strip()
