"""Fragment extraction from structured comment blocks.

A comment block is free-form prose followed by named XML elements::

    /**
    Returns the class name.
    <documentation><description><p>Returns the name.</p></description>
    <return-type>string</return-type>
    </documentation>
    */

The block only becomes XML once the prose before the first ``<`` and the
``*/`` terminator are removed. Anything that still fails to parse is treated
as "no fragments available".

The parse only checks well-formedness and records where each element starts
and ends. A located fragment is returned exactly as written in the comment:
self-closing tags, CDATA sections, attribute quoting and inner comments are
left untouched.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from xml.parsers import expat

from docreflect.core.docs.models import (
    INFORMATION_NOT_AVAILABLE,
    FragmentFound,
    FragmentResult,
    FragmentUnavailable,
)
from docreflect.core.logging import get_logger

logger = get_logger(__name__)

COMMENT_END = "*/"

_ROOT_TAG = "docreflect-root"


@dataclass(slots=True)
class _ElementSpan:
    """Byte range of one element in the wrapped comment text."""

    tag: str
    start: int
    end: int = -1
    has_content: bool = False
    children: list[_ElementSpan] = field(default_factory=list)


def _strip_comment(raw_comment: str) -> str:
    """Drop the prose before the first ``<`` and every comment terminator."""
    return raw_comment[raw_comment.index("<") :].replace(COMMENT_END, "")


def _parse_spans(data: bytes) -> _ElementSpan:
    """Parse ``data`` and return the span tree of its root element.

    Raises
    ------
    expat.ExpatError
        If ``data`` is not well-formed
    """
    parser = expat.ParserCreate()
    stack: list[_ElementSpan] = []
    roots: list[_ElementSpan] = []

    def start_element(tag: str, attrs: dict[str, str]) -> None:
        span = _ElementSpan(tag=tag, start=parser.CurrentByteIndex)
        if stack:
            stack[-1].has_content = True
            stack[-1].children.append(span)
        else:
            roots.append(span)
        stack.append(span)

    def character_data(text: str) -> None:
        stack[-1].has_content = True

    def end_element(tag: str) -> None:
        span = stack.pop()
        index = parser.CurrentByteIndex
        # Empty-element tags report their end just past "/>"
        if not span.has_content and data[index - 2 : index] == b"/>":
            span.end = index
        else:
            span.end = data.index(b">", index) + 1

    parser.StartElementHandler = start_element
    parser.EndElementHandler = end_element
    parser.CharacterDataHandler = character_data
    parser.Parse(data, True)
    return roots[0]


def _first_child(parent: _ElementSpan, fragment_name: str) -> _ElementSpan | None:
    for child in parent.children:
        if child.tag == fragment_name:
            return child
    return None


def find_fragment(raw_comment: str | None, fragment_name: str) -> FragmentResult:
    """Locate a named fragment in a raw comment block.

    Parameters
    ----------
    raw_comment : str | None
        Comment text as exposed by introspection
    fragment_name : str
        Tag name of the fragment (e.g. "description", "exception")

    Returns
    -------
    FragmentResult
        FragmentFound with the element's original markup, or FragmentUnavailable
    """
    if not raw_comment or "<" not in raw_comment:
        return FragmentUnavailable()

    data = f"<{_ROOT_TAG}>{_strip_comment(raw_comment)}</{_ROOT_TAG}>".encode()
    try:
        root = _parse_spans(data)
    except expat.ExpatError as e:
        logger.debug(
            "Unparsable comment block while looking for <{name}>: {error}",
            name=fragment_name,
            error=e,
        )
        return FragmentUnavailable()

    match = _first_child(root, fragment_name)

    # Fragments are conventionally grouped under a single container element
    if match is None and len(root.children) == 1:
        match = _first_child(root.children[0], fragment_name)

    if match is None:
        return FragmentUnavailable()
    return FragmentFound(content=data[match.start : match.end].decode())


def extract_fragment(raw_comment: str | None, fragment_name: str) -> str:
    """Return a fragment's markup or ``INFORMATION_NOT_AVAILABLE``.

    Malformed and absent comments are indistinguishable here: every failure
    yields the same sentinel string.
    """
    result = find_fragment(raw_comment, fragment_name)
    if isinstance(result, FragmentFound):
        return result.content
    return INFORMATION_NOT_AVAILABLE
