"""Data models for reflective documentation.

These Pydantic models are the pre-resolved metadata descriptors consumed by
the signature builder and the fragment extractor. They are built ahead of
time by the metadata source in :mod:`docreflect.core.docs.extractors` and
never mutated afterwards.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from docreflect.core.exceptions import DefaultValueUnavailableError

#: Text returned in place of a fragment that is absent or unreadable.
INFORMATION_NOT_AVAILABLE = "Information not available"


class ParameterHandle(BaseModel):
    """Metadata for a single routine parameter.

    Attributes
    ----------
    name : str
        Parameter name
    type_name : str | None
        Declared type rendered as text, None when undeclared
    is_optional : bool
        Whether the declaration carries a default value
    default : Any
        The literal default value, meaningful only when ``default_available``
    default_available : bool
        False when the routine declares a default that cannot be read
        (natively implemented routines)
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    name: str
    type_name: str | None = None
    is_optional: bool = False
    default: Any = None
    default_available: bool = True

    def read_default(self) -> Any:
        """Return the literal default value.

        Raises
        ------
        DefaultValueUnavailableError
            If the parameter is required or its default cannot be read
        """
        if not self.is_optional or not self.default_available:
            raise DefaultValueUnavailableError(self.name)
        return self.default


class MemberHandle(BaseModel):
    """Descriptor of an introspectable routine.

    Attributes
    ----------
    name : str
        Routine name
    declaring_type : str | None
        Name of the class that declares the member, None for free routines
    modifiers : tuple[str, ...]
        Modifier keywords (visibility, static, abstract, final)
    parameters : tuple[ParameterHandle, ...]
        Parameters in declaration order
    return_type : str | None
        Declared return type, None when undeclared
    doc_comment : str | None
        Raw comment block attached to the definition
    """

    model_config = ConfigDict(frozen=True)

    name: str
    declaring_type: str | None = None
    modifiers: tuple[str, ...] = ()
    parameters: tuple[ParameterHandle, ...] = Field(default_factory=tuple)
    return_type: str | None = None
    doc_comment: str | None = None

    @property
    def is_bound(self) -> bool:
        """Whether the member belongs to a declaring type."""
        return self.declaring_type is not None


class FragmentFound(BaseModel):
    """A fragment located in a comment block, with its XML serialization."""

    model_config = ConfigDict(frozen=True)

    content: str


class FragmentUnavailable(BaseModel):
    """No fragment: the comment is absent, malformed, or lacks the element."""

    model_config = ConfigDict(frozen=True)


FragmentResult = FragmentFound | FragmentUnavailable
