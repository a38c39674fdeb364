"""HTML documentation generators.

Pages are assembled directly from extracted signatures and comment
fragments - no external templates needed. Members whose signature renders
empty (private members) are left out of every listing.
"""

from collections.abc import Callable
from typing import Any

from docreflect.core.config.models import RenderingConfig
from docreflect.core.docs.extractors import DocExtractor
from docreflect.core.docs.fragments import extract_fragment
from docreflect.core.docs.models import MemberHandle
from docreflect.core.docs.signatures import build_signature
from docreflect.core.logging import get_logger

logger = get_logger(__name__)

HR = "<hr/>"


class ReflectionDocGenerator:
    """Render class and member documentation as HTML fragments.

    Parameters
    ----------
    config : RenderingConfig | None
        Rendering options; defaults apply when omitted
    """

    def __init__(self, config: RenderingConfig | None = None) -> None:
        self.config = config or RenderingConfig()

    def _hr(self, with_hr: bool | None) -> str:
        if with_hr is None:
            with_hr = self.config.with_hr
        return HR if with_hr else ""

    def class_info(self, cls: type, with_hr: bool | None = None) -> str:
        """Return the ``description`` fragment of the class comment."""
        info = extract_fragment(DocExtractor.get_class_comment(cls), "description")
        return info + self._hr(with_hr)

    def class_documentation(self, cls: type, with_hr: bool | None = None) -> str:
        """Generate the documentation page of a class.

        The page holds the class description followed by one list item per
        public member: its signature, description and example.

        Parameters
        ----------
        cls : type
            Class to document
        with_hr : bool | None
            Append a horizontal rule; None uses the configured default

        Returns
        -------
        str
            HTML fragment
        """
        lines = [self.class_info(cls, with_hr=False), "<h2>Class API</h2>", "<ul>"]

        for handle in DocExtractor.describe_methods(cls):
            signature = build_signature(handle)
            if not signature:
                logger.debug("Skipping private member {name}", name=handle.name)
                continue

            parts = [
                f"<li><code>{signature}</code>",
                self.method_fragment(handle, "description"),
                self.method_fragment(handle, "example", "<pre>", "</pre>"),
            ]
            if self.config.include_exceptions:
                parts.append(self.method_fragment(handle, "exception", "<pre>", "</pre>"))
            parts.append("</li>")
            lines.append("".join(parts))

        lines.append("</ul>")
        return "\n".join(lines) + self._hr(with_hr)

    def method_signatures(self, cls: type, with_hr: bool | None = None) -> str:
        """Generate an unordered list of the public member signatures of a class."""
        lines = ["<ul>"]
        for handle in DocExtractor.describe_methods(cls):
            signature = build_signature(handle)
            if signature:
                lines.append(f"<li><code>{signature}</code></li>")
        lines.append("</ul>")
        return "\n".join(lines) + self._hr(with_hr)

    @staticmethod
    def method_info(handle: MemberHandle) -> str:
        """Return the signature line followed by the raw comment block."""
        return f"{build_signature(handle)}\n{handle.doc_comment or ''}"

    @staticmethod
    def method_fragment(handle: MemberHandle, name: str, start: str = "", end: str = "") -> str:
        """Return a named comment fragment wrapped in ``start``/``end`` markup."""
        return f"{start}{extract_fragment(handle.doc_comment, name)}{end}"

    @staticmethod
    def function_signature(func: Callable[..., Any]) -> str:
        """Return the signature of a free routine."""
        return build_signature(DocExtractor.describe_function(func))
