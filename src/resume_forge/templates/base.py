"""Abstract base class for the LaTeX resume variants."""

from __future__ import annotations

import re
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from resume_forge.models.document import Layout, get_layout

if TYPE_CHECKING:
    from pylatex import Document

    from resume_forge.models.document import Link, ResumeDocument, Variant

__all__ = ["ResumeTemplate", "escape_latex", "escape_url"]

# Stands in for a raw backslash until every other substitution has run, so
# the braces of ``\textbackslash{}`` are never escaped a second time.
_BACKSLASH_MARK = "\x00"

_LATEX_BRACES = re.compile(r"([{}])")
_LATEX_DOLLAR = re.compile(r"\$")
_LATEX_PREFIXED = re.compile(r"([%#&_])")
_LATEX_CARET = re.compile(r"\^")
_LATEX_TILDE = re.compile(r"~")

_URL_ENCODED = {"\\": "%5C", "{": "%7B", "}": "%7D"}
_URL_SPECIAL = re.compile(r"([%#])")


def escape_latex(text: str) -> str:
    r"""Escape LaTeX special characters in *text*.

    Handles ``\ { } $ % # & _ ^ ~`` in a fixed order: backslash, braces,
    dollar, ``% # & _``, caret, tilde.  Not idempotent: apply it exactly
    once per raw value and never to generated markup.
    """
    if not text:
        return ""
    result = text.replace(_BACKSLASH_MARK, "").replace("\\", _BACKSLASH_MARK)
    result = _LATEX_BRACES.sub(r"\\\1", result)
    result = _LATEX_DOLLAR.sub(r"\\$", result)
    result = _LATEX_PREFIXED.sub(r"\\\1", result)
    result = _LATEX_CARET.sub(r"\\textasciicircum{}", result)
    result = _LATEX_TILDE.sub(r"\\textasciitilde{}", result)
    return result.replace(_BACKSLASH_MARK, r"\textbackslash{}")


def escape_url(url: str) -> str:
    r"""Make *url* safe as the target argument of ``\href``.

    Backslashes and braces are percent-encoded; ``%`` and ``#`` are
    prefixed with a backslash as hyperref expects.
    """
    if not url:
        return ""
    result = "".join(_URL_ENCODED.get(ch, ch) for ch in url)
    return _URL_SPECIAL.sub(r"\\\1", result)


class ResumeTemplate(ABC):
    """Interface that every LaTeX variant implements."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable template name."""

    @property
    @abstractmethod
    def variant(self) -> Variant:
        """The layout this template renders."""

    @abstractmethod
    def build(self, document: ResumeDocument) -> Document:
        """Construct a PyLaTeX ``Document`` from *document*."""

    def render(self, document: ResumeDocument) -> str:
        """Return the complete LaTeX source for *document*."""
        return self.build(document).dumps()

    @property
    def layout(self) -> Layout:
        return get_layout(self.variant)

    # ------------------------------------------------------------------
    # Shared helpers available to all templates
    # ------------------------------------------------------------------

    escape_latex = staticmethod(escape_latex)
    escape_url = staticmethod(escape_url)

    @staticmethod
    def format_date_range(start: str, end: str, separator: str = " -- ") -> str:
        """Return an escaped date range like ``Aug 2018 -- May 2021``.

        A start without an end reads as ongoing (``-- Present``).
        """
        start_str = escape_latex(start)
        end_str = escape_latex(end) if end else ("Present" if start else "")
        if start_str and end_str:
            return f"{start_str}{separator}{end_str}"
        return start_str or end_str

    @staticmethod
    def href(link: Link, fmt: str = "{}") -> str:
        r"""Return ``\href{url}{display}`` with the display text wrapped in *fmt*."""
        display = fmt.format(escape_latex(link.display))
        return rf"\href{{{escape_url(link.url)}}}{{{display}}}"
