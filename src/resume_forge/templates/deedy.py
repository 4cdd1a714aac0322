"""Deedy two-column resume template.

Targets the ``deedy-resume-reversed`` document class (XeLaTeX): a
centered name banner across the full width, then two independently
flowing minipage columns.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from pylatex import Document, NoEscape, Package

from resume_forge.models.document import SectionKind, Variant
from resume_forge.templates.base import ResumeTemplate

if TYPE_CHECKING:
    from resume_forge.models.document import Entry, Header, ResumeDocument, Section

__all__ = ["DeedyResumeTemplate"]

_PREAMBLE_SETUP = r"""
\pagestyle{fancy}
\fancyhf{}
"""

_BOLD = r"\bf {}"

# Width of each column as a fraction of \textwidth, left to right.
_COLUMN_WIDTHS = ("0.60", "0.33")


class DeedyResumeTemplate(ResumeTemplate):
    """Deedy-Resume-Reversed: experience on the left, the rest on the right."""

    @property
    def name(self) -> str:
        return "Deedy (two-column)"

    @property
    def variant(self) -> Variant:
        return Variant.DEEDY

    def build(self, document: ResumeDocument) -> Document:
        doc = Document(
            documentclass=NoEscape("deedy-resume-reversed"),
            page_numbers=True,
            indent=True,
            lmodern=False,
            textcomp=False,
            microtype=False,
            fontenc=None,
            inputenc=None,
        )
        doc.packages = [p for p in doc.packages if "lastpage" not in p.dumps()]
        doc.packages.append(Package("fancyhdr"))
        doc.preamble.append(NoEscape(_PREAMBLE_SETUP))

        doc.append(NoEscape(self._name_section(document.header)))

        columns: list[str] = []
        titles = self.layout.titles
        for width, kinds in zip(_COLUMN_WIDTHS, self.layout.columns, strict=True):
            parts = [rf"\begin{{minipage}}[t]{{{width}\textwidth}}"]
            for kind in kinds:
                parts.append("")
                parts.append(rf"\section{{{titles[kind]}}}")
                parts.append(self._section_body(document.section(kind)))
            parts.append("")
            parts.append(r"\end{minipage}")
            columns.append("\n".join(parts))
        doc.append(NoEscape("\n\\hfill\n".join(columns)))
        return doc

    # ------------------------------------------------------------------
    # internal helpers
    # ------------------------------------------------------------------

    def _name_section(self, header: Header) -> str:
        esc = self.escape_latex
        details = [rf"\href{{mailto:{self.escape_url(header.email)}}}{{{esc(header.email)}}}"]
        details.extend(self.href(link) for link in header.links)
        return rf"\namesection{{{esc(header.name)}}}{{" + "\n" + " | ".join(details) + "\n}"

    def _section_body(self, section: Section) -> str:
        if section.kind is SectionKind.SKILLS:
            return self._skills(section)
        if section.kind is SectionKind.LINKS:
            return self._links(section)
        if section.kind is SectionKind.EDUCATION:
            return "\n\n".join(self._entry(e, r"\subsection") for e in section.entries)
        return "\n\n".join(self._entry(e, r"\runsubsection") for e in section.entries)

    def _entry(self, entry: Entry, heading: str) -> str:
        esc = self.escape_latex
        lines = [f"{heading}{{{esc(entry.title)}}}"]
        if entry.subtitle:
            prefix = "| " if heading == r"\runsubsection" else ""
            lines.append(rf"\descript{{{prefix}{esc(entry.subtitle)}}}")

        where = [
            part
            for part in (
                self.format_date_range(entry.start_date, entry.end_date, " – "),
                esc(entry.location),
            )
            if part
        ]
        if where:
            lines.append(rf"\location{{{' | '.join(where)}}}")
        if entry.link is not None:
            lines.append(self.href(entry.link, _BOLD) + r" \\")

        if entry.bullets:
            lines.append(r"\begin{tightemize}")
            lines.extend(rf"\item {esc(b)}" for b in entry.bullets)
            lines.append(r"\end{tightemize}")
        lines.append(r"\sectionsep")
        return "\n".join(lines)

    def _skills(self, section: Section) -> str:
        esc = self.escape_latex
        blocks = []
        for group in section.skills:
            items = r" \textbullet{} ".join(esc(item) for item in group.items)
            blocks.append(rf"\subsection{{{esc(group.label)}}}" + f"\n{items} \\\\\n\\sectionsep")
        return "\n\n".join(blocks)

    def _links(self, section: Section) -> str:
        lines = [
            f"{self.escape_latex(link.label)}:// {self.href(link, _BOLD)} \\\\"
            for link in section.links
        ]
        lines.append(r"\sectionsep")
        return "\n".join(lines)
