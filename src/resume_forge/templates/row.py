"""Row-based single-column resume template.

Follows the RenderCV "classic" layout: every entry is a two-column row
with the label on the left and the date range flush right.  Single
column and plain text only, so applicant tracking systems parse it
cleanly.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from pylatex import Document, NoEscape, Package

from resume_forge.models.document import SectionKind, Variant
from resume_forge.templates.base import ResumeTemplate

if TYPE_CHECKING:
    from resume_forge.models.document import Entry, Header, ResumeDocument, Section

__all__ = ["RowResumeTemplate"]

# ---------------------------------------------------------------------------
# LaTeX preamble fragments
# ---------------------------------------------------------------------------

_GEOMETRY = "ignoreheadfoot, top=2 cm, bottom=2 cm, left=2 cm, right=2 cm, footskip=1.0 cm"

_PACKAGES: list[Package] = [
    Package("geometry", options=NoEscape(_GEOMETRY)),
    Package("titlesec"),
    Package("tabularx"),
    Package("array"),
    Package("xcolor", options=NoEscape("dvipsnames")),
    Package("enumitem"),
    Package("amsmath"),
    Package("calc"),
    Package("changepage"),
    Package("paracol"),
    Package("ifthen"),
    Package("needspace"),
    Package("iftex"),
]

_PREAMBLE_SETUP = r"""
\definecolor{primaryColor}{RGB}{0, 0, 0}
\ifPDFTeX
    \input{glyphtounicode}
    \pdfgentounicode=1
    \usepackage[T1]{fontenc}
    \usepackage[utf8]{inputenc}
    \usepackage{lmodern}
\fi
\usepackage{charter}
\raggedright
\pagestyle{empty}
\setcounter{secnumdepth}{0}
\setlength{\parindent}{0pt}
\setlength{\topskip}{0pt}
\setlength{\columnsep}{0.15cm}
\pagenumbering{gobble}
\titleformat{\section}{\needspace{4\baselineskip}\bfseries\large}{}{0pt}{}[\vspace{1pt}\titlerule]
\titlespacing{\section}{-1pt}{0.3 cm}{0.2 cm}
\renewcommand\labelitemi{$\vcenter{\hbox{\small$\bullet$}}$}
"""

_CUSTOM_ENVIRONMENTS = r"""
\newenvironment{highlights}{
    \begin{itemize}[
        topsep=0.10 cm,
        parsep=0.10 cm,
        partopsep=0pt,
        itemsep=0pt,
        leftmargin=0 cm + 10pt
    ]
}{
    \end{itemize}
}
\newenvironment{onecolentry}{
    \begin{adjustwidth}{0 cm + 0.00001 cm}{0 cm + 0.00001 cm}
}{
    \end{adjustwidth}
}
\newenvironment{twocolentry}[2][]{
    \onecolentry
    \def\secondColumn{#2}
    \setcolumnwidth{\fill, 4.5 cm}
    \begin{paracol}{2}
}{
    \switchcolumn \raggedleft \secondColumn
    \end{paracol}
    \endonecolentry
}
\newenvironment{header}{
    \setlength{\topsep}{0pt}\par\kern\topsep\centering\linespread{1.5}
}{
    \par\kern\topsep
}
\let\hrefWithoutArrow\href
"""

_AND_SEPARATOR = r"""\newcommand{\AND}{\unskip
    \cleaders\copy\ANDbox\hskip\wd\ANDbox
    \ignorespaces
}
\newsavebox\ANDbox
\sbox\ANDbox{$|$}"""

_HEADER_SEPARATOR = "%\n\\kern 5.0 pt%\n\\AND%\n\\kern 5.0 pt%\n"

_ENTRY_GAP = "\n\n\\vspace{0.2 cm}\n\n"


class RowResumeTemplate(ResumeTemplate):
    """Single-column resume built from two-column entry rows."""

    @property
    def name(self) -> str:
        return "Row-based (RenderCV classic)"

    @property
    def variant(self) -> Variant:
        return Variant.ROW

    # ------------------------------------------------------------------
    # public API
    # ------------------------------------------------------------------

    def build(self, document: ResumeDocument) -> Document:
        doc = self._create_document(document.header)
        doc.append(NoEscape(_AND_SEPARATOR))
        self._add_header(doc, document.header)

        titles = self.layout.titles
        for kind in self.layout.order:
            section = document.section(kind)
            if kind is SectionKind.SKILLS:
                body = self._skills(section)
            else:
                body = _ENTRY_GAP.join(self._entry(e) for e in section.entries)
            doc.append(NoEscape(f"\\section{{{titles[kind]}}}\n\n{body}"))
        return doc

    # ------------------------------------------------------------------
    # internal helpers
    # ------------------------------------------------------------------

    def _create_document(self, header: Header) -> Document:
        doc = Document(
            documentclass="article",
            document_options=["10pt", "letterpaper"],
            page_numbers=True,  # page style is set explicitly in the preamble
            indent=True,
            lmodern=False,
            textcomp=False,
            microtype=False,
            fontenc=None,
            inputenc=None,
        )
        doc.packages = [p for p in doc.packages if "lastpage" not in p.dumps()]

        for pkg in _PACKAGES:
            doc.packages.append(pkg)
        name = self.escape_latex(header.name)
        hyperref_options = (
            f"pdftitle={{{name}'s CV}}, pdfauthor={{{name}}}, "
            "colorlinks=true, urlcolor=primaryColor"
        )
        doc.packages.append(Package("hyperref", options=NoEscape(hyperref_options)))
        doc.packages.append(Package("bookmark"))
        doc.preamble.append(NoEscape(_PREAMBLE_SETUP))
        doc.preamble.append(NoEscape(_CUSTOM_ENVIRONMENTS))
        return doc

    # -- header ------------------------------------------------------------

    def _add_header(self, doc: Document, header: Header) -> None:
        esc = self.escape_latex
        items = [
            rf"\mbox{{\hrefWithoutArrow{{mailto:{self.escape_url(header.email)}}}"
            rf"{{{esc(header.email)}}}}}"
        ]
        for link in header.links:
            items.append(
                rf"\mbox{{\hrefWithoutArrow{{{self.escape_url(link.url)}}}"
                rf"{{{esc(link.display)}}}}}"
            )

        lines = [
            r"\begin{header}",
            rf"\fontsize{{25 pt}}{{25 pt}}\selectfont {esc(header.name)}",
            "",
            r"\vspace{5 pt}",
            "",
            r"\normalsize",
            _HEADER_SEPARATOR.join(items) + "%",
            r"\end{header}",
            "",
            r"\vspace{5 pt - 0.3 cm}",
        ]
        doc.append(NoEscape("\n".join(lines)))

    # -- entries -----------------------------------------------------------

    def _entry(self, entry: Entry) -> str:
        esc = self.escape_latex
        left = rf"\textbf{{{esc(entry.title)}}}"
        if entry.subtitle:
            left += f", {esc(entry.subtitle)}"
        if entry.location:
            left += f" -- {esc(entry.location)}"

        if entry.has_dates:
            right = self.format_date_range(entry.start_date, entry.end_date)
            if entry.link is not None:
                left += f" ({self.href(entry.link)})"
        elif entry.link is not None:
            right = self.href(entry.link)
        else:
            right = ""

        lines = [
            r"\begin{twocolentry}{",
            f"    {right}",
            "}",
            f"    {left}\\end{{twocolentry}}",
        ]
        if entry.bullets:
            lines += [
                "",
                r"\vspace{0.10 cm}",
                r"\begin{onecolentry}",
                r"    \begin{highlights}",
                *(rf"        \item {esc(b)}" for b in entry.bullets),
                r"    \end{highlights}",
                r"\end{onecolentry}",
            ]
        return "\n".join(lines)

    # -- skills ------------------------------------------------------------

    def _skills(self, section: Section) -> str:
        esc = self.escape_latex
        blocks = [
            "\n".join(
                [
                    r"\begin{onecolentry}",
                    rf"    \textbf{{{esc(group.label)}:}} {esc(', '.join(group.items))}",
                    r"\end{onecolentry}",
                ]
            )
            for group in section.skills
        ]
        return _ENTRY_GAP.join(blocks)
