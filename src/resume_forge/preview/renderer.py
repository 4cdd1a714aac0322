"""HTML preview of a resume, rendered with Jinja2.

The preview consumes the same :class:`ResumeDocument` and variant layout
as the LaTeX templates, so section order and conditional rendering stay
in step with the generated source.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from jinja2 import BaseLoader, Environment
from markupsafe import Markup

from resume_forge.models.document import Entry, Variant, get_layout, parse_variant
from resume_forge.preview.styles import PREVIEW_CSS
from resume_forge.services.resume_generator import (
    ProfileInput,
    build_resume_document,
    generate_latex,
    to_profile,
)

if TYPE_CHECKING:
    from resume_forge.models.document import ResumeDocument

__all__ = [
    "CONTENT_NODE_ID",
    "render_preview",
    "render_preview_surface",
    "render_resume_html",
]

logger = logging.getLogger(__name__)

CONTENT_NODE_ID = "resume-content"

_SAFE_SCHEMES = ("http://", "https://", "mailto:")

_SKILL_SEPARATORS = {Variant.ROW: ", ", Variant.DEEDY: " • "}

_RESUME_TEMPLATE = """\
{%- macro entry_block(entry) -%}
<div class="rf-entry">
  <div class="rf-entry-row">
    <div>
      <span class="rf-entry-title">{{ entry.title }}</span>
      {%- if entry.subtitle %}, <span class="rf-entry-subtitle">{{ entry.subtitle }}</span>{% endif %}
      {%- if entry.location %} <span class="rf-entry-location">{{ entry.location }}</span>{% endif %}
    </div>
    {%- if entry.has_dates %}
    <span class="rf-entry-meta">{{ entry | date_range }}</span>
    {%- elif entry.link %}
    <a class="rf-link rf-entry-meta" href="{{ entry.link.url | safe_href }}">{{ entry.link.display }}</a>
    {%- endif %}
  </div>
  {%- if entry.has_dates and entry.link %}
  <a class="rf-link" href="{{ entry.link.url | safe_href }}">{{ entry.link.display }}</a>
  {%- endif %}
  {%- if entry.bullets %}
  <ul class="rf-bullets">
    {%- for bullet in entry.bullets %}
    <li class="rf-bullet">{{ bullet }}</li>
    {%- endfor %}
  </ul>
  {%- endif %}
</div>
{%- endmacro -%}

{%- macro section_block(title, section, skill_separator) -%}
<section class="rf-section" data-section="{{ section.kind.value }}">
  <h2 class="rf-section-title">{{ title }}</h2>
  {%- if section.kind.value == "skills" %}
  {%- for group in section.skills %}
  <p class="rf-skill-group"><span class="rf-skill-label">{{ group.label }}:</span> <span class="rf-skill-items">{{ group.items | join(skill_separator) }}</span></p>
  {%- endfor %}
  {%- elif section.kind.value == "links" %}
  <ul class="rf-link-list">
    {%- for link in section.links %}
    <li class="rf-link-item">{{ link.label }}: <a class="rf-link" href="{{ link.url | safe_href }}">{{ link.display }}</a></li>
    {%- endfor %}
  </ul>
  {%- else %}
  {%- for entry in section.entries %}
  {{ entry_block(entry) }}
  {%- endfor %}
  {%- endif %}
</section>
{%- endmacro -%}

<div id="{{ node_id }}" class="rf-page rf-variant-{{ variant }}">
  <header class="rf-header">
    <h1 class="rf-name">{{ header.name }}</h1>
    <div class="rf-contact">
      <a class="rf-link rf-contact-item" href="mailto:{{ header.email }}">{{ header.email }}</a>
      {%- for link in header.links %}
      <a class="rf-link rf-contact-item" href="{{ link.url | safe_href }}">{{ link.display }}</a>
      {%- endfor %}
    </div>
  </header>
  {%- if columns | length > 1 %}
  <div class="rf-columns">
    {%- for column in columns %}
    <div class="rf-column">
      {%- for title, section in column %}
      {{ section_block(title, section, skill_separator) }}
      {%- endfor %}
    </div>
    {%- endfor %}
  </div>
  {%- else %}
  {%- for title, section in columns[0] %}
  {{ section_block(title, section, skill_separator) }}
  {%- endfor %}
  {%- endif %}
</div>
"""

_PAGE_TEMPLATE = """\
<!DOCTYPE html>
<html lang="en">
<head>
<meta charset="utf-8">
<title>{{ title }}</title>
<style>{{ css }}</style>
</head>
<body>
<div class="rf-scale" style="transform: scale({{ scale }}); width: {{ page_width }}px;">
{{ content }}
</div>
</body>
</html>
"""

_SURFACE_TEMPLATE = """\
<!DOCTYPE html>
<html lang="en">
<head>
<meta charset="utf-8">
<title>{{ title }}</title>
<style>{{ css }}
.rf-toolbar { display: flex; gap: 8px; padding: 12px; background: #ffffff; border-bottom: 1px solid #e5e7eb; }
.rf-toolbar button[aria-pressed="true"] { font-weight: 700; }
.rf-source { margin: 0; padding: 16px; white-space: pre-wrap; font-family: monospace; font-size: 12px; }
[hidden] { display: none !important; }
</style>
</head>
<body>
<div class="rf-toolbar" role="toolbar">
  <button type="button" id="show-preview" aria-pressed="true">Preview</button>
  <button type="button" id="show-source" aria-pressed="false">LaTeX</button>
  <button type="button" id="copy-source">Copy LaTeX</button>
  <span id="copy-status" role="status"></span>
</div>
<main>
  <div id="preview-view" class="rf-scale" style="transform: scale({{ scale }}); width: {{ page_width }}px;">
  {{ content }}
  </div>
  <pre id="source-view" class="rf-source" hidden>{{ source }}</pre>
</main>
<script>
(function () {
  var preview = document.getElementById("preview-view");
  var source = document.getElementById("source-view");
  var showPreview = document.getElementById("show-preview");
  var showSource = document.getElementById("show-source");
  var status = document.getElementById("copy-status");
  function show(sourceVisible) {
    source.hidden = !sourceVisible;
    preview.hidden = sourceVisible;
    showSource.setAttribute("aria-pressed", String(sourceVisible));
    showPreview.setAttribute("aria-pressed", String(!sourceVisible));
  }
  showPreview.addEventListener("click", function () { show(false); });
  showSource.addEventListener("click", function () { show(true); });
  document.getElementById("copy-source").addEventListener("click", function () {
    navigator.clipboard.writeText(source.textContent).then(
      function () { status.textContent = "Copied"; },
      function () { status.textContent = "Copy failed"; }
    );
  });
})();
</script>
</body>
</html>
"""


def _date_range(entry: Entry) -> str:
    start, end = entry.start_date, entry.end_date
    if start and not end:
        end = "Present"
    return " – ".join(part for part in (start, end) if part)


def _safe_href(url: str) -> str:
    """Return *url* if it uses a safe scheme, ``"#"`` otherwise."""
    if url.lower().startswith(_SAFE_SCHEMES):
        return url
    return "#"


def _environment() -> Environment:
    env = Environment(loader=BaseLoader(), autoescape=True)
    env.filters["date_range"] = _date_range
    env.filters["safe_href"] = _safe_href
    return env


_ENV = _environment()
_RESUME = _ENV.from_string(_RESUME_TEMPLATE)
_PAGE = _ENV.from_string(_PAGE_TEMPLATE)
_SURFACE = _ENV.from_string(_SURFACE_TEMPLATE)

# Unscaled width of the content node in CSS pixels.
PAGE_WIDTH_PX = 794


def _check_scale(scale: float) -> float:
    if scale <= 0:
        msg = f"Preview scale must be positive, got {scale!r}"
        raise ValueError(msg)
    return scale


def render_resume_html(document: ResumeDocument, variant: Variant | str) -> Markup:
    """Render the unscaled content node for *document* in *variant*.

    Raises:
        ValueError: If *variant* is unknown.
    """
    variant = parse_variant(variant)
    layout = get_layout(variant)
    columns = [
        [(layout.titles[kind], document.section(kind)) for kind in column]
        for column in layout.columns
    ]
    html = _RESUME.render(
        node_id=CONTENT_NODE_ID,
        variant=variant.value,
        header=document.header,
        columns=columns,
        skill_separator=_SKILL_SEPARATORS[variant],
    )
    return Markup(html)


def render_preview(
    profile: ProfileInput,
    variant: Variant | str = Variant.ROW,
    scale: float = 1.0,
) -> str:
    """Return a standalone HTML page previewing *profile*.

    *scale* only sizes the on-screen wrapper; the ``#resume-content`` node
    inside it is identical for every scale.
    """
    _check_scale(scale)
    document = build_resume_document(profile)
    content = render_resume_html(document, variant)
    return _PAGE.render(
        title=f"{document.header.name} - Resume",
        css=Markup(PREVIEW_CSS),
        scale=scale,
        page_width=PAGE_WIDTH_PX,
        content=content,
    )


def render_preview_surface(
    profile: ProfileInput,
    variant: Variant | str = Variant.ROW,
    scale: float = 1.0,
) -> str:
    """Return the interactive page that toggles between preview and LaTeX source.

    The page carries a copy-to-clipboard button for the source text.
    """
    _check_scale(scale)
    aggregate = to_profile(profile)
    document = build_resume_document(aggregate)
    source = generate_latex(aggregate, variant)
    logger.debug("Rendering preview surface for %s", parse_variant(variant).value)
    return _SURFACE.render(
        title=f"{document.header.name} - Resume",
        css=Markup(PREVIEW_CSS),
        scale=scale,
        page_width=PAGE_WIDTH_PX,
        content=render_resume_html(document, variant),
        source=source,
    )
