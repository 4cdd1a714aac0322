"""Stylesheets for the HTML preview and its export capture.

The on-screen stylesheet is written against CSS custom properties.  The
rasterizer cannot be trusted to resolve those for an off-screen subtree,
so every content class also has a literal override that is injected into
the isolation container before capture.  A class without an override
silently loses its styling in the exported file, which is why
:func:`missing_overrides` exists.
"""

from __future__ import annotations

from html.parser import HTMLParser

__all__ = [
    "EXPORT_CLASS_OVERRIDES",
    "PREVIEW_CSS",
    "build_override_css",
    "collect_classes",
    "missing_overrides",
]

PREVIEW_CSS = """
:root {
  --rf-text: #111827;
  --rf-muted: #4b5563;
  --rf-accent: #1d4ed8;
  --rf-rule: #111827;
  --rf-gap: 8px;
  --rf-font: "Charter", "Georgia", serif;
  --rf-base-size: 13px;
}
body { margin: 0; background: #f3f4f6; }
.rf-scale { transform-origin: top left; }
.rf-page {
  box-sizing: border-box; width: 794px; padding: 48px 56px;
  background: #ffffff; color: var(--rf-text);
  font-family: var(--rf-font); font-size: var(--rf-base-size); line-height: 1.4;
}
.rf-header { text-align: center; margin-bottom: calc(var(--rf-gap) * 2); }
.rf-name { font-size: 28px; font-weight: 700; margin: 0 0 var(--rf-gap); }
.rf-contact { display: flex; flex-wrap: wrap; justify-content: center; gap: var(--rf-gap); }
.rf-contact-item { color: var(--rf-muted); }
.rf-columns { display: grid; grid-template-columns: 60fr 33fr; column-gap: 7%; }
.rf-column { min-width: 0; }
.rf-section { margin-bottom: calc(var(--rf-gap) * 1.5); }
.rf-section-title {
  font-size: 16px; font-weight: 700; margin: 0 0 var(--rf-gap);
  border-bottom: 1px solid var(--rf-rule); padding-bottom: 2px;
}
.rf-entry { margin-bottom: var(--rf-gap); }
.rf-entry-row { display: flex; justify-content: space-between; gap: var(--rf-gap); }
.rf-entry-title { font-weight: 700; }
.rf-entry-subtitle { font-style: italic; }
.rf-entry-meta { color: var(--rf-muted); white-space: nowrap; }
.rf-entry-location { color: var(--rf-muted); }
.rf-bullets { margin: 4px 0 0; padding-left: 18px; }
.rf-bullet { margin: 0 0 2px; overflow-wrap: anywhere; }
.rf-skill-group { margin: 0 0 4px; }
.rf-skill-label { font-weight: 700; }
.rf-skill-items { overflow-wrap: anywhere; }
.rf-link { color: var(--rf-accent); text-decoration: none; overflow-wrap: anywhere; }
.rf-link-list { list-style: none; margin: 0; padding: 0; }
.rf-link-item { margin: 0 0 2px; }
"""

# Literal restatement of every content class above, without custom
# properties or shorthand that depends on inherited computed values.
EXPORT_CLASS_OVERRIDES: dict[str, str] = {
    "rf-page": (
        "box-sizing: border-box; width: 100%; padding: 48px 56px; background: #ffffff; "
        "color: #111827; font-family: Charter, Georgia, serif; font-size: 13px; "
        "line-height: 18px; transform: none;"
    ),
    "rf-header": "text-align: center; margin: 0 0 16px 0;",
    "rf-name": "font-size: 28px; line-height: 34px; font-weight: 700; margin: 0 0 8px 0;",
    "rf-contact": (
        "display: flex; flex-wrap: wrap; justify-content: center; column-gap: 8px; row-gap: 8px;"
    ),
    "rf-contact-item": "color: #4b5563; font-size: 13px; line-height: 18px;",
    "rf-columns": (
        "display: grid; grid-template-columns: 60fr 33fr; column-gap: 7%; row-gap: 0px;"
    ),
    "rf-column": "min-width: 0px;",
    "rf-section": "margin: 0 0 12px 0;",
    "rf-section-title": (
        "font-size: 16px; line-height: 22px; font-weight: 700; margin: 0 0 8px 0; "
        "padding: 0 0 2px 0; border-bottom: 1px solid #111827; color: #111827;"
    ),
    "rf-entry": "margin: 0 0 8px 0;",
    "rf-entry-row": "display: flex; justify-content: space-between; column-gap: 8px;",
    "rf-entry-title": "font-weight: 700; color: #111827;",
    "rf-entry-subtitle": "font-style: italic; color: #111827;",
    "rf-entry-meta": "color: #4b5563; white-space: nowrap; font-size: 13px;",
    "rf-entry-location": "color: #4b5563; font-size: 13px;",
    "rf-bullets": "margin: 4px 0 0 0; padding: 0 0 0 18px; list-style-type: disc;",
    "rf-bullet": (
        "margin: 0 0 2px 0; font-size: 13px; line-height: 18px; overflow-wrap: anywhere; "
        "word-break: normal;"
    ),
    "rf-skill-group": "margin: 0 0 4px 0; font-size: 13px; line-height: 18px;",
    "rf-skill-label": "font-weight: 700; color: #111827;",
    "rf-skill-items": "overflow-wrap: anywhere; color: #111827;",
    "rf-link": "color: #1d4ed8; text-decoration: none; overflow-wrap: anywhere;",
    "rf-link-list": "list-style-type: none; margin: 0; padding: 0;",
    "rf-link-item": "margin: 0 0 2px 0; font-size: 13px; line-height: 18px;",
    "rf-variant-row": "display: block;",
    "rf-variant-deedy": "display: block;",
}


def build_override_css(scope: str) -> str:
    """Return the literal override rules, each selector prefixed by *scope*."""
    return "\n".join(
        f"{scope} .{cls} {{ {rules} }}" for cls, rules in EXPORT_CLASS_OVERRIDES.items()
    )


class _ClassCollector(HTMLParser):
    def __init__(self) -> None:
        super().__init__()
        self.classes: set[str] = set()

    def handle_starttag(self, tag: str, attrs: list[tuple[str, str | None]]) -> None:
        for name, value in attrs:
            if name == "class" and value:
                self.classes.update(value.split())


def collect_classes(html: str) -> set[str]:
    """Return every class name used in *html*."""
    collector = _ClassCollector()
    collector.feed(html)
    collector.close()
    return collector.classes


def missing_overrides(html: str) -> list[str]:
    """Return the sorted class names in *html* that lack an export override."""
    return sorted(collect_classes(html) - EXPORT_CLASS_OVERRIDES.keys())
