"""Command-line interface for Resume Forge."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any

from resume_forge.config import get_settings
from resume_forge.models.document import Variant
from resume_forge.models.export import ExportError
from resume_forge.services.profile_defaults import normalize
from resume_forge.services.profile_transformers import profile_from_full_response
from resume_forge.templates import list_templates

logger = logging.getLogger(__name__)


def _load_profile(path: str | None, from_api: bool) -> dict[str, Any]:
    """Read a profile JSON file (``-`` or no path for stdin)."""
    if path is None or path == "-":
        raw = json.load(sys.stdin)
    else:
        raw = json.loads(Path(path).read_text(encoding="utf-8"))
    if not isinstance(raw, dict):
        msg = "Profile JSON must be an object"
        raise ValueError(msg)
    return profile_from_full_response(raw) if from_api else raw


def _write_output(text: str, output: str | None) -> None:
    if output is None or output == "-":
        sys.stdout.write(text)
        return
    Path(output).write_text(text, encoding="utf-8")
    print(f"✅ Wrote {output}")


# ---------------------------------------------------------------------------
# Subcommands


def _cmd_latex(args: argparse.Namespace) -> int:
    from resume_forge.services.resume_generator import generate_latex

    profile = normalize(_load_profile(args.profile, args.from_api))
    _write_output(generate_latex(profile, args.variant), args.output)
    return 0


def _cmd_preview(args: argparse.Namespace) -> int:
    from resume_forge.preview.renderer import render_preview, render_preview_surface

    profile = normalize(_load_profile(args.profile, args.from_api))
    render = render_preview_surface if args.surface else render_preview
    _write_output(render(profile, args.variant, args.scale), args.output)
    return 0


def _cmd_export(args: argparse.Namespace) -> int:
    from resume_forge.export.pipeline import ExportPipeline

    profile = normalize(_load_profile(args.profile, args.from_api))
    output_dir = Path(args.output_dir) if args.output_dir else get_settings().output_dir
    try:
        result = ExportPipeline().export(profile, args.variant, output_dir, scale=args.scale)
    except ExportError as exc:
        print(f"❌ Export failed: {exc}", file=sys.stderr)
        return 1
    print(f"✅ Exported {result.path} ({result.page_count} page(s))")
    return 0


def _cmd_serve(args: argparse.Namespace) -> int:
    from resume_forge.api.main import main as serve

    serve(host=args.host, port=args.port, reload=args.reload)
    return 0


# ---------------------------------------------------------------------------
# Parser


def _add_profile_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "profile",
        nargs="?",
        help="Profile JSON file (reads stdin when omitted or '-')",
    )
    parser.add_argument(
        "--variant",
        choices=list_templates(),
        default=Variant.ROW.value,
        help="Document layout (default: row)",
    )
    parser.add_argument(
        "--from-api",
        action="store_true",
        help="Treat the JSON as a full user-profile API response",
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="resume-forge",
        description="Generate LaTeX resumes, HTML previews and paginated PDF exports.",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command", required=True)

    latex = subparsers.add_parser("latex", help="Print or save the LaTeX source")
    _add_profile_arguments(latex)
    latex.add_argument("-o", "--output", help="Output .tex file (default: stdout)")
    latex.set_defaults(func=_cmd_latex)

    preview = subparsers.add_parser("preview", help="Render the HTML preview")
    _add_profile_arguments(preview)
    preview.add_argument("-o", "--output", help="Output .html file (default: stdout)")
    preview.add_argument("--scale", type=float, default=1.0, help="Preview scale (default: 1)")
    preview.add_argument(
        "--surface",
        action="store_true",
        help="Include the preview/LaTeX toggle and copy button",
    )
    preview.set_defaults(func=_cmd_preview)

    export = subparsers.add_parser("export", help="Export the preview to a paginated PDF")
    _add_profile_arguments(export)
    export.add_argument("-d", "--output-dir", help="Directory for the PDF")
    export.add_argument("--scale", type=float, default=1.0, help="Preview scale (default: 1)")
    export.set_defaults(func=_cmd_export)

    serve = subparsers.add_parser("serve", help="Run the HTTP API")
    serve.add_argument("--host", default="127.0.0.1")
    serve.add_argument("--port", type=int, default=8000)
    serve.add_argument("--reload", action="store_true")
    serve.set_defaults(func=_cmd_serve)

    return parser


def main(argv: list[str] | None = None) -> int:
    """Run the CLI.

    Returns:
        Exit code (0 for success, non-zero for failure).
    """
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )
    try:
        return args.func(args)
    except (OSError, ValueError) as exc:
        logger.debug("Command failed", exc_info=True)
        print(f"❌ Error: {exc}", file=sys.stderr)
        return 1
