"""Tests for the command-line interface."""

from __future__ import annotations

import io
import json

import pytest
from conftest import FakeRasterizer

from resume_forge.cli import build_parser, main
from resume_forge.config import Settings
from resume_forge.export import pipeline as pipeline_module
from resume_forge.models.export import RasterizationError


@pytest.fixture
def profile_file(tmp_path, partial_profile):
    path = tmp_path / "profile.json"
    path.write_text(json.dumps(partial_profile), encoding="utf-8")
    return path


@pytest.fixture
def fake_pipeline(monkeypatch, tmp_path):
    """Make ``export`` build pipelines around a fake rasterizer."""
    real = pipeline_module.ExportPipeline
    rasterizer = FakeRasterizer()

    def factory():
        return real(rasterizer, Settings(output_dir=tmp_path / "exports"))

    monkeypatch.setattr(pipeline_module, "ExportPipeline", factory)
    return rasterizer


class TestParser:
    def test_variant_choices(self) -> None:
        with pytest.raises(SystemExit):
            build_parser().parse_args(["latex", "--variant", "modern"])

    def test_command_is_required(self) -> None:
        with pytest.raises(SystemExit):
            build_parser().parse_args([])


class TestLatexCommand:
    def test_prints_source(self, profile_file, capsys) -> None:
        assert main(["latex", str(profile_file)]) == 0
        out = capsys.readouterr().out
        assert r"\begin{twocolentry}" in out
        assert r"Analytical Engines \& Co" in out

    def test_writes_file(self, profile_file, tmp_path, capsys) -> None:
        target = tmp_path / "resume.tex"
        assert main(["latex", str(profile_file), "--variant", "deedy", "-o", str(target)]) == 0
        assert r"\namesection{Ada Lovelace}" in target.read_text(encoding="utf-8")
        assert "Wrote" in capsys.readouterr().out

    def test_reads_stdin(self, monkeypatch, capsys) -> None:
        monkeypatch.setattr("sys.stdin", io.StringIO(json.dumps({"person": {"first": "Stdin"}})))
        assert main(["latex"]) == 0
        assert "Stdin" in capsys.readouterr().out

    def test_full_profile_response(self, tmp_path, capsys) -> None:
        path = tmp_path / "full.json"
        path.write_text(json.dumps({"first_name": "Grace", "last_name": "Hopper"}))
        assert main(["latex", str(path), "--from-api"]) == 0
        assert "Grace Hopper" in capsys.readouterr().out

    def test_missing_file(self, tmp_path, capsys) -> None:
        assert main(["latex", str(tmp_path / "nope.json")]) == 1
        assert "Error" in capsys.readouterr().err

    def test_non_object_json(self, tmp_path, capsys) -> None:
        path = tmp_path / "list.json"
        path.write_text("[1, 2]")
        assert main(["latex", str(path)]) == 1
        assert "must be an object" in capsys.readouterr().err

    def test_null_entries_are_skipped(self, tmp_path, capsys) -> None:
        path = tmp_path / "nulls.json"
        path.write_text(json.dumps({"education": [None], "projects": [None, {"name": "Kept"}]}))
        assert main(["latex", str(path)]) == 0
        assert "Kept" in capsys.readouterr().out

    def test_malformed_json(self, tmp_path) -> None:
        path = tmp_path / "bad.json"
        path.write_text("{not json")
        assert main(["latex", str(path)]) == 1


class TestPreviewCommand:
    def test_prints_preview(self, profile_file, capsys) -> None:
        assert main(["preview", str(profile_file), "--scale", "0.75"]) == 0
        out = capsys.readouterr().out
        assert 'id="resume-content"' in out
        assert "scale(0.75)" in out
        assert "copy-source" not in out

    def test_surface(self, profile_file, capsys) -> None:
        assert main(["preview", str(profile_file), "--surface"]) == 0
        assert 'id="copy-source"' in capsys.readouterr().out

    def test_invalid_scale(self, profile_file, capsys) -> None:
        assert main(["preview", str(profile_file), "--scale", "0"]) == 1
        assert "positive" in capsys.readouterr().err


class TestExportCommand:
    def test_exports_pdf(self, profile_file, tmp_path, fake_pipeline, capsys) -> None:
        out_dir = tmp_path / "pdfs"
        assert main(["export", str(profile_file), "-d", str(out_dir)]) == 0
        assert (out_dir / "ada_lovelace_resume.pdf").exists()
        assert "3 page(s)" in capsys.readouterr().out
        assert len(fake_pipeline.calls) == 1

    def test_export_failure(self, profile_file, fake_pipeline, capsys) -> None:
        fake_pipeline.error = RasterizationError("browser crashed")
        assert main(["export", str(profile_file)]) == 1
        assert "Export failed: browser crashed" in capsys.readouterr().err
