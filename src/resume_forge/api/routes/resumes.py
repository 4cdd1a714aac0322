"""Resume routes for the API.

The handlers are plain ``def`` functions: FastAPI runs them in its thread
pool, which the synchronous Playwright API requires.
"""

from __future__ import annotations

import shutil
import tempfile
from pathlib import Path
from typing import Annotated

from fastapi import APIRouter, BackgroundTasks, Depends, HTTPException, status
from fastapi.responses import FileResponse, HTMLResponse

from resume_forge.api.dependencies import get_export_pipeline
from resume_forge.api.schemas.resumes import (
    ExportRequest,
    LatexResponse,
    PreviewRequest,
    ResumeRequest,
    VariantResponse,
)
from resume_forge.config import get_settings
from resume_forge.export.pipeline import ExportPipeline
from resume_forge.models.export import (
    ContentNodeNotFoundError,
    ExportInProgressError,
    RasterizationError,
)
from resume_forge.preview.renderer import render_preview_surface
from resume_forge.services.profile_defaults import normalize
from resume_forge.services.resume_generator import generate_latex
from resume_forge.templates import get_template, list_templates
from resume_forge.utils.export import resume_filename

router = APIRouter(prefix="/resumes", tags=["resumes"])


@router.get("/variants", response_model=list[VariantResponse])
def list_variants() -> list[VariantResponse]:
    """List the available LaTeX layouts."""
    return [
        VariantResponse(name=name, title=get_template(name).name) for name in list_templates()
    ]


@router.post("/latex", response_model=LatexResponse)
def generate_latex_endpoint(data: ResumeRequest) -> LatexResponse:
    """Generate the LaTeX source of a resume."""
    profile = normalize(data.to_partial())
    return LatexResponse(
        variant=data.variant,
        filename=resume_filename(profile, "tex", get_settings().fallback_name),
        source=generate_latex(profile, data.variant),
    )


@router.post("/preview", response_class=HTMLResponse)
def preview_endpoint(data: PreviewRequest) -> HTMLResponse:
    """Render the interactive preview page with its LaTeX source view."""
    html = render_preview_surface(data.to_partial(), data.variant, data.scale)
    return HTMLResponse(content=html)


@router.post(
    "/export",
    responses={200: {"content": {"application/pdf": {}}}},
)
def export_endpoint(
    data: ExportRequest,
    background_tasks: BackgroundTasks,
    pipeline: Annotated[ExportPipeline, Depends(get_export_pipeline)],
) -> FileResponse:
    """Export the rendered preview to a paginated PDF and download it."""
    tmp_dir = tempfile.mkdtemp()
    result = None
    try:
        result = pipeline.export(
            data.to_partial(),
            data.variant,
            Path(tmp_dir),
            scale=data.scale,
        )
    except ExportInProgressError:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="An export is already running. Try again when it finishes.",
        ) from None
    except ContentNodeNotFoundError:
        raise HTTPException(
            status_code=422,
            detail="The resume preview could not be found for export.",
        ) from None
    except RasterizationError as exc:
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail=f"Capturing the resume preview failed: {exc}",
        ) from None
    finally:
        if result is None:
            shutil.rmtree(tmp_dir, ignore_errors=True)

    background_tasks.add_task(shutil.rmtree, tmp_dir, True)
    return FileResponse(
        path=str(result.path),
        media_type="application/pdf",
        filename=result.path.name,
        headers={"X-Page-Count": str(result.page_count)},
    )
