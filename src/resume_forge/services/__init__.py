"""Services"""

from resume_forge.services.document_builder import build_document
from resume_forge.services.profile_defaults import normalize
from resume_forge.services.profile_transformers import profile_from_full_response
from resume_forge.services.resume_generator import (
    generate_latex,
    generate_resume_tex,
    generate_variant_a,
    generate_variant_b,
)

__all__ = [
    "build_document",
    "generate_latex",
    "generate_resume_tex",
    "generate_variant_a",
    "generate_variant_b",
    "normalize",
    "profile_from_full_response",
]
