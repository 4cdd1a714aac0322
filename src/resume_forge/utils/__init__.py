"""Utility functions and helpers"""

from resume_forge.utils.export import filename_prefix, resume_filename, write_paginated_pdf

__all__ = [
    "filename_prefix",
    "resume_filename",
    "write_paginated_pdf",
]
