"""HTTP API for LaTeX generation, previews and PDF export."""
