"""
data_exporter

Top-level package for the Data Exporter policy service.

Responsibilities:
- Expose package version metadata.
"""

__all__ = ["__version__"]

__version__ = "0.1.0"


# --- Module Notes -----------------------------------------------------------
# Keep this file free of imports; `alembic/env.py` imports submodules directly.
