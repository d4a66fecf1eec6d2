"""Blog API: CRUD REST service for blog posts backed by MongoDB."""

__version__ = "0.1.0"
__author__ = "Blog API Team"

__all__ = ["__version__", "__author__"]
