"""
Summary: Package exports for metadata use cases.
Why: Keep the extraction subpackage reachable under one namespace.
"""

from . import extraction

__all__ = ["extraction"]
