# Where: trackmeta.shared.__init__
# What: Provide a concise import surface for shared dataclasses.
# Why: Let readers, the dispatcher and the CLI agree on one metadata type.

"""Shared cross-cutting dataclasses exposed at the package level."""

from .canonical_metadata import CanonicalMetadata

__all__ = ["CanonicalMetadata"]
