"""Public interface for the subreddit wiki manifest adapter."""

from __future__ import annotations

from .client import RedditManifestLoader
from .parser import extract_manifest_rows

__all__ = ["RedditManifestLoader", "extract_manifest_rows"]
