"""Directory pane models."""

from .directory_view import DirectoryLister, DirectoryView

__all__ = ["DirectoryLister", "DirectoryView"]
