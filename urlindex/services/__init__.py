"""Service layer for urlindex."""

from urlindex.services.workspace_service import WorkspaceService

__all__ = ["WorkspaceService"]
