from pubgate.domain.workspace.util.di.provider import WorkspaceProvider

__all__ = ["WorkspaceProvider"]
