"""Application factories for repository access."""

from todolist.application.factories.repository_factory import RepositoryFactory

__all__ = ["RepositoryFactory"]
