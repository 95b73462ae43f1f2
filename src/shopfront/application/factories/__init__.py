"""Application factories for repository access."""

from shopfront.application.factories.repository_factory import RepositoryFactory

__all__ = ["RepositoryFactory"]
