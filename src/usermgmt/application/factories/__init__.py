"""Application factories for repository access."""

from usermgmt.application.factories.repository_factory import RepositoryFactory

__all__ = ["RepositoryFactory"]
