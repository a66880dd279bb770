"""
Repositories SQLModel.

Implementations concretes des ports de persistance definis dans core/ports/.
"""

from showresolver.infrastructure.persistence.repositories.catalog_repository import (
    SQLModelLocalCatalog,
)

__all__ = ["SQLModelLocalCatalog"]
