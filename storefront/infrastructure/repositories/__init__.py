"""SQLAlchemy Repositories — implementations of core/repository_protocols.py.

Invariants:
    - One repository per entity, constructed per request around an AsyncSession
    - Driver errors are translated by map_database_error before leaving a repository
"""

from storefront.infrastructure.repositories.products import SqlProductRepository  # noqa: F401
from storefront.infrastructure.repositories.stores import SqlStoreRepository  # noqa: F401
from storefront.infrastructure.repositories.users import SqlUserRepository  # noqa: F401
