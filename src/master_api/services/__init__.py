"""Service layer.

Reference implementations of the account and geo collaborators. They
satisfy the protocols in ``master_api.protocols`` and can be replaced
by clients of the real services without touching the handlers.

Architecture:
    Handler -> Service
    (HTTP)  -> (Business)
"""

from .account_service import InMemoryAccountService
from .geo_service import InMemoryGeoService

__all__ = [
    "InMemoryAccountService",
    "InMemoryGeoService",
]
