"""API routers package."""

from dtrack.api.routers.accounts import router as accounts_router
from dtrack.api.routers.transactions import router as transactions_router
from dtrack.api.routers.taxonomy import router as taxonomy_router

__all__ = [
    "accounts_router",
    "transactions_router",
    "taxonomy_router",
]
