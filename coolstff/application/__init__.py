"""Application layer module.

Contains application services (use cases) that combine content store
reads and writes with the catalog core.
"""

from coolstff.application.admin_service import (
    AdminService,
    get_admin_service,
)
from coolstff.application.catalog_service import (
    CatalogService,
    get_catalog_service,
)
from coolstff.application.engagement_service import (
    EngagementService,
    get_engagement_service,
)

__all__ = [
    "AdminService",
    "get_admin_service",
    "CatalogService",
    "get_catalog_service",
    "EngagementService",
    "get_engagement_service",
]
