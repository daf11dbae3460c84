"""Business logic services."""

from affiliate_ops.services.action_log import ActionLog
from affiliate_ops.services.platform_service import PlatformService
from affiliate_ops.services.master_data import (
    IdentityService,
    WebsiteService,
    CardService,
)
from affiliate_ops.services.platform_data import (
    AdvertiserService,
    PlatformAccountService,
    OrderService,
)
from affiliate_ops.services.overview_service import OverviewService
from affiliate_ops.services.undo_service import UndoService, RevertResult

__all__ = [
    "ActionLog",
    "PlatformService",
    "IdentityService",
    "WebsiteService",
    "CardService",
    "AdvertiserService",
    "PlatformAccountService",
    "OrderService",
    "OverviewService",
    "UndoService",
    "RevertResult",
]
