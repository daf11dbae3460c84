"""
Affiliate Ops Dashboard — FastAPI Application.

This is the entry point for the application.
All routers are registered here, and the process-wide
undo history is created once and attached to app.state.
"""

from fastapi import FastAPI

from affiliate_ops.config import get_settings
from affiliate_ops.logging_config import setup_logging
from affiliate_ops.services.action_log import ActionLog
from affiliate_ops.api.health import router as health_router
from affiliate_ops.api.platforms import router as platforms_router
from affiliate_ops.api.identities import router as identities_router
from affiliate_ops.api.websites import router as websites_router
from affiliate_ops.api.cards import router as cards_router
from affiliate_ops.api.advertisers import router as advertisers_router
from affiliate_ops.api.accounts import router as accounts_router
from affiliate_ops.api.orders import router as orders_router
from affiliate_ops.api.overview import router as overview_router
from affiliate_ops.api.undo_history import router as undo_history_router

settings = get_settings()
setup_logging(settings.LOG_LEVEL)

app = FastAPI(
    title=settings.APP_NAME,
    version=settings.APP_VERSION,
    description="Operations dashboard for affiliate-marketing assets",
)

app.state.action_log = ActionLog(max_history=settings.UNDO_HISTORY_LIMIT)

# Register routers
app.include_router(health_router)
app.include_router(platforms_router)
app.include_router(identities_router)
app.include_router(websites_router)
app.include_router(cards_router)
app.include_router(advertisers_router)
app.include_router(accounts_router)
app.include_router(orders_router)
app.include_router(overview_router)
app.include_router(undo_history_router)
