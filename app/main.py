import logging
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.core.config import settings
from app.core.logging import configure_logging
from app.core.exceptions import register_exception_handlers
from app.core.database import init_db
from app.middleware import CorrelationIdMiddleware

configure_logging(settings.LOG_LEVEL)
logger = logging.getLogger(__name__)

app = FastAPI(title=settings.APP_NAME)

# Middleware: correlation id
app.add_middleware(CorrelationIdMiddleware)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Route imports
from app.api.health import router as health_router
from app.api.v1 import guests as v1_guests
from app.api.v1 import vendors as v1_vendors
from app.api.v1 import budget as v1_budget
from app.api.v1 import tasks as v1_tasks
from app.api.v1 import dashboard as v1_dashboard

# Register routers
app.include_router(health_router, prefix="/api", tags=["health"])

# v1 procedures: queries are GET, mutations are POST
app.include_router(v1_guests.router, prefix="/api/v1", tags=["guests"])
app.include_router(v1_vendors.router, prefix="/api/v1", tags=["vendors"])
app.include_router(v1_budget.router, prefix="/api/v1", tags=["budget"])
app.include_router(v1_tasks.router, prefix="/api/v1", tags=["tasks"])
app.include_router(v1_dashboard.router, prefix="/api/v1", tags=["dashboard"])


# Exception handlers
register_exception_handlers(app)


@app.on_event("startup")
async def on_startup():
    logger.info("Starting app", extra={"app": settings.APP_NAME})

    if settings.CREATE_TABLES_ON_START:
        logger.info("CREATE_TABLES_ON_START enabled: creating tables")
        await init_db()


@app.on_event("shutdown")
async def on_shutdown():
    logger.info("Shutting down")


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host=settings.SERVER_HOST, port=settings.SERVER_PORT)
