import logging
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.openapi.utils import get_openapi
from fastapi.staticfiles import StaticFiles
from uvicorn.middleware.proxy_headers import ProxyHeadersMiddleware

from portfolio_api.api.routes import router
from portfolio_api.core.config import settings
from portfolio_api.core.db import create_mongo_client
from portfolio_api.core.exceptions import MissingBootstrapCredentialsException
from portfolio_api.core.handlers import register_exception_handlers
from portfolio_api.core.middleware import TokenAuthMiddleware, public_routes
from portfolio_api.repositories.mongo_admin_repository import MongoAdminRepository
from portfolio_api.services.admin_auth_service import AdminAuthService

logging.basicConfig(
    level=settings.LOG_LEVEL.upper(),
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
logger = logging.getLogger(__name__)


def bootstrap_admin(db) -> None:
    """Create the first super-admin from ADMIN_EMAIL / ADMIN_PASSWORD when none exists"""
    auth_service = AdminAuthService(admin_repository=MongoAdminRepository(db))
    try:
        admin = auth_service.bootstrap_default(settings.ADMIN_EMAIL, settings.ADMIN_PASSWORD)
    except MissingBootstrapCredentialsException as e:
        logger.warning("No administrator exists: %s", e.message)
        return
    if admin:
        logger.info("Default super-admin created: %s", admin["email"])


@asynccontextmanager
async def lifespan(app: FastAPI):
    mongo_client = create_mongo_client()
    app.state.mongo_client = mongo_client
    app.state.db = mongo_client[settings.MONGO_DB]
    Path(settings.UPLOAD_DIR).mkdir(parents=True, exist_ok=True)
    bootstrap_admin(app.state.db)
    logger.info("%s %s started", settings.APP_NAME, settings.APP_VERSION)
    try:
        yield
    finally:
        mongo_client.close()


app = FastAPI(
    title=settings.APP_NAME,
    version=settings.APP_VERSION,
    description="Content management backend for a personal portfolio",
    lifespan=lifespan,
    docs_url="/docs",
    openapi_url="/openapi.json",
)


# Custom OpenAPI schema with Bearer token security
def custom_openapi():
    if app.openapi_schema:
        return app.openapi_schema

    openapi_schema = get_openapi(
        title=settings.APP_NAME,
        version=settings.APP_VERSION,
        description="Content management backend for a personal portfolio",
        routes=app.routes,
    )

    openapi_schema.setdefault("components", {})["securitySchemes"] = {
        "Bearer": {
            "type": "http",
            "scheme": "bearer",
            "bearerFormat": "JWT",
            "description": "Enter a valid JWT token",
        }
    }

    # Apply security to every operation except the public ones
    for path, path_item in openapi_schema["paths"].items():
        for method, operation in path_item.items():
            if (method.upper(), path) in public_routes:
                continue
            if isinstance(operation, dict) and "operationId" in operation:
                operation.setdefault("security", [{"Bearer": []}])

    app.openapi_schema = openapi_schema
    return app.openapi_schema


app.openapi = custom_openapi

# Register exception handlers
register_exception_handlers(app)

# Token check for every non-public route
app.add_middleware(
    TokenAuthMiddleware,
)

# Wraps the token check, so its rejections carry CORS headers too
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials="*" not in settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Client address from X-Forwarded-For, only when the peer is a trusted proxy
app.add_middleware(
    ProxyHeadersMiddleware,
    trusted_hosts=settings.FORWARDED_ALLOW_IPS,
)

app.include_router(router)

# Uploaded images
app.mount("/uploads", StaticFiles(directory=settings.UPLOAD_DIR, check_dir=False), name="uploads")


@app.get(
    "/health",
    tags=["health"],
    summary="Health Check",
    description="Check if the API is running",
)
def health():
    """
    Health check endpoint to verify the API is running.

    Returns:
        dict: Status of the API
    """
    return {"status": "ok"}
