from contextlib import asynccontextmanager
from typing import Optional
import logging
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app import config
from app.database import Base, build_engine, build_session_factory
from app.routes import service, users, stores, products

# Import all models to ensure they are registered with SQLAlchemy
from app.db.models import User, Store, Product  # noqa: F401

logging.basicConfig(level=config.LOG_LEVEL)
logger = logging.getLogger(__name__)

# Configure logging to show API requests
logging.getLogger("uvicorn.access").setLevel(logging.INFO)


def _describe_validation_errors(errors) -> str:
    parts = []
    for error in errors:
        location = ".".join(str(part) for part in error.get("loc", ()))
        parts.append(f"{location}: {error.get('msg')}")
    return "; ".join(parts)


def create_app(database_url: Optional[str] = None) -> FastAPI:
    """
    Build the application with its own engine and session factory.

    Handlers receive sessions through the get_db dependency, which reads the
    factory stored on app.state.
    """
    engine = build_engine(database_url or config.DATABASE_URL, echo=config.SQL_ECHO)
    session_factory = build_session_factory(engine)

    @asynccontextmanager
    async def lifespan(_: FastAPI):
        # Only create tables automatically in dev, not production
        if config.ENV != "production":
            logger.info("Development mode: creating tables if they don't exist")
            Base.metadata.create_all(bind=engine)
            if config.SEED_DEMO_DATA:
                from app.init_db import seed
                seed(session_factory)
        try:
            yield
        finally:
            engine.dispose()

    app = FastAPI(
        title="Store Catalog API",
        lifespan=lifespan,
    )
    app.state.engine = engine
    app.state.session_factory = session_factory

    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["*"],
    )

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": str(exc.detail)},
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        # Create-user reports every failure except a taken email as a server error
        if request.scope.get("endpoint") is users.create_user:
            logger.warning("Rejected create-user body: %s", _describe_validation_errors(exc.errors()))
            return JSONResponse(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                content={"error": "failed to create user"},
            )
        # Elsewhere, paths and bodies that fail type coercion are client errors
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"error": _describe_validation_errors(exc.errors())},
        )

    app.include_router(service.router)
    app.include_router(users.router)
    app.include_router(stores.router)
    app.include_router(products.router)

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn
    logger.info(f"Server running at http://localhost:{config.PORT}")
    uvicorn.run(app, host=config.HOST, port=config.PORT)
