import os
import uuid

import structlog
from asgi_correlation_id import CorrelationIdMiddleware
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from prometheus_fastapi_instrumentator import Instrumentator

from .exceptions import DOMAIN_ERRORS
from .logging_config import SERVICE_NAME, configure_logging
from .routers.admin import router as admin_router
from .routers.auth import router as auth_router
from .routers.consultations import router as consultations_router
from .routers.proposals import router as proposals_router
from .routers.storage import router as storage_router
from .routers.trainers import router as trainers_router
from .routers.user_profiles import router as user_profiles_router

configure_logging()
logger = structlog.get_logger(__name__)


def _cors_origins() -> list[str]:
    raw = os.getenv("CORS_ORIGINS", "*")
    if raw == "*":
        return ["*"]
    return [o.strip() for o in raw.split(",") if o.strip()]


async def domain_error_handler(request: Request, exc) -> JSONResponse:
    logger.info(
        "request_rejected",
        path=request.url.path,
        method=request.method,
        status_code=exc.status_code,
        detail=exc.detail,
    )
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.detail}, headers=exc.headers)


def create_app() -> FastAPI:
    app = FastAPI(
        title=SERVICE_NAME,
        version="0.1.0",
        description="Fitness consultations: customer requests, trainer proposals and trainer approval",
    )

    Instrumentator().instrument(app).expose(app, endpoint="/metrics", include_in_schema=False)

    origins = _cors_origins()
    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        allow_credentials=origins != ["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(
        CorrelationIdMiddleware,
        header_name="X-Request-ID",
        generator=lambda: str(uuid.uuid4()),
        update_request_header=True,
    )

    for error_cls in DOMAIN_ERRORS:
        app.add_exception_handler(error_cls, domain_error_handler)

    @app.get("/health")
    async def health() -> dict[str, str]:
        return {"status": "ok"}

    app.include_router(auth_router)
    app.include_router(consultations_router)
    app.include_router(proposals_router)
    app.include_router(trainers_router)
    app.include_router(user_profiles_router)
    app.include_router(storage_router)
    app.include_router(admin_router)
    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=8000)
