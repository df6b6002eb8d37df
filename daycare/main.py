import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from daycare.api.v1.invitations.router import router as invitations_router
from daycare.api.v1.jobs.router import router as jobs_router
from daycare.api.v1.notifications.router import router as notifications_router
from daycare.api.v1.tenants.router import router as tenants_router
from daycare.api.v1.users.router import router as users_router
from daycare.core.enums import ErrorCode
from daycare.core.exceptions import ServiceError
from daycare.core.logging import configure_logging

logger = logging.getLogger(__name__)


def _validation_message(exc: RequestValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return "Invalid request"
    first = errors[0]
    field = ".".join(str(p) for p in first.get("loc", ()) if p != "body")
    return f"{field}: {first.get('msg')}" if field else str(first.get("msg"))


async def service_error_handler(request: Request, exc: ServiceError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    err = ServiceError(_validation_message(exc), ErrorCode.INVALID_ARGUMENT)
    return JSONResponse(status_code=err.status_code, content=err.to_dict())


def create_app() -> FastAPI:
    configure_logging()
    app = FastAPI(title="Daycare Backend")

    # CORS: callable operations are invoked directly from the web and mobile clients
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(ServiceError, service_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)

    # Routers
    app.include_router(users_router)
    app.include_router(invitations_router)
    app.include_router(tenants_router)
    app.include_router(notifications_router)
    app.include_router(jobs_router)

    return app


app = create_app()
