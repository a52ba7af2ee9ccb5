from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError

from users_api.api.metrics import router as metrics_router
from users_api.api.users import router as users_router, users_body_error_handler
from users_api.config import get_settings
from users_api.observability.logging import configure_logging
from users_api.observability.middleware import RequestLoggingMiddleware


_settings = get_settings()

app = FastAPI(
    title=_settings.app_name,
    version="0.1.0",
    docs_url=_settings.docs_url,
    openapi_url=_settings.openapi_url,
)
app.add_middleware(RequestLoggingMiddleware)
app.add_exception_handler(RequestValidationError, users_body_error_handler)
app.include_router(users_router)
app.include_router(metrics_router)


@app.on_event("startup")
def _startup() -> None:
    configure_logging(get_settings().log_level)


@app.get("/health")
async def health() -> dict[str, str]:
    return {"status": "ok"}
