import logging
import time

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from app.api.health import router as health_router
from app.api.root import router as root_router
from app.api.employees import router as employees_router
from app.api.departments import router as departments_router
from app.api.stats import router as stats_router
from app.core.config import Settings, settings as default_settings
from app.core.errors import register_exception_handlers
from app.core.logging_config import setup_logging
from app.db.seed import seed_demo
from app.db.store import EmployeeStore

access_logger = logging.getLogger("app.access")


def create_app(settings: Settings | None = None, store: EmployeeStore | None = None) -> FastAPI:
    settings = settings or default_settings
    setup_logging(settings.LOG_LEVEL)

    app = FastAPI(title=settings.APP_NAME)

    if store is None:
        store = EmployeeStore(
            id_prefix=settings.EMPLOYEE_ID_PREFIX,
            id_width=settings.EMPLOYEE_ID_WIDTH,
        )
        if settings.SEED_DEMO_DATA:
            seed_demo(store)

    app.state.settings = settings
    app.state.store = store
    app.state.started_at = time.monotonic()

    # CORS middleware for frontend access
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        start = time.perf_counter()
        # Unhandled errors become a 500 further out
        status_code = 500
        try:
            response = await call_next(request)
            status_code = response.status_code
            return response
        finally:
            access_logger.info(
                "%s %s %s %.1fms",
                request.method,
                request.url.path,
                status_code,
                (time.perf_counter() - start) * 1000,
            )

    register_exception_handlers(app)

    app.include_router(root_router)
    app.include_router(health_router)
    app.include_router(employees_router)
    app.include_router(departments_router)
    app.include_router(stats_router)

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("app.main:app", host=default_settings.HOST, port=default_settings.PORT)
