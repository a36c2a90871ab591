from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from fleet_lite.entrypoints.http.exception_handlers import register_exception_handlers
from fleet_lite.entrypoints.http.routes.health import router as health_router
from fleet_lite.entrypoints.http.routes.trucks import router as trucks_router


def build_app() -> FastAPI:
    app = FastAPI(
        title="Fleet Lite API",
        description="""
        Fleet management API serving truck records to the listing client.

        ## Features
        - List the full truck set
        - Get a truck by ID
        - Register and update trucks

        ## Authentication
        None.

        ## Error Handling
        All errors return structured JSON responses with error codes.
        """,
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
    )

    # The browser client is served from another origin
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["GET", "POST", "PUT"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    app.include_router(health_router)
    app.include_router(trucks_router, prefix="/v1")

    return app


app = build_app()
