"""FastAPI application factory for the shops domain."""

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from protean.domain import Domain

from shops.api.errors import register_error_handlers
from shops.api.routes import shop_router
from shops.utils.logging import add_context, clear_context


def create_app(domain: Domain) -> FastAPI:
    """Build the ASGI app around an initialized ``domain``."""
    app = FastAPI(
        title="Coffee Shops API",
        description="Venues, likes, and rated comments",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def domain_context_middleware(request: Request, call_next):
        """Push the Protean domain context for each request."""
        clear_context()
        add_context(method=request.method, path=request.url.path)
        with domain.domain_context():
            return await call_next(request)

    app.include_router(shop_router)
    register_error_handlers(app)

    @app.get("/health")
    async def health():
        return JSONResponse(content={"status": "ok", "domain": domain.name})

    return app
