"""Coffee Shops FastAPI application.

Serves the shops domain over HTTP. Commands run synchronously against the
configured provider; the domain context is pushed per request.

Usage:
    uvicorn app:app --app-dir src --host 0.0.0.0 --port 8000 --reload
"""

# ---------------------------------------------------------------------------
# Domain initialization
# ---------------------------------------------------------------------------
# The domain is initialized at module level so uvicorn workers share it.
# PROTEAN_ENV selects the config overlay from domain.toml.
from shops.api.app import create_app
from shops.domain import shops

shops.init()

app = create_app(shops)
