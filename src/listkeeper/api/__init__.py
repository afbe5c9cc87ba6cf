"""HTTP layer: FastAPI app factory and the list/entry routers."""

from listkeeper.api.app import create_app

__all__ = ["create_app"]
