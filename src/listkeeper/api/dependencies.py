"""FastAPI dependencies shared by the routers."""

from fastapi import Request

from listkeeper.database import Database


def get_database(request: Request) -> Database:
    """Return the database the app was created with."""
    return request.app.state.database
