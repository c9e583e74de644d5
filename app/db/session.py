from fastapi import Request

from app.db.store import DataStore


def get_store(request: Request) -> DataStore:
    """Return the process data store."""
    return request.app.state.store
