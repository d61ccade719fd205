"""Request-scoped access to the objects create_app() puts on app.state."""

from __future__ import annotations

from fastapi import Request

from ..persistence.memory import InMemoryStore
from ..services.routing.directions_client import DirectionsClient


def get_store(request: Request) -> InMemoryStore:
    return request.app.state.store


def get_directions_client(request: Request) -> DirectionsClient | None:
    return request.app.state.directions_client
