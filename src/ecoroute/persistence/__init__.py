"""In-memory persistence and demonstration data."""

from .memory import InMemoryStore
from .seed import seed_sample_data

__all__ = ["InMemoryStore", "seed_sample_data"]
