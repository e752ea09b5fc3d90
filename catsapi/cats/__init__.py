"""
Cats package for the cats API.

This package holds everything about the ``/cats`` collection: the
pydantic schemas, the document store, the cataas.com lookup that gives
every new cat its picture, the lifecycle handler and the FastAPI
routes. The store and the lookup are both abstract so that a
different backend (or a fake in tests) can be plugged in.
"""

from .router import router as cats_router  # noqa: F401
