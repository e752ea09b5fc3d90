"""
FastAPI dependencies wiring the cats handler to its collaborators.

The repository and the cataas client are built once per process from
``Settings``. Tests replace ``get_cat_repository`` and
``get_cataas_client`` through ``app.dependency_overrides``.
"""

import logging
from functools import lru_cache

from fastapi import Depends

from ..config import Settings, get_settings
from .cataas_service import CataasClient, HttpCataasClient
from .handler import CatHandler
from .store import CatRepository, InMemoryCatRepository, JsonFileCatRepository


logger = logging.getLogger(__name__)


def build_repository(settings: Settings) -> CatRepository:
    if settings.store_backend == "memory":
        logger.info("Using in-memory cat store")
        return InMemoryCatRepository()
    logger.info("Using JSON cat store at %s", settings.data_file)
    return JsonFileCatRepository(settings.data_file)


@lru_cache(maxsize=1)
def get_cat_repository() -> CatRepository:
    return build_repository(get_settings())


@lru_cache(maxsize=1)
def get_cataas_client() -> CataasClient:
    settings = get_settings()
    return HttpCataasClient(settings.cataas_url, timeout=settings.cataas_timeout)


def get_cat_handler(
    repository: CatRepository = Depends(get_cat_repository),
    cataas_client: CataasClient = Depends(get_cataas_client),
) -> CatHandler:
    return CatHandler(repository, cataas_client)
