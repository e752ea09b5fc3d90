"""
Lifecycle of a cat: list, get, create and delete.

``CatHandler`` coordinates the repository and the cataas lookup. A cat
is created exactly once and only when the lookup succeeds, so a stored
cat always has an image. Nothing is written before the lookup returns,
which means a failed create leaves the store untouched.

If the client aborts the request while ``insert`` is running, the
write is not rolled back; there is no compensation for that window.
"""

import logging
import uuid
from datetime import datetime, timezone
from typing import List

from ..errors import CatNotFound, InvalidCatRequest
from .cataas_service import CataasClient
from .schemas import Cat, NewCat
from .store import CatRepository


logger = logging.getLogger(__name__)


def new_cat_id() -> str:
    return uuid.uuid4().hex


class CatHandler:
    def __init__(self, repository: CatRepository, cataas_client: CataasClient):
        self.repository = repository
        self.cataas_client = cataas_client

    def list_all(self) -> List[Cat]:
        return self.repository.find_all()

    def get(self, cat_id: str) -> Cat:
        cat = self.repository.find_by_id(cat_id)
        if cat is None:
            raise CatNotFound(cat_id)
        return cat

    def create(self, new_cat: NewCat) -> Cat:
        if not new_cat.name.strip():
            raise InvalidCatRequest("Cat name must not be blank")

        cat_id = new_cat_id()
        # Raises EnrichmentUnavailable; nothing has been stored yet.
        image = self.cataas_client.fetch_random_image()

        cat = Cat(
            id=cat_id,
            name=new_cat.name,
            age=new_cat.age,
            image_url=image.url,
            created_at=datetime.now(timezone.utc),
        )
        stored = self.repository.insert(cat)
        logger.info("Created cat %s (%s)", stored.id, stored.name)
        return stored

    def delete(self, cat_id: str) -> None:
        self.repository.delete_by_id(cat_id)
        logger.info("Deleted cat %s", cat_id)
