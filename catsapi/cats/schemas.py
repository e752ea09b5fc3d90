"""
Pydantic schema definitions for the cats module.

``Cat`` is the stored document and the response body of every
endpoint that returns a cat. Attributes are snake_case in Python and
camelCase on the wire (``imageUrl``, ``createdAt``), matching the
shape clients already consume. ``NewCat`` is the creation payload and
``CataasResponse`` is what the cataas.com lookup returns.
"""

from datetime import datetime
from typing import List

from pydantic import BaseModel, ConfigDict, Field


class Cat(BaseModel):
    """A single stored cat.

    Every field is populated at creation time and never changes
    afterwards: ``id`` and ``created_at`` are minted by the server,
    ``image_url`` comes from the enrichment lookup, and ``name`` /
    ``age`` come from the client.
    """

    model_config = ConfigDict(populate_by_name=True)

    id: str
    name: str = Field(min_length=1)
    age: int = Field(ge=0)
    image_url: str = Field(alias="imageUrl")
    created_at: datetime = Field(alias="createdAt")


class NewCat(BaseModel):
    """Payload for ``POST /cats``.

    Unknown fields (``id``, ``imageUrl``...) are ignored by pydantic's
    default ``extra="ignore"`` behaviour, so clients cannot choose them.
    """

    name: str = Field(min_length=1, description="Display name of the cat")
    age: int = Field(ge=0, description="Age in years")


class CataasResponse(BaseModel):
    """Enrichment result from cataas.com. Only ``url`` is used."""

    tags: List[str] = Field(default_factory=list)
    url: str
