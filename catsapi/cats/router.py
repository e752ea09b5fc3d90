"""
Route definitions for the cats API.

Endpoints under /cats:
- GET    /cats           : list every cat
- GET    /cats/{cat_id}  : get one cat (404 when absent)
- POST   /cats           : create a cat, picture from cataas.com
- DELETE /cats/{cat_id}  : delete a cat (idempotent, never 404)

The handler is injected through ``dependencies`` so tests can
replace the store and the cataas client with fakes.
"""

from typing import List

from fastapi import APIRouter, Depends, Response, status

from .dependencies import get_cat_handler
from .handler import CatHandler
from .schemas import Cat, NewCat


router = APIRouter(prefix="/cats", tags=["cats"])


@router.get("", response_model=List[Cat])
def list_cats(handler: CatHandler = Depends(get_cat_handler)) -> List[Cat]:
    return handler.list_all()


@router.get("/{cat_id}", response_model=Cat)
def get_cat(cat_id: str, handler: CatHandler = Depends(get_cat_handler)) -> Cat:
    return handler.get(cat_id)


@router.post("", response_model=Cat)
def create_cat(new_cat: NewCat, handler: CatHandler = Depends(get_cat_handler)) -> Cat:
    return handler.create(new_cat)


@router.delete("/{cat_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_cat(cat_id: str, handler: CatHandler = Depends(get_cat_handler)) -> Response:
    handler.delete(cat_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
