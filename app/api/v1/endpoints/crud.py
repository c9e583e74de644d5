from typing import List, Type

from fastapi import APIRouter, Depends, Response, status
from pydantic import BaseModel

from app.core.auth import get_current_user
from app.db.session import get_store
from app.db.store import DataStore
from app.models.user import UserInDB
from app.repositories.base import OwnedRepository


def build_crud_router(
    repository: Type[OwnedRepository],
    create_schema: Type[BaseModel],
    record_model: Type[BaseModel],
) -> APIRouter:
    """
    Standard owner-scoped routes for one record kind.

    PATCH takes the full create payload: the stored record is replaced.
    Missing or foreign records surface as NotFoundOrForbidden (404).
    """
    router = APIRouter()

    @router.get("", response_model=List[record_model])
    async def list_records(
        current_user: UserInDB = Depends(get_current_user),
        store: DataStore = Depends(get_store)
    ):
        return await repository(store).list(current_user.id)

    @router.post("", response_model=record_model, status_code=status.HTTP_201_CREATED)
    async def create_record(
        record_in: create_schema,
        current_user: UserInDB = Depends(get_current_user),
        store: DataStore = Depends(get_store)
    ):
        return await repository(store).create(current_user.id, record_in.model_dump())

    @router.get("/{record_id}", response_model=record_model)
    async def get_record(
        record_id: int,
        current_user: UserInDB = Depends(get_current_user),
        store: DataStore = Depends(get_store)
    ):
        return await repository(store).get(current_user.id, record_id)

    @router.patch("/{record_id}", response_model=record_model)
    async def update_record(
        record_id: int,
        record_in: create_schema,
        current_user: UserInDB = Depends(get_current_user),
        store: DataStore = Depends(get_store)
    ):
        return await repository(store).update(current_user.id, record_id, record_in.model_dump())

    @router.delete("/{record_id}", status_code=status.HTTP_204_NO_CONTENT)
    async def delete_record(
        record_id: int,
        current_user: UserInDB = Depends(get_current_user),
        store: DataStore = Depends(get_store)
    ):
        await repository(store).delete(current_user.id, record_id)
        return Response(status_code=status.HTTP_204_NO_CONTENT)

    return router
