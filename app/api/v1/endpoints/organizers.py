"""
Organizer API endpoints
"""
from typing import List
from fastapi import APIRouter, Depends, status

from app.core.database import Database, get_database
from app.repositories import OrganizerRepository
from app.schemas.organizer import (
    Organizer as OrganizerSchema,
    OrganizerCreate,
    OrganizerUpdate
)
from app.schemas.base import ErrorResponse, MessageResponse

router = APIRouter()

NOT_FOUND = {404: {"model": ErrorResponse, "description": "Organizador não encontrado"}}


@router.get("", response_model=List[OrganizerSchema], summary="Lista todos os organizadores")
async def list_organizers(db: Database = Depends(get_database)):
    """
    Retorna todos os organizadores cadastrados
    """
    return await OrganizerRepository(db).list()


@router.post(
    "",
    response_model=OrganizerSchema,
    status_code=status.HTTP_201_CREATED,
    summary="Cria um novo organizador"
)
async def create_organizer(
    organizer_data: OrganizerCreate,
    db: Database = Depends(get_database)
):
    """
    Cadastra um organizador

    - **name**: nome do organizador
    - **email**: e-mail de contato
    - **contact_phone**: telefone de contato
    """
    return await OrganizerRepository(db).create(organizer_data.model_dump())


@router.get("/{organizer_id}", response_model=OrganizerSchema, responses=NOT_FOUND, summary="Busca um organizador pelo ID")
async def get_organizer(organizer_id: str, db: Database = Depends(get_database)):
    return await OrganizerRepository(db).get_by_id(organizer_id)


@router.put(
    "/{organizer_id}",
    response_model=OrganizerSchema,
    responses={400: {"model": ErrorResponse}, **NOT_FOUND},
    summary="Atualiza um organizador existente"
)
async def update_organizer(
    organizer_id: str,
    organizer_update: OrganizerUpdate,
    db: Database = Depends(get_database)
):
    """
    Atualiza somente os campos enviados; os demais permanecem inalterados
    """
    return await OrganizerRepository(db).update(organizer_id, organizer_update.to_fields())


@router.delete("/{organizer_id}", response_model=MessageResponse, responses=NOT_FOUND, summary="Remove um organizador")
async def delete_organizer(organizer_id: str, db: Database = Depends(get_database)):
    repository = OrganizerRepository(db)
    await repository.delete(organizer_id)
    return MessageResponse(msg=repository.deleted_message)
