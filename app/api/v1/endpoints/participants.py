"""
Participant API endpoints
"""
from typing import List
from fastapi import APIRouter, Depends, status

from app.core.database import Database, get_database
from app.repositories import ParticipantRepository
from app.schemas.participant import (
    Participant as ParticipantSchema,
    ParticipantCreate,
    ParticipantUpdate
)
from app.schemas.base import ErrorResponse, MessageResponse

router = APIRouter()

NOT_FOUND = {404: {"model": ErrorResponse, "description": "Participante não encontrado"}}


@router.get("", response_model=List[ParticipantSchema], summary="Lista todos os participantes")
async def list_participants(db: Database = Depends(get_database)):
    return await ParticipantRepository(db).list()


@router.post(
    "",
    response_model=ParticipantSchema,
    status_code=status.HTTP_201_CREATED,
    summary="Cadastra um novo participante"
)
async def create_participant(
    participant_data: ParticipantCreate,
    db: Database = Depends(get_database)
):
    """
    Cadastra um participante

    - **full_name**: nome completo
    - **profile**: documento JSON livre com dados de perfil
    """
    return await ParticipantRepository(db).create(participant_data.model_dump())


@router.get("/{participant_id}", response_model=ParticipantSchema, responses=NOT_FOUND, summary="Busca um participante pelo ID")
async def get_participant(participant_id: str, db: Database = Depends(get_database)):
    return await ParticipantRepository(db).get_by_id(participant_id)


@router.put(
    "/{participant_id}",
    response_model=ParticipantSchema,
    responses={400: {"model": ErrorResponse}, **NOT_FOUND},
    summary="Atualiza um participante"
)
async def update_participant(
    participant_id: str,
    participant_update: ParticipantUpdate,
    db: Database = Depends(get_database)
):
    """
    Atualiza somente os campos enviados. O campo **profile** é substituído por inteiro.
    """
    return await ParticipantRepository(db).update(participant_id, participant_update.to_fields())


@router.delete("/{participant_id}", response_model=MessageResponse, responses=NOT_FOUND, summary="Remove um participante")
async def delete_participant(participant_id: str, db: Database = Depends(get_database)):
    repository = ParticipantRepository(db)
    await repository.delete(participant_id)
    return MessageResponse(msg=repository.deleted_message)
