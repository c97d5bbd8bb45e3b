"""
Event API endpoints
"""
from typing import List
from fastapi import APIRouter, Depends, status

from app.core.database import Database, get_database
from app.repositories import EventRepository
from app.schemas.event import (
    Event as EventSchema,
    EventCreate,
    EventUpdate
)
from app.schemas.base import ErrorResponse, MessageResponse

router = APIRouter()

NOT_FOUND = {404: {"model": ErrorResponse, "description": "Evento não encontrado"}}


@router.get("", response_model=List[EventSchema], summary="Lista todos os eventos")
async def list_events(db: Database = Depends(get_database)):
    """
    Retorna todos os eventos cadastrados
    """
    return await EventRepository(db).list()


@router.post(
    "",
    response_model=EventSchema,
    status_code=status.HTTP_201_CREATED,
    summary="Cria um novo evento"
)
async def create_event(
    event_data: EventCreate,
    db: Database = Depends(get_database)
):
    """
    Adiciona um novo evento ao sistema

    - **organizador_id**: organizador responsável
    - **title**: título do evento
    - **start_at**: data e hora de início
    - **capacity**, **price**, **status**: opcionais, sem regras de negócio
    """
    return await EventRepository(db).create(event_data.model_dump())


@router.get("/{event_id}", response_model=EventSchema, responses=NOT_FOUND, summary="Busca um evento pelo ID")
async def get_event(event_id: str, db: Database = Depends(get_database)):
    """
    Retorna os dados de um evento específico
    """
    return await EventRepository(db).get_by_id(event_id)


@router.put(
    "/{event_id}",
    response_model=EventSchema,
    responses={400: {"model": ErrorResponse}, **NOT_FOUND},
    summary="Atualiza um evento existente"
)
async def update_event(
    event_id: str,
    event_update: EventUpdate,
    db: Database = Depends(get_database)
):
    """
    Modifica os atributos enviados de um evento existente
    """
    return await EventRepository(db).update(event_id, event_update.to_fields())


@router.delete("/{event_id}", response_model=MessageResponse, responses=NOT_FOUND, summary="Remove um evento")
async def delete_event(event_id: str, db: Database = Depends(get_database)):
    """
    Exclui permanentemente um evento do sistema
    """
    repository = EventRepository(db)
    await repository.delete(event_id)
    return MessageResponse(msg=repository.deleted_message)
