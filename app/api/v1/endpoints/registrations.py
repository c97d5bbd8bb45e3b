"""
Registration API endpoints
"""
from typing import List
from fastapi import APIRouter, Depends, status

from app.core.database import Database, get_database
from app.repositories import RegistrationRepository
from app.schemas.registration import (
    Registration as RegistrationSchema,
    RegistrationCreate,
    RegistrationUpdate,
    RegistrationDetail
)
from app.schemas.base import ErrorResponse, MessageResponse

router = APIRouter()

NOT_FOUND = {404: {"model": ErrorResponse, "description": "Registro não encontrado"}}


@router.get(
    "",
    response_model=List[RegistrationDetail],
    summary="Lista todos os registros de inscrição com detalhes do evento e participante"
)
async def list_registrations(db: Database = Depends(get_database)):
    """
    Retorna todas as inscrições, unindo o nome do participante e o título do evento
    """
    return await RegistrationRepository(db).list()


@router.post(
    "",
    response_model=RegistrationSchema,
    status_code=status.HTTP_201_CREATED,
    summary="Cria um novo registro de inscrição"
)
async def create_registration(
    registration_data: RegistrationCreate,
    db: Database = Depends(get_database)
):
    """
    Registra a inscrição de um participante em um evento

    - **evento_id**: evento
    - **participante_id**: participante
    - **status**: pending, confirmed ou canceled (texto livre)
    - **paid_amount**: valor pago
    """
    return await RegistrationRepository(db).create(registration_data.model_dump())


@router.get(
    "/{registration_id}",
    response_model=RegistrationDetail,
    responses=NOT_FOUND,
    summary="Busca um registro de inscrição pelo ID"
)
async def get_registration(registration_id: str, db: Database = Depends(get_database)):
    return await RegistrationRepository(db).get_by_id(registration_id)


@router.put(
    "/{registration_id}",
    response_model=RegistrationSchema,
    responses={400: {"model": ErrorResponse}, **NOT_FOUND},
    summary="Atualiza informações de um registro"
)
async def update_registration(
    registration_id: str,
    registration_update: RegistrationUpdate,
    db: Database = Depends(get_database)
):
    return await RegistrationRepository(db).update(registration_id, registration_update.to_fields())


@router.delete("/{registration_id}", response_model=MessageResponse, responses=NOT_FOUND, summary="Remove um registro de inscrição")
async def delete_registration(registration_id: str, db: Database = Depends(get_database)):
    repository = RegistrationRepository(db)
    await repository.delete(registration_id)
    return MessageResponse(msg=repository.deleted_message)
