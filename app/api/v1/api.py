"""
API router configuration
"""
from fastapi import APIRouter

from app.api.v1.endpoints import organizers, events, participants, registrations

api_router = APIRouter()

# Resource paths keep the names the clients already use
api_router.include_router(organizers.router, prefix="/organizadores", tags=["Organizadores"])
api_router.include_router(events.router, prefix="/eventos", tags=["Eventos"])
api_router.include_router(participants.router, prefix="/participantes", tags=["Participantes"])
api_router.include_router(registrations.router, prefix="/registros", tags=["Registros"])
