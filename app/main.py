"""
Event Registry Backend - FastAPI Application Entry Point
"""
from fastapi import FastAPI, Depends
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager

from app.core.config import settings
from app.core.database import Database, create_database_engine, get_database
from app.core.logging import configure_logging
import logging
from app.core.middleware import (
    logging_middleware,
    exception_handler,
    security_headers_middleware
)
from app.core.health import check_basic_health
from app.core.exceptions import EventRegistryException
from app.api.v1.api import api_router

# Configure logging
configure_logging()
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan events"""
    # Startup
    database = Database(create_database_engine())
    if await database.health_check():
        logger.info("✅ Database connection established")
    else:
        logger.warning("⚠️ Database is not reachable")
        if not settings.DEBUG:
            await database.dispose()
            raise RuntimeError("Database is not reachable")
    logger.info(f"Configuration: {settings.get_config_summary()}")
    app.state.database = database
    logger.info(f"Servidor executando em http://{settings.HOST}:{settings.PORT}")

    yield
    # Shutdown
    await database.dispose()


app = FastAPI(
    title="Documentação da API de eventos",
    description="""
    ## Cadastro de eventos

    CRUD de organizadores, eventos, participantes e inscrições.

    ### Recursos
    - **/organizadores**: quem organiza os eventos
    - **/eventos**: eventos com local, datas, capacidade, preço e situação
    - **/participantes**: pessoas inscritas, com perfil livre em JSON
    - **/registros**: inscrições de participantes em eventos

    ### Atualizações parciais
    `PUT /{recurso}/{id}` grava somente os campos enviados. Um corpo vazio
    retorna 400; um ID inexistente retorna 404.
    """,
    version=settings.VERSION,
    lifespan=lifespan,
    docs_url=settings.DOCS_URL,
    tags_metadata=[
        {
            "name": "Sistema",
            "description": "Informações do serviço e health check"
        },
        {
            "name": "Organizadores",
            "description": "Endpoints para gerenciamento de organizadores"
        },
        {
            "name": "Eventos",
            "description": "Endpoints para gerenciamento de eventos"
        },
        {
            "name": "Participantes",
            "description": "Endpoints para gerenciamento de participantes"
        },
        {
            "name": "Registros",
            "description": "Endpoints relacionados às inscrições de participantes em eventos"
        }
    ]
)

# Exception handlers
app.add_exception_handler(EventRegistryException, exception_handler)

# Middleware
app.middleware("http")(logging_middleware)
app.middleware("http")(security_headers_middleware)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.get_allowed_hosts(),
    allow_credentials=settings.ALLOWED_HOSTS != "*",
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include API routes
app.include_router(api_router, prefix=settings.API_PREFIX)


@app.get("/", summary="Informações da API", tags=["Sistema"])
async def api_info():
    """
    Versão do serviço e rotas disponíveis
    """
    prefix = settings.API_PREFIX
    return {
        "message": settings.APP_NAME,
        "version": settings.VERSION,
        "status": "active",
        "docs": settings.DOCS_URL,
        "endpoints": {
            "organizadores": f"{prefix}/organizadores",
            "eventos": f"{prefix}/eventos",
            "participantes": f"{prefix}/participantes",
            "registros": f"{prefix}/registros"
        }
    }


@app.get("/health", summary="Health check básico", tags=["Sistema"])
async def basic_health_check(db: Database = Depends(get_database)):
    """
    Estado do serviço e da conexão com o banco de dados
    """
    return await check_basic_health(db)


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "app.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.DEBUG
    )
