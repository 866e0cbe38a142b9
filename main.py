# main.py
from fastapi import FastAPI
from contextlib import asynccontextmanager
import logging

# Importar configuración, router principal, y dependencias de ciclo de vida
from core.config import settings
from api.api_v1.api import api_router
from services.trade_book_service import startup_trade_book_service, shutdown_trade_book_service

# --- Configuración de logging ---
logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
    format='%(asctime)s | %(levelname)-8s | %(name)-25s | %(message)s',
    datefmt='%Y-%m-%d %H:%M:%S'
)
logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
logging.getLogger("httpx").setLevel(logging.WARNING) # httpx loguea cada petición en INFO
# --------------------------------

@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup: cargar el primer snapshot del backend
    logger = logging.getLogger("main.lifespan")
    logger.info("=== Aplicación Iniciando (Lifespan) ===")
    await startup_trade_book_service()
    logger.info("=== Startup vía Lifespan Finalizado ===")

    yield # La aplicación se ejecuta aquí

    # Shutdown
    logger.info("=== Iniciando Cierre (Lifespan) ===")
    await shutdown_trade_book_service()
    logger.info("=== Cierre vía Lifespan Finalizado ===")


app = FastAPI(
    title=settings.PROJECT_NAME,
    openapi_url=f"{settings.API_V1_STR}/openapi.json",
    version="0.1.0",
    lifespan=lifespan
)

app.include_router(api_router, prefix=settings.API_V1_STR)

@app.get("/")
async def root():
    return {"message": f"Welcome to {settings.PROJECT_NAME} - v0.1.0"}
