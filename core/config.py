# core/config.py
import os
from pydantic_settings import BaseSettings
from dotenv import load_dotenv
from typing import Optional

from core.errors import ConfigurationError

# Cargar explícitamente .env si existe
load_dotenv()

# --- Definición de la Clase de Configuración ---
class Settings(BaseSettings):
    """
    Configuraciones de la aplicación cargadas desde variables de entorno
    y/o el archivo .env.
    """
    PROJECT_NAME: str = "Trade PnL Tracker"
    API_V1_STR: str = "/api/v1"
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

    # --- Backend de trades/estrategias ---
    # Única dirección requerida. No se valida al arrancar: su ausencia se detecta
    # justo antes de la primera llamada al colaborador (ver require_backend_url).
    BACKEND_URL: Optional[str] = os.getenv("BACKEND_URL")

    class Config:
        case_sensitive = True
        env_file = ".env"
        env_file_encoding = 'utf-8'

    def require_backend_url(self) -> str:
        """Devuelve BACKEND_URL sin '/' final o lanza ConfigurationError si falta."""
        url = (self.BACKEND_URL or "").strip()
        if not url:
            raise ConfigurationError("BACKEND_URL no está configurada. Defínela en el entorno o en tu archivo .env")
        return url.rstrip("/")

# --- Creación de la instancia global ---
settings = Settings()
