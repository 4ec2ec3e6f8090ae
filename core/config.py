from pathlib import Path
from dotenv import load_dotenv
from pydantic import field_validator
from pydantic_settings import BaseSettings

# Cargar variables de entorno desde .env
load_dotenv()


class Settings(BaseSettings):
    """Configuración leída de variables de entorno (y del .env si existe)."""

    # Archivo JSON donde se guarda el restaurante completo
    DATA_FILE: Path = Path("restaurant_data.json")
    LOG_LEVEL: str = "INFO"

    @field_validator("LOG_LEVEL", mode="after")
    @classmethod
    def normalize_level(cls, v: str) -> str:
        return (v or "INFO").strip().upper()


settings = Settings()
