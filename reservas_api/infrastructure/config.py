from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="RESERVAS_", env_file=".env", extra="ignore")

    host: str = "localhost"
    port: int = 3000
    data_path: Path = Path(__file__).resolve().parents[1] / "data" / "reservas.json"
    log_level: str = "INFO"
    log_file: Path | None = None

    api_title: str = "API Reservas Hoteleras"
    api_version: str = "1.0.0"
    api_description: str = "Documentación de la API para gestionar reservas hoteleras."


settings = Settings()
