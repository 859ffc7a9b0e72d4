from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Base de Datos ("sqlite://" = almacén en memoria)
    DATABASE_URL: str = "sqlite:///./playarena.db"

    # API
    API_PREFIX: str = "/api/v1"
    CORS_ORIGINS: list[str] = [
        "http://localhost:3000",  # React / Next.js por defecto
        "http://localhost:5173",  # Vite por defecto
        "http://localhost:5000",
    ]

    # Logging
    LOG_LEVEL: str = "INFO"

    # Si está activo, /teams/{id}/stats rechaza resultados con un winnerId
    # que no es ninguno de los dos equipos del partido
    STRICT_RESULTS: bool = False

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",  # Ignora variables extra en el .env si las hubiera
    )


settings = Settings()
