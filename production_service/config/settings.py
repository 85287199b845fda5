from pydantic import AnyHttpUrl, Field, TypeAdapter, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


_HTTP_URL = TypeAdapter(AnyHttpUrl)


class Settings(BaseSettings):
    """
    Configuración de la aplicación utilizando Pydantic BaseSettings.
    Carga automáticamente las variables de entorno.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    # API Configuration
    API_PREFIX: str = Field("", description="Prefijo para todas las rutas (por defecto en la raíz)")
    PROJECT_NAME: str = "API FastFood - Microserviço de Produção"
    PROJECT_DESCRIPTION: str = "Fila de produção da cozinha e sincronização de status com pedidos e pagamento"
    VERSION: str = "1.0.0"
    APP_PORT: int = Field(3335, description="Puerto de uvicorn")

    # Application Settings
    DEBUG: bool = Field(False, description="Modo de depuración (auto reload)")
    ENVIRONMENT: str = Field("development", description="Entorno de ejecución")
    DOCS_ENABLED: bool = Field(True, description="Exponer Swagger UI en /docs")

    # Sibling services
    ORDER_SERVICE_URL: str = Field("http://localhost:3333", description="URL base del microservicio de pedidos")
    PAYMENT_SERVICE_URL: str = Field("http://localhost:3334", description="URL base del microservicio de pagos")
    MICROSERVICE_TIMEOUT: float = Field(10.0, description="Timeout en segundos para llamadas a otros microservicios")

    # Database Settings
    DB_URL: str | None = Field(None, description="URL async de SQLAlchemy; almacenamiento en memoria si no se define")
    DB_ECHO: bool = Field(False, description="Log SQL queries (solo para debug)")
    DB_POOL_SIZE: int = Field(5, description="Tamaño del pool de conexiones")
    DB_MAX_OVERFLOW: int = Field(10, description="Conexiones extra permitidas sobre el pool")
    DB_POOL_RECYCLE: int = Field(1800, description="Segundos antes de reciclar una conexión")

    # Logging
    LOG_LEVEL: str = Field("INFO", description="Nivel de log raíz")
    LOG_JSON: bool = Field(False, description="Emitir logs en formato JSON")

    # Sentry Configuration
    SENTRY_DSN: str | None = Field(None, description="Sentry DSN para seguimiento de errores")

    @field_validator("ORDER_SERVICE_URL", "PAYMENT_SERVICE_URL")
    @classmethod
    def validate_service_url(cls, v: str) -> str:
        """Valida la URL y elimina la barra final"""
        _HTTP_URL.validate_python(v)
        return v.rstrip("/")

    @field_validator("LOG_LEVEL")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Invalid LOG_LEVEL: {v}")
        return level

    @property
    def uses_database(self) -> bool:
        return bool(self.DB_URL)


# Singleton para configuración
_settings_instance = None


def get_settings() -> Settings:
    """
    Retorna una instancia cacheada de la configuración.
    Esto evita cargar las variables de entorno múltiples veces.
    """
    global _settings_instance
    if _settings_instance is None:
        _settings_instance = Settings()
    return _settings_instance


def reset_settings() -> None:
    """Descarta la configuración cacheada para recargar el entorno."""
    global _settings_instance
    _settings_instance = None
