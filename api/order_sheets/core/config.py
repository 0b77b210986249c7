"""
Configuracion central de la aplicacion.
Gestiona variables de entorno y configuraciones globales.

La instancia `settings` se construye una sola vez al iniciar el proceso y es
inmutable (frozen): los componentes la reciben por referencia, nadie la muta.
"""
from typing import Literal

from pydantic_settings import BaseSettings
from pydantic import Field, computed_field

from order_sheets.shared.constants.sheet_constants import ImageCellMode


class Settings(BaseSettings):
    """
    Clase de configuracion de la aplicacion.
    Lee variables de entorno y proporciona valores por defecto.

    - DATABASE_URL se puede especificar completa o por componentes
    - DB_ID_TYPE debe coincidir con el tipo de las claves en la base de datos
    - GOOGLE_PRIVATE_KEY puede venir con saltos de linea escapados ("\\n")
    - IMAGE_CELL_MODE decide como se renderizan las imagenes y, con ello,
      el valueInputOption de la escritura (formula -> USER_ENTERED, url -> RAW)
    """

    # Configuracion de la aplicacion
    APP_NAME: str = Field(default="Order Sheet Sync")
    APP_VERSION: str = Field(default="1.0.0")
    DEBUG: bool = Field(default=False)
    ENVIRONMENT: str = Field(default="production")

    # Configuracion del servidor
    HOST: str = Field(default="0.0.0.0")
    PORT: int = Field(default=8000)

    # Base de datos (origen de las ordenes) - Componentes separados
    DATABASE_HOST: str = Field(default="localhost")
    DATABASE_PORT: int = Field(default=5432)
    DATABASE_USER: str = Field(default="postgres")
    DATABASE_PASSWORD: str = Field(default="postgres")
    DATABASE_NAME: str = Field(default="postgres")

    # Base de datos - URL completa (override de componentes si se proporciona)
    DATABASE_URL: str = Field(default="")
    DB_POOL_SIZE: int = Field(default=5)
    DB_MAX_OVERFLOW: int = Field(default=10)
    # Tipo de las claves de orders/purchases en el esquema real
    DB_ID_TYPE: Literal["uuid", "text", "bigint"] = Field(default="uuid")

    # Storage publico de imagenes (Supabase)
    SUPABASE_URL: str = Field(default="")
    IMAGE_BUCKET: str = Field(default="purchase-images")

    # Google Sheets
    GOOGLE_SHEET_ID: str = Field(default="")
    GOOGLE_SERVICE_ACCOUNT_EMAIL: str = Field(default="")
    GOOGLE_PRIVATE_KEY: str = Field(default="")
    GOOGLE_TOKEN_URL: str = Field(default="https://oauth2.googleapis.com/token")
    GOOGLE_SHEETS_API_URL: str = Field(default="https://sheets.googleapis.com/v4")
    GOOGLE_SHEETS_SCOPE: str = Field(default="https://www.googleapis.com/auth/spreadsheets")
    GOOGLE_TOKEN_LIFETIME_SECONDS: int = Field(default=3600)
    HTTP_TIMEOUT_SECONDS: float = Field(default=30.0)

    # Comportamiento del sync
    IMAGE_CELL_MODE: ImageCellMode = Field(default=ImageCellMode.FORMULA)
    FORMAT_SHEETS: bool = Field(default=True)
    CLEAR_STALE_ROWS: bool = Field(default=False)
    SERIALIZE_SHEET_CREATION: bool = Field(default=False)

    # Logging
    LOG_LEVEL: str = Field(default="INFO")
    LOG_FILE: str = Field(default="logs/app.log")

    @computed_field
    @property
    def effective_database_url(self) -> str:
        """
        Retorna la URL de base de datos efectiva.
        Si DATABASE_URL esta definida, la usa directamente.
        Si no, construye la URL desde los componentes individuales.
        """
        if self.DATABASE_URL:
            return self.DATABASE_URL
        return (
            f"postgresql+asyncpg://{self.DATABASE_USER}:{self.DATABASE_PASSWORD}"
            f"@{self.DATABASE_HOST}:{self.DATABASE_PORT}/{self.DATABASE_NAME}"
        )

    @computed_field
    @property
    def google_private_key_pem(self) -> str:
        """Clave privada PEM con los saltos de linea restaurados."""
        return self.GOOGLE_PRIVATE_KEY.replace("\\n", "\n")

    @computed_field
    @property
    def storage_base_url(self) -> str:
        """Base publica del storage sin la barra final."""
        return self.SUPABASE_URL.rstrip("/")

    @computed_field
    @property
    def is_development(self) -> bool:
        """Indica si el entorno es de desarrollo."""
        return self.ENVIRONMENT.lower() == "development"

    class Config:
        """Configuracion de Pydantic."""
        env_file = ".env"
        case_sensitive = True
        extra = "ignore"  # Ignorar campos extra del .env
        frozen = True


# Instancia global de configuracion (inmutable)
settings = Settings()
