# user_dashboard/config/settings.py
from urllib.parse import quote_plus
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import field_validator


class Settings(BaseSettings):
    # PostgreSQL
    db_host: str = "localhost"
    db_port: int = 5432
    db_name: str = "users"
    db_user: str = "postgres"
    db_password: str = "postgres"
    db_echo: bool = False

    # URL completa (ex: sqlite+pysqlite:///./users.db); ignora as partes acima
    database_uri: str | None = None

    # sem migrations: cria a tabela no startup
    auto_create_tables: bool = True

    environment: str = "development"
    debug: bool = False
    log_level: str = "INFO"

    app_prefix: str = ""
    api_prefix: str = "/api"

    # Ex: "http://localhost:3000,http://127.0.0.1:3000"
    cors_origins_raw: str = "http://localhost:3000,http://127.0.0.1:3000"

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("db_host", "db_name", "db_user", "db_password", "database_uri", mode="before")
    @classmethod
    def strip_strings(cls, v):
        if isinstance(v, str):
            return v.strip().strip('"').strip("'")
        return v

    @field_validator("app_prefix", "api_prefix", mode="before")
    @classmethod
    def normalize_prefix(cls, v):
        if isinstance(v, str):
            v = v.strip().rstrip("/")
            if v and not v.startswith("/"):
                v = f"/{v}"
        return v

    @property
    def database_url(self) -> str:
        if self.database_uri:
            return self.database_uri

        user = quote_plus(self.db_user)
        password = quote_plus(self.db_password)
        host = self.db_host
        port = self.db_port
        db = self.db_name

        return f"postgresql+psycopg2://{user}:{password}@{host}:{port}/{db}"

    @property
    def cors_origins(self) -> list[str]:
        return [o.strip() for o in self.cors_origins_raw.split(",") if o.strip()]

    @property
    def full_api_prefix(self) -> str:
        return f"{self.app_prefix}{self.api_prefix}"


settings = Settings()
