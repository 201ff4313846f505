"""Configuration settings for the application."""
from pydantic_settings import BaseSettings
from pydantic import Field
from dotenv import load_dotenv

# Ensure .env values are loaded into os.environ before the settings are read.
load_dotenv()


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    database_url: str = Field(..., alias="DATABASE_URL")
    # Per-statement timeout applied to PostgreSQL connections
    db_statement_timeout_ms: int = Field(default=5000, alias="DB_STATEMENT_TIMEOUT_MS")
    db_pool_timeout: float = Field(default=10.0, alias="DB_POOL_TIMEOUT")
    # Empty URL disables caching entirely
    redis_url: str = Field(default="", alias="REDIS_URL")
    redis_connect_timeout: float = Field(default=3.0, alias="REDIS_CONNECT_TIMEOUT")
    redis_socket_timeout: float = Field(default=3.0, alias="REDIS_SOCKET_TIMEOUT")
    # Product report cache lifetime in seconds
    report_cache_ttl: int = Field(default=300, alias="REPORT_CACHE_TTL")
    log_level: str = Field(default="info", alias="LOG_LEVEL")
    log_json: bool = Field(default=True, alias="LOG_JSON")
    server_host: str = Field(default="0.0.0.0", alias="SERVER_HOST")
    server_port: int = Field(default=8080, alias="SERVER_PORT")
    project_name: str = "Catalog Service"
    api_version: str = "v1"

    class Config:
        env_file = ".env"
        case_sensitive = False
        populate_by_name = True


settings = Settings()
