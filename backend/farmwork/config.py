from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    app_name: str = "FarmWork Hub"

    # CORS
    backend_cors_origins: str = "http://localhost:5173,http://localhost:3000"

    # Auth service
    auth_api_url: str = "http://localhost:3000"
    auth_timeout_seconds: float = 30.0

    # Session store (browser storage analogue)
    session_store_path: str = ".farmwork_session.json"

    # Uploads
    upload_dir: str = "uploads"

    # Pagination
    default_page_size: int = 12
    max_page_size: int = 50

    # Seed the in-memory repositories with demo jobs on startup
    seed_demo_data: bool = True

    # Logging
    log_level: str = "INFO"

    @property
    def cors_origins(self) -> list[str]:
        return [origin.strip() for origin in self.backend_cors_origins.split(",")]


settings = Settings()
