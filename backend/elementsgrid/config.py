"""Build configuration from environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    elementsgrid_env: str = "development"
    elementsgrid_log_level: str = "info"

    # Wikipedia extracts API
    wiki_api_url: str = "https://en.wikipedia.org/w/api.php"
    wiki_user_agent: str = "elementsgrid/0.1 (periodic table asset builder)"
    batch_size: int = 20
    batch_delay_seconds: float = 0.5  # ample rate limiting
    request_timeout: float | None = None  # None keeps the httpx default

    # Grid layout
    grid_rows: int = 10
    grid_columns: int = 18

    output_path: str = "assets/elementsGrid.json"

    # CORS
    cors_origins: list[str] = ["http://localhost:3000"]

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
