from __future__ import annotations

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # --- app ---
    app_name: str = "Sunway Demo"
    log_level: str = "INFO"

    # --- server ---
    host: str = "0.0.0.0"
    port: int = 80

    model_config = {"env_file": ".env", "env_prefix": "SUNWAY_"}


settings = Settings()
