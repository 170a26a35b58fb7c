from __future__ import annotations

import os
from pathlib import Path
from typing import List


class Settings:
    """Centralized configuration for the MetaBalance backend."""

    def __init__(self) -> None:
        base_dir = Path(__file__).resolve().parent
        repo_root = base_dir.parent
        data_root_default = repo_root / "data"

        self.data_root: Path = Path(
            os.environ.get("METABALANCE_DATA_ROOT") or data_root_default
        ).expanduser()
        self.app_db_path: Path = Path(
            os.environ.get("METABALANCE_DB_PATH") or (self.data_root / "metabalance.db")
        ).expanduser()
        # In production you MUST set METABALANCE_JWT_SECRET.
        self.jwt_secret: str = os.environ.get("METABALANCE_JWT_SECRET") or "dev-secret-change-me"
        self.token_ttl_days: int = int(os.environ.get("METABALANCE_TOKEN_TTL_DAYS") or "7")
        self.cookie_secure: bool = (os.environ.get("METABALANCE_COOKIE_SECURE") or "").strip() in {"1", "true", "True"}
        self.log_level: str = (os.environ.get("METABALANCE_LOG_LEVEL") or "INFO").upper()

        # Profile defaults are applied for this account on first read.
        self.owner_email: str | None = (os.environ.get("METABALANCE_OWNER_EMAIL") or "").strip().lower() or None

        # ---- LLM (OpenAI-compatible, xAI Grok by default) ----
        self.llm_api_key: str | None = os.environ.get("METABALANCE_LLM_API_KEY") or os.environ.get("XAI_API_KEY")
        self.llm_base_url: str = os.environ.get("METABALANCE_LLM_BASE_URL", "https://api.x.ai/v1")
        self.llm_model: str = os.environ.get("METABALANCE_LLM_MODEL", "grok-4-1-fast-non-reasoning")
        self.llm_timeout: float = float(os.environ.get("METABALANCE_LLM_TIMEOUT", "60"))
        self.llm_max_tokens: int = int(os.environ.get("METABALANCE_LLM_MAX_TOKENS", "1000"))
        self.llm_temperature: float = float(os.environ.get("METABALANCE_LLM_TEMPERATURE", "0.7"))

        # ---- Spoonacular nutrition lookup ----
        self.spoonacular_api_key: str | None = os.environ.get("SPOONACULAR_API_KEY")
        self.spoonacular_base_url: str = os.environ.get(
            "SPOONACULAR_BASE_URL", "https://api.spoonacular.com"
        )
        self.spoonacular_timeout: float = float(os.environ.get("SPOONACULAR_TIMEOUT", "15"))

        cors = os.environ.get("METABALANCE_CORS_ORIGINS", "*")
        if cors.strip() == "*":
            self.cors_origins: List[str] = ["*"]
        else:
            self.cors_origins = [
                origin.strip() for origin in cors.split(",") if origin.strip()
            ]


settings = Settings()
