# taskboard/config/settings.py
# Runtime configuration loaded from the environment

import os
from typing import List

from dotenv import load_dotenv

load_dotenv()


class Settings:
    """Application settings"""

    APP_NAME = os.getenv("APP_NAME", "Taskboard GraphQL API")

    # Server
    HOST = os.getenv("HOST", "0.0.0.0")
    PORT = int(os.getenv("PORT", "8000"))
    RELOAD = os.getenv("RELOAD", "false").lower() == "true"

    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

    # Comma separated, "*" allows every origin
    CORS_ORIGINS = os.getenv(
        "CORS_ORIGINS",
        "http://localhost:3000,http://localhost:5173,http://127.0.0.1:3000",
    )

    # Page size used by the tasks query when no limit is given
    DEFAULT_TASK_LIMIT = int(os.getenv("DEFAULT_TASK_LIMIT", 50))

    # Caller identity used when a request carries no X-User-Id header
    DEFAULT_USER_ID = os.getenv("DEFAULT_USER_ID", "1")

    @classmethod
    def get_cors_origins(cls) -> List[str]:
        """Get the allowed CORS origins as a list"""
        return [origin.strip() for origin in cls.CORS_ORIGINS.split(",") if origin.strip()]


settings = Settings()
