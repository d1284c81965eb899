# =============================================================================
# core/config.py  :  Environment-driven settings
# =============================================================================
#
# Values are read once, at import time.  main.py calls load_dotenv() before
# importing anything from core/ or tools/, so a local .env file is honored.
# =============================================================================

import os


def _env_bool(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() in ("1", "true", "yes")


class Settings:
    # MCP server
    SERVER_NAME: str = os.getenv("MCP_SERVER_NAME", "course-advisor")
    TRANSPORT: str = os.getenv("MCP_TRANSPORT", "stdio").lower()   # stdio | http | sse
    HOST: str = os.getenv("MCP_HOST", "127.0.0.1")
    PORT: int = int(os.getenv("MCP_PORT", "8000"))

    # Outbound requests made by the fetchApi tool
    USER_AGENT: str = os.getenv("FETCH_USER_AGENT", "course-advisor-mcp/1.0")
    # Matches the 60 second maximum call duration of the hosted deployment.
    REQUEST_TIMEOUT: float = float(os.getenv("FETCH_TIMEOUT_SECONDS", "60"))

    # Logging
    VERBOSE_LOGS: bool = _env_bool("VERBOSE_LOGS", "0")
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "DEBUG" if VERBOSE_LOGS else "INFO").upper()


settings = Settings()
