# =============================================================================
# main.py  :  Entry Point for the Course Advisor MCP server
# =============================================================================
#
# HOW TO RUN:
#   python main.py                          # stdio (for local MCP clients)
#   MCP_TRANSPORT=http python main.py       # streamable HTTP on /mcp
#   MCP_TRANSPORT=sse  python main.py       # server-sent events on /sse
#
# HTTP TRANSPORTS:
#   Browser-based MCP clients call the server cross-origin, so both HTTP
#   transports are wrapped in a permissive CORS policy.  Starlette's
#   CORSMiddleware also answers the OPTIONS preflight requests.
# =============================================================================

from dotenv import load_dotenv

# Load environment variables from .env BEFORE importing core/ or tools/,
# because core.config reads the environment at import time.
load_dotenv()

import logging

import uvicorn
from starlette.middleware import Middleware
from starlette.middleware.cors import CORSMiddleware

from core.config import settings
from tools.mcp_server import mcp

logger = logging.getLogger("course-advisor")

# transport name -> endpoint path
_HTTP_ENDPOINTS = {
    "http": "/mcp",
    "sse": "/sse",
}

CORS_MIDDLEWARE = [
    Middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["Content-Type"],
    ),
]


def create_http_app(transport: str):
    """Build the ASGI app for an HTTP transport ("http" or "sse")."""
    if transport not in _HTTP_ENDPOINTS:
        raise ValueError(
            f"Unknown transport '{transport}'. Expected one of: stdio, "
            + ", ".join(_HTTP_ENDPOINTS)
        )
    return mcp.http_app(
        path=_HTTP_ENDPOINTS[transport],
        transport=transport,
        middleware=CORS_MIDDLEWARE,
    )


def main() -> None:
    transport = settings.TRANSPORT
    if transport == "stdio":
        logger.info("Starting %s on stdio", settings.SERVER_NAME)
        mcp.run()
        return

    app = create_http_app(transport)
    logger.info(
        "Starting %s on http://%s:%s%s",
        settings.SERVER_NAME, settings.HOST, settings.PORT, _HTTP_ENDPOINTS[transport],
    )
    uvicorn.run(app, host=settings.HOST, port=settings.PORT,
                log_level=settings.LOG_LEVEL.lower())


if __name__ == "__main__":
    main()
