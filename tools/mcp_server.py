# =============================================================================
# tools/mcp_server.py  :  FastMCP Tool Server (ALL tools in one place)
# =============================================================================
#
# WHAT THIS FILE DOES:
#   Defines the MCP tools this server exposes.  Each tool is a thin wrapper
#   around a core/ function: FastMCP validates the parameters, the tool
#   logs the call, hands off to core/, and returns the text it gets back.
#
# TOOLS:
#   - courseRecommender  -> core.courses.render_recommendation
#   - fetchApi           -> core.fetcher.fetch_url
#
#   Tool names and parameter names are part of the public tool schema that
#   existing clients call, hence the camelCase.
#
# RUNNING THIS SERVER:
#   a) python main.py                       (transport from MCP_TRANSPORT)
#   b) python -m tools.mcp_server           (stdio only)
# =============================================================================

import logging
import sys
from typing import Optional

from fastmcp import FastMCP

# The tools layer depends on core/ and nothing else.
from core.config import settings
from core.courses import render_recommendation
from core.fetcher import fetch_url
from core.models import ExperienceLevel, FetchRequest, HttpMethod

# =============================================================================
# Logging Setup
# =============================================================================
# We log to STDERR because the stdio transport speaks MCP over STDOUT.  Any
# log line on stdout would corrupt the protocol stream.
#
#   - CYAN for incoming requests (tool name + parameters)
#   - GREEN for responses
#   - YELLOW for intermediate status messages
# =============================================================================

_CYAN = "\033[36m"     # Requests
_GREEN = "\033[32m"    # Responses
_YELLOW = "\033[33m"   # Status/progress messages
_RESET = "\033[0m"

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s [MCP] %(message)s",
    datefmt="%H:%M:%S",
    stream=sys.stderr,
)

logger = logging.getLogger("course-advisor")


def _log_request(tool_name: str, **params) -> None:
    """Log an incoming tool call with its parameters in CYAN."""
    param_str = ", ".join(f"{k}={v!r}" for k, v in params.items())
    logger.info(f"{_CYAN}{tool_name} called with: {param_str}{_RESET}")


def _log_status(message: str) -> None:
    """Log an intermediate status message in YELLOW."""
    logger.info(f"{_YELLOW}  → {message}{_RESET}")


def _log_response(tool_name: str, result: str) -> str:
    """Log the first line and size of a text result in GREEN, then return it."""
    first_line = result.split("\n", 1)[0]
    logger.info(f"{_GREEN}  ← {tool_name} response: {first_line} ({len(result)} chars){_RESET}")
    return result


# =============================================================================
# Create the FastMCP server instance
# =============================================================================
mcp = FastMCP(settings.SERVER_NAME)


# =============================================================================
# TOOL 1: courseRecommender
# =============================================================================
@mcp.tool(name="courseRecommender")
def recommend_course(experienceLevel: ExperienceLevel) -> str:
    """Give a course recommendation based on experience level.

    Args:
        experienceLevel: The learner's current level, "beginner" or
                         "intermediate".

    Returns:
        The recommended course: title, level, description, duration,
        prerequisites, the list of topics, why it fits and what to do next.
    """
    level = ExperienceLevel(experienceLevel)
    _log_request("courseRecommender", experienceLevel=level.value)
    return _log_response("courseRecommender", render_recommendation(level))


# =============================================================================
# TOOL 2: fetchApi
# =============================================================================
# One outbound HTTP call per invocation.  The core fetcher never raises, so
# upstream failures come back as readable text rather than tool errors.
# =============================================================================
@mcp.tool(name="fetchApi")
async def fetch_api(
    url: str,
    method: HttpMethod = "GET",
    headers: Optional[dict[str, str]] = None,
    body: Optional[str] = None,
) -> str:
    """Fetch data from any HTTP API and return a readable summary.

    JSON responses are summarized (item counts, sample items, key fields);
    text responses are returned as-is.  Failed requests report the status
    code and the response body.

    Args:
        url: Absolute URL to request, e.g. "https://api.github.com/users/octocat".
        method: HTTP method: GET, POST, PUT, DELETE or PATCH (default GET).
        headers: Extra request headers.  These override the defaults.
        body: Request body for POST, PUT and PATCH.  Sent as JSON unless a
              Content-Type header is given.

    Returns:
        A text block with the URL, method, status and formatted response.
    """
    # Header values and bodies may carry credentials: log names and size only.
    _log_request("fetchApi", url=url, method=method,
                 headers=sorted(headers or {}),
                 body_chars=len(body) if body is not None else None)

    request = FetchRequest(url=url, method=method, headers=headers, body=body)
    _log_status(f"{request.method} {request.url}")
    result = await fetch_url(request)
    return _log_response("fetchApi", result)


# =============================================================================
# Server entry point
# =============================================================================
if __name__ == "__main__":
    mcp.run()
