# =============================================================================
# core/__init__.py
# =============================================================================
# Business logic for the course advisor tools.
#
# Nothing in this package imports FastMCP.  The recommendation table and the
# response formatter are plain Python and can be used and tested without a
# running MCP server.  The only third-party dependency here is httpx, used by
# core/fetcher.py for the single outbound call of the fetchApi tool.
# =============================================================================
