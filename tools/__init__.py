# =============================================================================
# tools/__init__.py
# =============================================================================
# FastMCP tool wrappers.
#
# Each tool here:
#   1. Declares typed parameters (FastMCP turns them into the tool schema
#      and validates incoming calls against it)
#   2. Logs the call
#   3. Delegates to a function in core/
#   4. Returns that function's text result
#
# Tools do NOT contain formatting or HTTP logic; that lives in core/.
# =============================================================================
