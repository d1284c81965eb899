# =============================================================================
# core/models.py  :  Data Models (the "nouns" of the system)
# =============================================================================
#
# These dataclasses define the shape of every piece of information that flows
# through the tools.  They carry no behavior.  All of them are frozen: nothing
# is mutated after construction, and nothing outlives a single tool call
# except the static course table in core/courses.py.
# =============================================================================

from dataclasses import dataclass
from enum import Enum
from typing import Literal, Optional


# -----------------------------------------------------------------------------
# ExperienceLevel: the caller's skill tier
# -----------------------------------------------------------------------------
# A str-based Enum so that FastMCP advertises it as a JSON-schema enum and
# pydantic rejects anything outside {"beginner", "intermediate"} before the
# tool body ever runs.
# -----------------------------------------------------------------------------
class ExperienceLevel(str, Enum):
    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"


# -----------------------------------------------------------------------------
# CourseRecommendation: one entry of the static recommendation table
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class CourseRecommendation:
    """A course we recommend for a given experience level."""

    title: str
    description: str
    duration: str                      # e.g. "8 weeks"
    prerequisites: str
    topics: tuple[str, ...] = ()       # Ordered, rendered as a numbered list


# -----------------------------------------------------------------------------
# FetchRequest: everything the fetch tool needs for one outbound call
# -----------------------------------------------------------------------------
HttpMethod = Literal["GET", "POST", "PUT", "DELETE", "PATCH"]

# Methods for which a request body is actually sent.
BODY_METHODS = frozenset({"POST", "PUT", "PATCH"})


@dataclass(frozen=True)
class FetchRequest:
    """A single pass-through HTTP request.

    `url` is validated by the fetcher, not here, so that a malformed URL
    becomes an error *result* instead of an exception.
    """

    url: str
    method: HttpMethod = "GET"
    headers: Optional[dict[str, str]] = None
    body: Optional[str] = None

    @property
    def sends_body(self) -> bool:
        return self.body is not None and self.method.upper() in BODY_METHODS
