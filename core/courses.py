# =============================================================================
# core/courses.py  :  Course Recommendation Lookup
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Maps an experience level to a fixed course and renders it as text for
#   the courseRecommender tool.
#
# WHY A STATIC TABLE?
#   There are exactly two courses and two levels.  The table is built once at
#   import time and exposed read-only (MappingProxyType), so no tool call can
#   change what the next one sees.
#
# IDEMPOTENCY:
#   render_recommendation() is a pure function over a two-element domain.
#   Invalid levels are rejected by FastMCP's parameter validation before
#   they get here.
# =============================================================================

from types import MappingProxyType
from typing import Mapping, Union

from core.models import CourseRecommendation, ExperienceLevel


_COURSES: Mapping[ExperienceLevel, CourseRecommendation] = MappingProxyType({
    ExperienceLevel.BEGINNER: CourseRecommendation(
        title="Professional JavaScript",
        description=(
            "A hands-on introduction to modern JavaScript, from the language "
            "core to working with the browser and calling web APIs."
        ),
        duration="8 weeks",
        prerequisites="Basic HTML and CSS",
        topics=(
            "Variables, types and control flow",
            "Functions, scope and closures",
            "Arrays, objects and iteration",
            "DOM manipulation and events",
            "Asynchronous JavaScript: promises and async/await",
            "Fetching data from REST APIs",
        ),
    ),
    ExperienceLevel.INTERMEDIATE: CourseRecommendation(
        title="Professional React & Next.js",
        description=(
            "Build production-grade web applications with React and Next.js, "
            "covering component design, data fetching and deployment."
        ),
        duration="10 weeks",
        prerequisites="Solid JavaScript fundamentals (ES6+)",
        topics=(
            "Components, props and state",
            "Hooks and custom hooks",
            "Routing with the Next.js App Router",
            "Server components and data fetching",
            "Forms, validation and server actions",
            "Testing and deploying Next.js applications",
        ),
    ),
})

_RATIONALE = (
    "This course matches the {level} level: it builds on what you already "
    "know and covers the skills employers expect at the next step of your "
    "learning path."
)

_NEXT_STEPS = (
    "Set aside a few hours each week, work through every project exercise, "
    "and publish your finished projects to a portfolio. When you are "
    "comfortable with all topics, ask for the next recommendation."
)


def _coerce_level(level: Union[ExperienceLevel, str]) -> ExperienceLevel:
    # ExperienceLevel("beginner") and ExperienceLevel(ExperienceLevel.BEGINNER)
    # both work, so tools and tests can pass either form.
    return ExperienceLevel(level)


def get_recommendation(level: Union[ExperienceLevel, str]) -> CourseRecommendation:
    """Return the course recommended for `level`."""
    return _COURSES[_coerce_level(level)]


def list_levels() -> list[str]:
    """List the experience levels that have a recommendation."""
    return [level.value for level in _COURSES]


def render_recommendation(level: Union[ExperienceLevel, str]) -> str:
    """Render the recommendation for `level` as multi-section text.

    Sections, in order: title/level/description/duration/prerequisites,
    a numbered list of topics, "Why this course" and "Next steps".
    """
    level = _coerce_level(level)
    course = _COURSES[level]

    lines = [
        "🎓 Course Recommendation",
        "",
        f"Title: {course.title}",
        f"Level: {level.value.capitalize()}",
        f"Description: {course.description}",
        f"Duration: {course.duration}",
        f"Prerequisites: {course.prerequisites}",
        "",
        "Topics covered:",
    ]
    lines.extend(f"{i}. {topic}" for i, topic in enumerate(course.topics, start=1))
    lines += [
        "",
        "Why this course:",
        _RATIONALE.format(level=level.value),
        "",
        "Next steps:",
        _NEXT_STEPS,
    ]
    return "\n".join(lines)
