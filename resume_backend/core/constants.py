"""Application constants.

Contains the skill catalog offered to the upload and search screens, and
defaults used by the upload and download workflows.
"""

from datetime import timedelta

# ---------------------------------------------------------------------------
# Skill Catalog
# Offered by the skill picker and the search filter.  The server does not
# reject skills outside this list.
# ---------------------------------------------------------------------------
SKILL_CATALOG: tuple[str, ...] = (
    "Java", "Python", "C++", "C#", "JavaScript", "TypeScript", "React",
    "Angular", "Vue.js", "Node.js", "Express.js", "MongoDB", "SQL", "MySQL",
    "PostgreSQL", "AWS", "Azure", "Google Cloud", "Docker", "Kubernetes",
    "Machine Learning", "Data Science", "HTML", "CSS", "SASS", "Bootstrap",
    "Tailwind CSS", "Git", "REST API", "GraphQL",
)

# ---------------------------------------------------------------------------
# Upload / download
# ---------------------------------------------------------------------------
DEFAULT_CONTENT_TYPE: str = "application/octet-stream"
SIGNED_URL_TTL: timedelta = timedelta(minutes=10)
UPLOAD_SUCCESS_MESSAGE: str = "Resume uploaded successfully"
LIVENESS_MESSAGE: str = "Backend is LIVE"
