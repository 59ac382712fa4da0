"""
podcast_api.services

Service-layer package.

Responsibilities:
- Own transaction boundaries and persistence decisions.
- Enforce business rules (email uniqueness, ownership, rating bounds).
"""

# Package marker.


# --- Module Notes -----------------------------------------------------------
# Services receive an AsyncSession and are testable without the HTTP/GraphQL layers.
