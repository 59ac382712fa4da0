"""
podcast_api.api

API package for the podcast backend.

Responsibilities:
- FastAPI app factory, lifespan, and plain HTTP routers.
- API-layer dependency wiring (settings, DB sessions).
"""

# Package marker.


# --- Module Notes -----------------------------------------------------------
# The API layer stays thin: transport + auth context + delegation to GraphQL resolvers.
