"""
podcast_api.auth

Authentication package.

Responsibilities:
- JWT issuing and validation.
- Password hashing.
- FastAPI dependency that resolves the session header into a User.
"""

# Package marker.
