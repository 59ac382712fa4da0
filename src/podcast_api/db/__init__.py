"""
podcast_api.db

Persistence package (SQLAlchemy async).

Responsibilities:
- Provide ORM models (User, Podcast, Episode), engine/session setup, and repositories.
"""

# Package marker.
