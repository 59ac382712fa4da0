"""
podcast_api.graphql

GraphQL presentation layer (Strawberry).

Responsibilities:
- Schema types, inputs, and result envelopes.
- Resolvers for accounts, podcasts, and episodes.
- Per-request context and resolver guards.
"""

# Package marker.
