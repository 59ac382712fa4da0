"""
podcast_api.api.routers

Plain HTTP routers mounted next to the GraphQL endpoint.
"""
