"""In-memory task and project management API with a GraphQL-shaped interface."""

__version__ = "1.0.0"
