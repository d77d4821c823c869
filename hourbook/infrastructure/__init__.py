"""
Infrastructure layer for Hourbook.

Implements the domain ports against concrete systems:
- Database (SQLAlchemy, SQLite or PostgreSQL)
- Authentication (HS256 bearer tokens)
- AI text generation (OpenAI-compatible HTTP API)
- HTTP surface (FastAPI routers and middleware)
"""
