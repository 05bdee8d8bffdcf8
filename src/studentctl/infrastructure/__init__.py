"""Infrastructure layer — SQLite engine, schema, and the student repository.

This layer depends on stdlib and SQLAlchemy, plus the domain record it
maps rows to.  It must never import from services, commands, or output.
"""
