"""
models/ - Domain Models
=======================
Frozen dataclasses for database rows, plus the pydantic views
that shape them for the HTTP response.
"""
