"""
db/ - Database Layer
====================
Owns the PostgreSQL connection pool. Repositories receive a `Database`
instance and borrow connections from it; this layer knows nothing about
users or employments.
"""
