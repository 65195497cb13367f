"""
repositories/ - Data Access Layer
==================================
Read-only repositories over the `users` and `employments` tables.
Each one borrows a connection from the injected `Database`, runs a single
batch SELECT, and maps the rows to frozen domain dataclasses.
Any driver failure or malformed row surfaces as `DataAccessError`.
"""
