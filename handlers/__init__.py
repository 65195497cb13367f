"""
handlers/ - Presentation Layer
================================
FastAPI routers. Each handler resolves its Service through dependency
injection, delegates to it, and returns the response model.
No business logic lives here.
"""
