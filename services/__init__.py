"""
services/ - Service Layer
=========================
Awaitable entry points used by the web layer. Each call runs one repository
operation on a worker thread.
"""
