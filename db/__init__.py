"""
db/ - Database Layer
====================
Owns the PostgreSQL connection pool, the error types raised by the data-access
layer, and the dynamic query builder used by property search.
This layer is the lowest in the architecture and has no dependencies on other layers.
"""
