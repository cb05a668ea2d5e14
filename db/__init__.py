"""
db/ - Database Layer
====================
Handles PostgreSQL connections, database/schema bootstrap and the single
query-execution helper every repository goes through.
This layer is the lowest in the architecture and has no dependencies on other layers.
"""
