"""
Domain Layer

Business entities and planning rules: fault mapping, technician ranking
and work order defaults. No I/O beyond reading the packaged mapping table.
"""
