"""
Persistence layer for the arcade asset server.

One generic ResourceStorage is instantiated per resource kind with a
PostgreSQL query driver and a descriptor that maps rows to records.
"""
