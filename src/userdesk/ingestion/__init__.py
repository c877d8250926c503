"""Ingestion layer.

This package contains adapters that fetch data from the remote users API
and hand normalized records to the record store.
"""

__all__: list[str] = []
