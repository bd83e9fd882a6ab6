"""Boundary layer: database, object storage, cache and email adapters."""
