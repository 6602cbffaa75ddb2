"""Domain Layer: record types, value objects, ports and domain errors.

Nothing in here depends on the core or infrastructure layers.
"""
