"""Infrastructure Layer: Contains concrete implementations and adapters.

Connects the application to the outside world (file system, console,
configuration, logging) by implementing the interfaces defined in the
domain layer.
"""
