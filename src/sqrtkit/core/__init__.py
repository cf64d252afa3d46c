"""
Core square-root primitives, configuration, errors and result models.

Nothing here depends on an event loop or an executor.
"""
