"""
Domain layer for the problems bounded context.

This module contains the domain contracts for the problems context:
- Problem records and their work-note journal entries
- The Table API port the use cases depend on
- Domain errors
"""
