"""
Application layer for the problems bounded context.

Use cases forward problem operations through the Table API port.
No framework or infrastructure imports allowed.
"""
