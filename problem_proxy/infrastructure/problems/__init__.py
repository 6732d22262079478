"""
Infrastructure adapters for the problems bounded context.

Each adapter implements a domain port (ABC) and connects
to the ServiceNow instance.
"""
