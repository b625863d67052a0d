"""
Application layer for the secrets bounded context.

Use cases coordinate domain entities and ports to fulfill
secrets operations. No framework or infrastructure imports allowed.
"""
