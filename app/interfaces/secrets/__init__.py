"""
Interfaces for the secrets bounded context.

HTTP routes, request/response schemas and payload decoding.
"""
