"""
Infrastructure adapters for the secrets bounded context.

Each adapter implements a domain port (ABC) and connects
to an external system: a secret store backend, its error
taxonomy, or the namespace capability source.
"""
