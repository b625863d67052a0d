"""
Secrets bounded context — domain layer.

This module contains all domain logic for the secrets context:
- Secret records and their namespace binding
- Namespace resolution and authorization
- Classification of store failures into stable outcomes
"""
