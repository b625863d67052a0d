"""
Infrastructure layer package.

Contains concrete implementations (adapters) of the ports
defined in the domain layer. This is where secret store backends,
error taxonomies, and other external integrations live.
"""
