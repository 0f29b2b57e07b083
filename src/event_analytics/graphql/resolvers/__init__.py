"""Resolver package for GraphQL schema.

Resolver functions are defined in sibling modules and imported lazily by the
query types.
"""
