"""Resolver package for the GraphQL schema.

Query, mutation and relationship-field resolvers referenced by the GraphQL
types. Each entity module owns its create/update/delete logic; ``references``
turns stored identifiers back into documents.
"""
