"""Resolver package for GraphQL schema.

Resolvers are plain async functions that receive the store (and, for
authentication, the password hasher) explicitly, so they can be exercised
without an HTTP request. The root Query and Mutation types pull both from the
GraphQL context and delegate here.
"""

# Intentionally empty; functions are defined in sibling modules.
