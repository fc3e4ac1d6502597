"""
GraphQL schema package
"""
