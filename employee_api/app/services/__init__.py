"""
Service layer abstraction.

Services encapsulate the operations exposed by the API and depend on
a repository passed to their constructor, so the storage backend can
be swapped without changing API handlers.
"""
