"""Business logic services.

Services contain all business logic and are called by routes.
Decoding is pure; I/O is confined to the career client and the
cache-aside orchestrator, which take their dependencies explicitly.
"""
