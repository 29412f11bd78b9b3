"""Data stores for caching.

Stores handle:
- Redis: pooled connections, raw get/set with TTL

No profile decoding or fetch logic in stores - that belongs in services.
"""
