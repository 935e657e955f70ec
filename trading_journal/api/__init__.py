"""
HTTP transport: routers, dependencies, webhook auth and rate limiting.
"""
