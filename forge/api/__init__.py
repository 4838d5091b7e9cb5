"""
HTTP layer: envelopes, schemas, middleware and routes.
"""
