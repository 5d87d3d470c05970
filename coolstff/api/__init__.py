"""HTTP API module.

FastAPI routers, schemas and middleware for the coolstff API.
"""
