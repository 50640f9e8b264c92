"""HTTP layer: FastAPI app factory, routers and dependency container."""
