"""HTTP API layer: app factory, routers, dependencies, middleware."""
