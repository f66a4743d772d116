"""HTTP layer: dependencies, routers and endpoint modules."""
