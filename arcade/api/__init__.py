"""HTTP API routers for the arcade asset server."""
