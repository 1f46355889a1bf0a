"""HTTP API (FastAPI) for the todo list backend."""
