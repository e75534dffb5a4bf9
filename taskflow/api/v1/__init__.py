"""Version 1 API routers."""
from taskflow.api.v1 import auth, boards, columns, health, tasks

__all__ = ["auth", "boards", "columns", "health", "tasks"]
