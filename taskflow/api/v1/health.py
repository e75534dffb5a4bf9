"""Liveness and database readiness probe"""
from fastapi import APIRouter

from taskflow.database import health_check

router = APIRouter()


@router.get("/health")
def health():
    database_ok = health_check()
    return {"status": "ok" if database_ok else "degraded", "database": database_ok}
