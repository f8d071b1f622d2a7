"""
System API endpoints (health).
"""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from filmtrack.api.dependencies import get_db
from filmtrack.database import crud
from filmtrack.exceptions import StoreFailure

router = APIRouter(tags=["system"])


@router.get("/health")
def health_check(db: Session = Depends(get_db)):
    """Health check: database reachable."""
    try:
        film_count = crud.count_films(db)
    except StoreFailure as e:
        return {"status": "unhealthy", "database": e.error or e.message}
    return {
        "status": "healthy",
        "database": "connected",
        "films": film_count,
    }
