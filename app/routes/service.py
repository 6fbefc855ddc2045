from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from app import config
from app.database import get_db

router = APIRouter(tags=["service"])

@router.get("/")
def root():
    return {"ok": True, "service": config.SERVICE_NAME}

@router.get("/status")
def api_status():
    return {"message": "API Online"}

@router.get("/health")
def health(db: Session = Depends(get_db)):
    """Health check endpoint for Docker health checks"""
    try:
        db.execute(text("SELECT 1"))
        return {"status": "healthy", "database": "connected"}
    except SQLAlchemyError as e:
        return JSONResponse(
            status_code=503,
            content={"status": "unhealthy", "database": "disconnected", "error": str(e)},
        )
