"""Health check endpoint."""

from fastapi import APIRouter

from pubgate.config import Server

router = APIRouter(tags=["Health"])


@router.get("/health")
async def health() -> dict:
    return {"status": "healthy", "version": Server().version}
