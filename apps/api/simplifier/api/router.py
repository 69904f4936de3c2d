from fastapi import APIRouter

from simplifier.api.v1.endpoints import documents, simplify

api_router = APIRouter()

# Versioned API routes
api_router.include_router(simplify.router, prefix="/v1")
api_router.include_router(documents.router, prefix="/v1")

# System / utility routes (unversioned)
@api_router.get("/ping", tags=["system"])
async def ping():
    """
    Basic ping endpoint; useful as a quick sanity check.
    """
    return {"message": "pong"}
