from fastapi import APIRouter

router = APIRouter()


@router.get("/")
async def read_root():
    """Service banner listing the route groups."""
    return {
        "message": "Todo API Server",
        "docs": "/docs",
        "routes": {"auth": "/auth", "todos": "/todos"},
    }
