from fastapi import APIRouter

router = APIRouter(tags=["health"])


@router.get("/")
def health():
    return {"success": True, "message": "Storefront service is running"}
