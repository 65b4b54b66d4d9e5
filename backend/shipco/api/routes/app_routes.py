from fastapi import APIRouter

router = APIRouter()


@router.get("/")
def root():
    return "ShipCo Tracking API"


@router.get("/api/health")
def health():
    return {"ok": True}
