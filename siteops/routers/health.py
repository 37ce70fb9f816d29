from fastapi import APIRouter
from siteops.schemas.types import to_utc_iso
from siteops.utils.helpers import utcnow

router = APIRouter(prefix="/rpc", tags=["health"])


@router.get("/healthcheck")
def healthcheck():
    return {"status": "ok", "timestamp": to_utc_iso(utcnow())}
