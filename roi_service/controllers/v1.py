from fastapi import APIRouter

from . import roi

router = APIRouter(prefix="/v1")
router.include_router(roi.router)
