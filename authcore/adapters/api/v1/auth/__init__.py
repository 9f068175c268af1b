from fastapi import APIRouter

from .routes.otp import router as otp_router
from .routes.refresh import router as refresh_router

router = APIRouter()
router.include_router(refresh_router, prefix="/refresh")
router.include_router(otp_router, prefix="/otp")
