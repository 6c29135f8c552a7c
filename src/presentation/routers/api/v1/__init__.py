"""API v1 routers.

RESTful resource-based endpoints following strict REST compliance.
All endpoints use resource nouns, not action verbs.

Resources:
    /api/v1/password-reset-tokens             - Reset token issuance
    /api/v1/password-reset-otps               - One-time code delivery
    /api/v1/password-reset-otp-verifications  - One-time code checks
    /api/v1/password-resets                   - Password reset execution
"""

from fastapi import APIRouter

from src.core.config import settings
from src.presentation.routers.api.v1.password_resets import (
    password_reset_otp_verifications_router,
    password_reset_otps_router,
    password_reset_tokens_router,
    password_resets_router,
)

v1_router = APIRouter(prefix=settings.api_v1_prefix)
v1_router.include_router(password_reset_tokens_router)
v1_router.include_router(password_reset_otps_router)
v1_router.include_router(password_reset_otp_verifications_router)
v1_router.include_router(password_resets_router)

__all__ = [
    "v1_router",
]
