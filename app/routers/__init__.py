"""
API Routers
"""
from .otp import router as otp_router

__all__ = ["otp_router"]
