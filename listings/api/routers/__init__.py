"""Aggregate API routers."""

from fastapi import APIRouter

from .racing import router as racing_router
from .sports import router as sports_router
from .system import router as system_router

ALL_ROUTERS: tuple[APIRouter, ...] = (
    system_router,
    racing_router,
    sports_router,
)

__all__ = ["ALL_ROUTERS"]
