"""API Router — content routes under ``/api``."""

from __future__ import annotations

from fastapi import APIRouter

from terrific.api.endpoints.explainers import router as explainers_router
from terrific.api.endpoints.memes import router as memes_router
from terrific.api.endpoints.sports import router as sports_router
from terrific.api.endpoints.wars import router as wars_router
from terrific.api.endpoints.youtube import router as youtube_router

router = APIRouter()
router.include_router(wars_router)
router.include_router(memes_router)
router.include_router(explainers_router)
router.include_router(sports_router)
router.include_router(youtube_router)
