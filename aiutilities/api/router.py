from fastapi import APIRouter

from aiutilities.features.cv.api import router as cv_router
from aiutilities.features.flashcards.api import router as flashcards_router

api_router = APIRouter()
api_router.include_router(cv_router)
api_router.include_router(flashcards_router)
