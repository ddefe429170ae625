from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from plagcheck.config import CORS_ORIGINS
from plagcheck.logger import logger
from plagcheck.routers.comparison import router as comparison_router

app = FastAPI(title="Plagiarism Checker")

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(comparison_router)

logger.info(f"✅ Plagiarism checker ready (CORS origins: {', '.join(CORS_ORIGINS) or 'none'})")
