"""FastAPI application setup for the weather risk service."""

from fastapi import FastAPI

from .api import router as api_router

app = FastAPI(title="Weather Risk")

# API routes
app.include_router(api_router, prefix="/v1")
