"""FastAPI application entry point."""
from __future__ import annotations

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from solid_examples.api import auth, lessons, reminders, sales, shapes, workers
from solid_examples.core.logger import setup_logging

setup_logging()

# ------------------------------------------------------------------
# App creation
# ------------------------------------------------------------------
app = FastAPI(
    title="SOLID Examples API",
    description="Corrected SOLID design examples exposed over HTTP",
    version="1.0.0",
)

# CORS — allow everything for local dev
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/health", tags=["health"])
def health():
    return {"status": "ok"}


# ------------------------------------------------------------------
# Routers
# ------------------------------------------------------------------
app.include_router(auth.router)
app.include_router(sales.router)
app.include_router(shapes.router)
app.include_router(lessons.router)
app.include_router(workers.router)
app.include_router(reminders.router)
