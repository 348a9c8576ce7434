from __future__ import annotations

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.api.routes import router
from app.services.price_service import PriceService

app = FastAPI(title="Crypto Price Gateway", version="0.1.0")

# catalog and prices are public data: any origin, no credentials
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=False,
    allow_methods=["GET", "OPTIONS"],
    allow_headers=["*"],
)
app.include_router(router, prefix="/api")

app.state.price_service = PriceService()
