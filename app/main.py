from __future__ import annotations

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.api.routers import admin, analytics, auth, billing, links, me, profile, public
from app.shared.config import get_settings


app = FastAPI(title="MyProfile API")
app.add_middleware(
    CORSMiddleware,
    allow_origins=get_settings().cors_allow_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(auth.router)
app.include_router(me.router)
app.include_router(profile.router)
app.include_router(links.router)
app.include_router(public.router)
app.include_router(analytics.router)
app.include_router(admin.router)
app.include_router(billing.router)
