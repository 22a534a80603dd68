"""
FastAPI app entry point aggregating per-entity routers under questions_db/routes.
Keep as `uvicorn questions_db.api:app`.
"""
from __future__ import annotations


from fastapi import FastAPI

from .logs import ensure_log_schema


app = FastAPI(title="questions-db-api", version="0.1.0")


@app.on_event("startup")
def on_startup():
    ensure_log_schema()


from .routes import base as base_routes
from .routes import users as users_routes
from .routes import questions as questions_routes
from .routes import replies as replies_routes
from .routes import tags as tags_routes
from .routes import logs as logs_routes

app.include_router(base_routes.router)
app.include_router(users_routes.router)
app.include_router(questions_routes.router)
app.include_router(replies_routes.router)
app.include_router(tags_routes.router)
app.include_router(logs_routes.router)
