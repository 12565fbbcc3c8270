from fastapi import APIRouter
from studio_dash.api.v1.endpoints import (
    auth, health, users, dashboard, projects, submissions,
    clients, finance, notes, chat, documents, display
)

api_router = APIRouter()

api_router.include_router(health.router, prefix="/health", tags=["health"])
api_router.include_router(auth.router, prefix="/auth", tags=["auth"])
api_router.include_router(users.router, prefix="/users", tags=["users"])

# Dashboard views
api_router.include_router(dashboard.router, prefix="/dashboard", tags=["dashboard"])
api_router.include_router(display.router, prefix="/display", tags=["display"])

# Resource endpoints
api_router.include_router(projects.router, prefix="/projects", tags=["projects"])
api_router.include_router(submissions.router, prefix="/submissions", tags=["submissions"])
api_router.include_router(clients.router, prefix="/clients", tags=["clients"])
api_router.include_router(finance.router, prefix="/finance", tags=["finance"])
api_router.include_router(notes.router, prefix="/notes", tags=["notes"])
api_router.include_router(chat.router, prefix="/chat", tags=["chat"])
api_router.include_router(documents.router, prefix="/documents", tags=["documents"])
