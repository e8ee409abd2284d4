from fastapi import APIRouter

from src.projectdesk.api.routes import files, projects

api_router = APIRouter(prefix="/api")
api_router.include_router(projects.router)
api_router.include_router(files.router)
