from fastapi import APIRouter

from ghsearch.api.v1 import users

api_router = APIRouter(prefix="/api")

api_router.include_router(users.router)
