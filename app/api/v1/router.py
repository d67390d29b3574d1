from fastapi import APIRouter
from app.api.v1 import contact

api_router = APIRouter()

# Include contact form endpoints (detailed quote + quick message)
api_router.include_router(contact.router)
