from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from app.services.submission_pipeline import (
    DETAILED_PROJECT_ROUTE,
    QUICK_SERVICE_ROUTE,
    DispatcherFactory,
    default_dispatcher,
    handle_submission,
)

router = APIRouter()


def get_dispatcher_factory() -> DispatcherFactory:
    """The dispatcher is built lazily so validation works without email config"""
    return default_dispatcher


@router.post("/contact/contact", tags=["contact"])
async def contact_handler(request: Request, dispatcher_factory: DispatcherFactory = Depends(get_dispatcher_factory)):
    """
    Detailed quote request from the contact page

    - **name**, **email**, **phone**: contact details
    - **company**: optional company name
    - **projectType**, **budget**, **timeline**: selected options
    - **message**: project description (10-1000 characters)
    """
    status_code, body = await handle_submission(await request.body(), DETAILED_PROJECT_ROUTE, dispatcher_factory)
    return JSONResponse(status_code=status_code, content=body)


@router.post("/sendMessage/sendMessage", tags=["contact"])
async def send_message_handler(request: Request, dispatcher_factory: DispatcherFactory = Depends(get_dispatcher_factory)):
    """
    Quick message from the "send message" modal

    - **fullName**, **email**, **phone**: contact details
    - **service**: selected service
    - **message**: optional note (up to 500 characters)
    """
    status_code, body = await handle_submission(await request.body(), QUICK_SERVICE_ROUTE, dispatcher_factory)
    return JSONResponse(status_code=status_code, content=body)
