# portfolio/routes/contact.py
import logging
from typing import Optional

from fastapi import APIRouter, Body, Depends, status

from portfolio.core.config import Settings, get_settings
from portfolio.core.error_messages import ErrorMessages, SuccessMessages
from portfolio.core.exceptions import SmsNotAvailableError
from portfolio.crud.resource_crud import ResourceRepository
from portfolio.dependencies import get_contact_repository
from portfolio.schemas.common import BAD_REQUEST, SERVER_ERROR, ErrorResponse
from portfolio.schemas.contact import ContactCreate, ContactResponse, SmsRequest
from portfolio.utils.contact_mail import ContactNotifier, get_contact_notifier

logger = logging.getLogger(__name__)

contact_router = APIRouter(prefix="/contact", tags=["Contact"], responses=SERVER_ERROR)


@contact_router.post(
    "",
    response_model=ContactResponse,
    status_code=status.HTTP_201_CREATED,
    responses=BAD_REQUEST,
    summary="Store a contact message and notify the site owner",
)
async def create_contact(
    data: ContactCreate,
    repo: ResourceRepository = Depends(get_contact_repository),
    notifier: ContactNotifier = Depends(get_contact_notifier),
):
    # Saving is the success boundary; a failed email does not fail the request.
    contact = await repo.create(data.model_dump())
    logger.info("Contact %s stored", contact["id"])

    notified = await notifier.notify(contact)
    return {
        "message": SuccessMessages.CONTACT_RECEIVED,
        "notified": notified,
        "contact": contact,
    }


@contact_router.post(
    "/sms",
    status_code=status.HTTP_501_NOT_IMPLEMENTED,
    responses={501: {"model": ErrorResponse, "description": "SMS is not available"}},
)
async def send_sms_notification(
    data: Optional[SmsRequest] = Body(default=None),
    settings: Settings = Depends(get_settings),
):
    if not settings.SMS_ENABLED:
        raise SmsNotAvailableError(ErrorMessages.SMS_DISABLED)
    raise SmsNotAvailableError(ErrorMessages.SMS_NOT_IMPLEMENTED)
