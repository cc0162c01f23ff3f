"""Invites API: send, list received, accept or decline."""

import logging

from fastapi import APIRouter, Query, status
from sqlalchemy.exc import SQLAlchemyError

from collabhub.api.deps import Invites
from collabhub.exceptions import DatabaseOperationError, InviteNotFoundError
from collabhub.schemas.invite import InviteCreate, InviteRespond, InviteResponse, ReceivedInviteResponse
from collabhub.utils.ids import parse_uuid

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("", response_model=InviteResponse, status_code=status.HTTP_201_CREATED)
async def send_invite(payload: InviteCreate, invites: Invites) -> InviteResponse:
    try:
        invite = await invites.send_invite(payload)
    except SQLAlchemyError as e:
        logger.exception(f"Error sending invite: {e}")
        raise DatabaseOperationError("Failed to send invite") from e
    return InviteResponse.model_validate(invite)


@router.get("/received", response_model=list[ReceivedInviteResponse])
async def get_received_invites(
    invites: Invites,
    user_id: str | None = Query(None, alias="userId"),
) -> list[ReceivedInviteResponse]:
    """Invites addressed to ``userId`` with their project and a sender summary."""
    receiver_id = parse_uuid(user_id)
    if receiver_id is None:
        return []
    try:
        received = await invites.list_received(receiver_id)
    except SQLAlchemyError as e:
        logger.exception(f"Error fetching invites: {e}")
        raise DatabaseOperationError("Failed to fetch invites") from e
    return [ReceivedInviteResponse.model_validate(invite) for invite in received]


@router.patch("/{invite_id}", response_model=InviteResponse)
async def respond_to_invite(invite_id: str, payload: InviteRespond, invites: Invites) -> InviteResponse:
    parsed_id = parse_uuid(invite_id)
    if parsed_id is None:
        raise InviteNotFoundError()
    try:
        invite = await invites.respond(parsed_id, payload.status)
    except SQLAlchemyError as e:
        logger.exception(f"Error updating invite: {e}")
        raise DatabaseOperationError("Failed to respond to invite") from e
    return InviteResponse.model_validate(invite)
