"""
Authentication API Router.

POST /authenticate
Request:  {"data": {"type": "auth", "attributes": {"username": "...", "password": "..."}}}
Response: {"meta": {"token": "..."}}
"""

from logging import getLogger

from dishka.integrations.fastapi import FromDishka, inject
from fastapi import APIRouter, Depends, status
from pydantic import BaseModel

from rtchat.application.commands.auth import AuthenticateCommand, AuthenticateHandler
from rtchat.presentation.dependencies import require_json_api

logger = getLogger(__name__)


class CredentialsAttributes(BaseModel):
    username: str
    password: str


class CredentialsData(BaseModel):
    type: str = "auth"
    attributes: CredentialsAttributes


class AuthenticateRequest(BaseModel):
    data: CredentialsData


class TokenMeta(BaseModel):
    token: str


class AuthenticateResponse(BaseModel):
    meta: TokenMeta


router = APIRouter(tags=["auth"], dependencies=[Depends(require_json_api)])


@router.post(
    "/authenticate",
    response_model=AuthenticateResponse,
    status_code=status.HTTP_200_OK,
)
@inject
async def authenticate(
    request: AuthenticateRequest,
    handler: FromDishka[AuthenticateHandler],
):
    """Exchange username and password for a bearer credential."""
    attributes = request.data.attributes
    result = await handler.execute(
        AuthenticateCommand(username=attributes.username, password=attributes.password)
    )
    logger.info("User %s authenticated", result.user.id)
    return AuthenticateResponse(meta=TokenMeta(token=result.token))
