"""
JSON:API request documents parsed as a dependency.

FastAPI decodes declared body parameters before any dependency runs, which
would let a malformed body answer 400 ahead of the credential check. Gated
endpoints take their document from json_api_document() instead: it depends
on get_current_user, so the order stays 415 → 401 → 400.
"""

from typing import Callable, TypeVar

from fastapi import Depends, Request
from fastapi.exceptions import RequestValidationError
from pydantic import BaseModel, ValidationError

from rtchat.domain.entities.user import User
from rtchat.presentation.dependencies.auth import get_current_user

DocumentT = TypeVar("DocumentT", bound=BaseModel)


def json_api_document(model: type[DocumentT]) -> Callable:
    async def parse_document(
        request: Request,
        _: User = Depends(get_current_user),
    ) -> DocumentT:
        try:
            return model.model_validate_json(await request.body())
        except ValidationError as e:
            raise RequestValidationError(e.errors(include_url=False)) from e

    return parse_document
