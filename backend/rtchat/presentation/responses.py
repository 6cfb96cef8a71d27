"""JSON:API response class used for every HTTP response of the API."""

from fastapi.responses import JSONResponse

from rtchat.config.settings import Config


class JsonApiResponse(JSONResponse):
    media_type = Config.API_MEDIA_TYPE
