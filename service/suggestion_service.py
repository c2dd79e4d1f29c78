# service/suggestion_service.py
import logging
from typing import Optional
from urllib.parse import quote_plus
import httpx
from fastapi import status
from util.enums import ErrorMessage
from util.errors import AppError
from util.functions import fill_template

logger = logging.getLogger(__name__)


class SuggestionService:
    """
    Proxy search-as-you-type suggestions from an upstream endpoint.
    The upstream body is passed through untouched.
    """

    def __init__(
        self,
        url_template: str,
        timeout: float = 5.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self._url_template = url_template
        self._timeout = timeout
        self._transport = transport

    async def suggest(self, query: str) -> bytes:
        url = fill_template(self._url_template, quote_plus(query))
        try:
            async with httpx.AsyncClient(
                timeout=self._timeout,
                transport=self._transport,
                follow_redirects=True,
            ) as client:
                res = await client.get(url)
        except httpx.RequestError as e:
            logger.error("suggest.request_error err=%s", type(e).__name__)
            raise AppError(
                ErrorMessage.UPSTREAM_ERROR.value.message,
                ErrorMessage.UPSTREAM_ERROR.value.http_status,
            )

        if res.status_code > status.HTTP_200_OK:
            logger.warning("suggest.bad_status %d", res.status_code)
            raise AppError(ErrorMessage.UPSTREAM_STATUS.value.message, res.status_code)

        return res.content
