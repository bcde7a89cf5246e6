"""
Snapshot Builder Provider Client

Thin async client for the provider's image API. Every call is a single
attempt: failures are mapped onto ProviderError subclasses and never retried.
"""

import json
import logging
from typing import Any, Dict, List, Optional

import httpx
from pydantic import ValidationError

from . import constants
from .config import ClientConfig
from .constants import ImageType
from .datacls.images import Image, ImageListResponse
from .exceptions import ProviderAPIError, ProviderDecodeError, ProviderTransportError

logger = logging.getLogger(__name__)


class ImageClient:
    """
    Lists images over HTTPS with JSON bodies.

    Usage:
        async with ImageClient(config.client) as client:
            images = await client.list_images()
    """

    def __init__(self, config: Optional[ClientConfig] = None, transport: Optional[httpx.AsyncBaseTransport] = None):
        self.config = config or ClientConfig()
        headers = {"User-Agent": constants.USER_AGENT, "Accept": "application/json"}
        if self.config.token:
            headers["Authorization"] = f"Bearer {self.config.token}"
        self._http = httpx.AsyncClient(
            base_url=self.config.endpoint,
            headers=headers,
            timeout=self.config.timeout,
            transport=transport,
        )
        logger.debug(f"[Client] Initialized for endpoint '{self.config.endpoint}'")

    async def __aenter__(self) -> "ImageClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._http.aclose()

    async def list_images(
        self,
        type: Optional[ImageType] = None,
        page_size: Optional[int] = None,
    ) -> List[Image]:
        """
        Fetch all images, walking every page the provider reports.

        Args:
            type: Ask the provider to only return images of this type
            page_size: Entries per page, defaults to the configured page size

        Returns:
            Images in the order the provider listed them
        """
        params: Dict[str, Any] = {"per_page": page_size or self.config.page_size}
        if type is not None:
            params["type"] = ImageType(type).value

        images: List[Image] = []
        page: Optional[int] = 1
        while page is not None:
            params["page"] = page
            body = await self._get(constants.IMAGES_PATH, params)
            try:
                listing = ImageListResponse.model_validate(body)
            except ValidationError as e:
                raise ProviderDecodeError(f"unexpected image list payload on page {page}: {e}")
            images.extend(listing.images)
            next_page = listing.next_page
            if next_page is not None and next_page <= page:
                raise ProviderDecodeError(f"pagination does not advance: page {page} points to {next_page}")
            page = next_page

        logger.debug(f"[Client] Listed {len(images)} images")
        return images

    async def _get(self, path: str, params: Dict[str, Any]) -> Any:
        logger.debug(f"[Client] GET {path} {params}")
        try:
            response = await self._http.get(path, params=params)
        except httpx.DecodingError as e:
            raise ProviderDecodeError(f"GET {path} returned a body that could not be decoded: {e}") from e
        except httpx.RequestError as e:
            raise ProviderTransportError(f"GET {path} failed: {e}") from e

        if not response.is_success:
            raise self._api_error(response)

        try:
            return response.json()
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise ProviderDecodeError(f"GET {path} returned a body that is not JSON: {e}") from e

    @staticmethod
    def _api_error(response: httpx.Response) -> ProviderAPIError:
        """Build an API error, using the provider's ``{"error": {...}}`` body when present."""
        code = message = None
        try:
            body = response.json()
        except (json.JSONDecodeError, UnicodeDecodeError):
            body = None
        if isinstance(body, dict) and isinstance(body.get("error"), dict):
            code = body["error"].get("code")
            message = body["error"].get("message")
        if message is None and response.text:
            message = response.text.strip()[:200]
        logger.debug(f"[Client] HTTP {response.status_code} from {response.request.url}")
        return ProviderAPIError(response.status_code, code=code, message=message)
