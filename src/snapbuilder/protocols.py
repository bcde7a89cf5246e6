"""
Snapshot Builder Protocol Definitions

Capabilities a pipeline step consumes from its build state. Protocols are the
foundation layer and only depend on the data classes they exchange.
"""

from typing import TYPE_CHECKING, Protocol, List, Optional, runtime_checkable

from .constants import ImageType

if TYPE_CHECKING:
    from .datacls.images import Image


@runtime_checkable
class UiProtocol(Protocol):
    """
    Sink for human-readable build messages.
    """

    def say(self, message: str) -> None:
        ...

    def error(self, message: str) -> None:
        ...


@runtime_checkable
class ImageListerProtocol(Protocol):
    """
    Anything able to list the provider's images.
    """

    async def list_images(
        self,
        type: Optional[ImageType] = None,
        page_size: Optional[int] = None,
    ) -> List["Image"]:
        """
        Return every image visible to the account, following pagination.

        Raises:
            ProviderError: on transport, HTTP status or decoding failures
        """
        ...
