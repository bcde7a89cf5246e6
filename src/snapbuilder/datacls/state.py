"""
Snapshot Builder Build State

The explicit context threaded through the pipeline steps. It carries only the
capabilities a step needs plus the pipeline's error channel.
"""

from typing import Optional
from pydantic import BaseModel, ConfigDict

from ..protocols import ImageListerProtocol, UiProtocol


class BuildState(BaseModel):
    """
    Holds the provider client, the UI sink and the last recorded error.

    ``error`` is the only field a step writes, and only on its halt path.
    """
    model_config = ConfigDict(arbitrary_types_allowed=True, validate_assignment=True)

    client: ImageListerProtocol
    ui: UiProtocol
    error: Optional[Exception] = None

    @property
    def halted(self) -> bool:
        return self.error is not None
