"""
Provider image records and the envelope of ``GET /images``.

Only the fields the build pipeline reads are required; anything else the
provider sends is ignored.
"""

from datetime import datetime
from typing import Dict, List, Optional, Union
from pydantic import BaseModel, ConfigDict, Field

from ..constants import ImageType


class Image(BaseModel):
    """A machine image owned by the provider. Read-only to the pipeline."""
    model_config = ConfigDict(frozen=True, extra="ignore")

    id: int
    # Types this package does not know are kept as plain strings
    type: Union[ImageType, str] = Field(union_mode="left_to_right")
    description: str = ""
    name: Optional[str] = None
    status: Optional[str] = None
    created: Optional[datetime] = None
    labels: Dict[str, str] = Field(default_factory=dict)

    @property
    def is_snapshot(self) -> bool:
        return self.type == ImageType.SNAPSHOT


class Pagination(BaseModel):
    model_config = ConfigDict(extra="ignore")

    page: int = 1
    per_page: Optional[int] = None
    previous_page: Optional[int] = None
    next_page: Optional[int] = None
    last_page: Optional[int] = None
    total_entries: Optional[int] = None


class Meta(BaseModel):
    model_config = ConfigDict(extra="ignore")

    pagination: Optional[Pagination] = None


class ImageListResponse(BaseModel):
    model_config = ConfigDict(extra="ignore")

    images: List[Image]
    meta: Optional[Meta] = None

    @property
    def next_page(self) -> Optional[int]:
        if self.meta is None or self.meta.pagination is None:
            return None
        return self.meta.pagination.next_page
