from .images import Image, ImageListResponse, Meta, Pagination
from .state import BuildState

__all__ = [
    'Image',
    'ImageListResponse',
    'Meta',
    'Pagination',
    'BuildState',
]
