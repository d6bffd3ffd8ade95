# listing_media/services/image_pipeline/services/image_store.py
"""
Image store collaborator interface.

The pipeline never persists bytes itself; it hands them to an object
satisfying this protocol (a repository over the listing images table in the
web application).
"""

from typing import List, Protocol, Sequence, runtime_checkable

from ....models import ImageRecord


@runtime_checkable
class ImageStore(Protocol):
    """Protocol for the listing image persistence dependency."""

    def find_resources_by_owner(self, owner_id: int) -> List[bytes]: ...

    def find_by_owner(self, owner_id: int) -> List[ImageRecord]: ...

    def save_all(self, owner_id: int, resources: Sequence[bytes]) -> None: ...

    def save(self, owner_id: int, resource: bytes) -> None: ...

    def delete_by_ids(self, image_ids: Sequence[int]) -> None: ...

    def delete_by_id(self, image_id: int) -> None: ...
