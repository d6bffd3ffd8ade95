# listing_media/services/image_pipeline/services/type_validator.py
"""
Upload type validation.

Checks the declared media type of every upload in a batch against the
supported allow-list and rejects the batch as a whole, naming every distinct
offending type.
"""

from typing import FrozenSet, Sequence

from ....exceptions import UnsupportedTypeError
from ....models import RawUpload
from ..utils.constants import MISSING_CONTENT_TYPE
from ..utils.media_types import is_supported


class TypeValidator:
    """All-or-nothing media type gate for upload batches. Holds no state."""

    def find_unsupported_types(self, uploads: Sequence[RawUpload]) -> FrozenSet[str]:
        """
        Collect the distinct declared types that are not on the allow-list.

        Args:
            uploads: Batch of uploads to inspect

        Returns:
            Set of offending labels; a missing label is reported as
            MISSING_CONTENT_TYPE
        """
        return frozenset(
            upload.content_type
            if upload.content_type is not None
            else MISSING_CONTENT_TYPE
            for upload in uploads
            if not is_supported(upload.content_type)
        )

    def validate(self, uploads: Sequence[RawUpload]) -> None:
        """
        Reject the batch if any upload declares an unsupported type.

        Raises:
            UnsupportedTypeError: Listing every distinct offending type
        """
        unsupported = self.find_unsupported_types(uploads)
        if unsupported:
            raise UnsupportedTypeError(unsupported)
