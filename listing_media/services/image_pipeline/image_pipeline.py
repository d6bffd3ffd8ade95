# listing_media/services/image_pipeline/image_pipeline.py
"""
Main Image Pipeline Class

Provides the caller-facing interface of the media ingestion pipeline:
validation, recompression and thumbnail scaling of listing photos, plus
delegation of persistence to the injected image store.

The components below this class are pure transforms and never log; this
class is the boundary where rejected batches and codec failures are logged.
"""

from contextlib import contextmanager
from typing import Iterator, List, Optional, Sequence, Union

from ...config import ImagePipelineConfig, Settings
from ...config import settings as default_settings
from ...enums import LoggerName, LogSource
from ...exceptions import ConfigurationError, EncodeError, UnsupportedTypeError
from ...models import ImageDto, RawUpload
from ..logger import get_service_logger
from .generators import BatchCompressor, ImageCompressor, ThumbnailScaler
from .services import ImageStore, TypeValidator

logger = get_service_logger(LoggerName.IMAGE_PIPELINE, LogSource.PIPELINE)


class ImagePipeline:
    """
    Main image pipeline providing unified access to upload compression,
    thumbnail scaling and listing image storage.
    """

    def __init__(
        self,
        config: Optional[ImagePipelineConfig] = None,
        store: Optional[ImageStore] = None,
    ):
        """
        Initialize image pipeline with explicit configuration.

        Args:
            config: Immutable pipeline configuration (defaults apply when omitted)
            store: Image store collaborator (required only for storage operations)
        """
        self.config = config or ImagePipelineConfig()
        self.store = store

        if store is None:
            logger.debug("ImagePipeline instantiated without an image store")

        # Initialize components
        self.validator = TypeValidator()
        self.compressor = ImageCompressor(
            quality=self.config.compression_quality, validator=self.validator
        )
        self.batch_compressor = BatchCompressor(
            compressor=self.compressor,
            max_workers=self.config.compression_max_workers,
        )
        self.scaler = ThumbnailScaler(edge=self.config.thumbnail_edge_px)

    def _require_store(self) -> ImageStore:
        if self.store is None:
            raise ConfigurationError("Image store is required but not provided")
        return self.store

    # ------------------------------------------------------------------
    # Transform operations
    # ------------------------------------------------------------------

    def validate(self, uploads: Sequence[RawUpload]) -> None:
        """Reject the batch if any upload declares an unsupported media type."""
        self.validator.validate(uploads)

    def compress_batch(self, uploads: Sequence[RawUpload]) -> List[bytes]:
        """
        Validate a batch and recompress every upload sequentially.

        Args:
            uploads: Uploads in submission order

        Returns:
            Compressed bytes in the same order as ``uploads``
        """
        logger.debug(f"Compressing batch of {len(uploads)} uploads")
        with self._logged_failures("batch"):
            return self.compressor.compress_all(uploads)

    def compress_batch_concurrently(
        self, uploads: Sequence[RawUpload], max_workers: Optional[int] = None
    ) -> List[bytes]:
        """
        Validate a batch and recompress its uploads on a scoped thread pool.

        Args:
            uploads: Uploads in submission order
            max_workers: Optional override of the configured worker limit

        Returns:
            Compressed bytes in the same order as ``uploads``
        """
        with self._logged_failures("concurrent batch"):
            return self.batch_compressor.compress_all(uploads, max_workers=max_workers)

    def compress_one(self, upload: RawUpload) -> bytes:
        """Validate and recompress a single upload."""
        with self._logged_failures("upload"):
            return self.compressor.compress(upload)

    def scale(self, image_bytes: bytes) -> bytes:
        """
        Produce a list-view thumbnail from already-stored image bytes.

        No media type gate runs here; stored bytes were validated on upload.
        """
        with self._logged_failures("thumbnail"):
            return self.scaler.scale(image_bytes)

    # ------------------------------------------------------------------
    # Storage delegation
    # ------------------------------------------------------------------

    def get_resources_by_listing(self, listing_id: int) -> List[bytes]:
        """Get the raw bytes of every image attached to a listing."""
        return self._require_store().find_resources_by_owner(listing_id)

    def get_images_by_listing(self, listing_id: int) -> List[ImageDto]:
        """Get id/resource projections of every image attached to a listing."""
        records = self._require_store().find_by_owner(listing_id)
        return [ImageDto.model_validate(record) for record in records]

    def attach_to_listing(
        self, listing_id: int, images: Union[bytes, Sequence[bytes]]
    ) -> None:
        """
        Hand compressed image bytes to the store under a listing.

        Args:
            listing_id: Owning listing ID
            images: A single encoded image or a sequence of them
        """
        store = self._require_store()
        if isinstance(images, (bytes, bytearray)):
            store.save(listing_id, bytes(images))
            return

        resources = list(images)
        logger.debug(
            f"Attaching {len(resources)} images to listing {listing_id}",
            extra_context={"listing_id": listing_id, "count": len(resources)},
        )
        store.save_all(listing_id, resources)

    def remove_by_ids(self, image_ids: Union[int, Sequence[int]]) -> None:
        """Delete one image by ID, or several in a single store call."""
        store = self._require_store()
        if isinstance(image_ids, int):
            store.delete_by_id(image_ids)
            return
        store.delete_by_ids(list(image_ids))

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    @staticmethod
    @contextmanager
    def _logged_failures(subject: str) -> Iterator[None]:
        """Log rejected batches and codec failures, then re-raise them."""
        try:
            yield
        except UnsupportedTypeError as e:
            logger.warning(
                f"Rejected {subject}: {e}",
                extra_context={"offending_types": sorted(e.offending_types)},
            )
            raise
        except EncodeError as e:
            logger.error(f"Failed to encode {subject}", exception=e)
            raise


def create_image_pipeline(
    store: Optional[ImageStore] = None, settings: Optional[Settings] = None
) -> ImagePipeline:
    """
    Factory function to create an image pipeline from process settings.

    Args:
        store: Image store collaborator
        settings: Settings to read configuration from (global settings by default)

    Returns:
        Configured ImagePipeline instance
    """
    active_settings = settings or default_settings
    return ImagePipeline(config=active_settings.pipeline_config(), store=store)
