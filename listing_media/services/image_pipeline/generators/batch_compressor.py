# listing_media/services/image_pipeline/generators/batch_compressor.py
"""
Batch Compressor Component

Fans recompression of a multi-photo submission out over a thread pool that
lives only for the duration of the call. Results always come back in the
order the uploads were given.
"""

from concurrent.futures import ThreadPoolExecutor
from typing import List, Optional, Sequence

from ....constants import DEFAULT_COMPRESSION_MAX_WORKERS, MAX_COMPRESSION_WORKERS
from ....enums import LoggerName, LogSource
from ....models import RawUpload
from ...logger import get_service_logger
from .compressor import ImageCompressor

logger = get_service_logger(LoggerName.BATCH_COMPRESSOR, LogSource.PIPELINE)


class BatchCompressor:
    """
    Component responsible for concurrent recompression of upload batches.

    Optimized for:
    - Bounding wall-clock latency on multi-image submissions
    - Order-preserving results regardless of completion order
    - Rejecting the whole batch before any worker starts
    """

    def __init__(
        self,
        compressor: Optional[ImageCompressor] = None,
        max_workers: int = DEFAULT_COMPRESSION_MAX_WORKERS,
    ):
        """
        Initialize batch compressor.

        Args:
            compressor: Single-image compressor shared by all workers
            max_workers: Maximum number of concurrent worker threads
        """
        self.compressor = compressor or ImageCompressor()
        self.max_workers = max(1, min(max_workers, MAX_COMPRESSION_WORKERS))

    def compress_all(
        self, uploads: Sequence[RawUpload], max_workers: Optional[int] = None
    ) -> List[bytes]:
        """
        Validate a batch, then recompress its uploads concurrently.

        Args:
            uploads: Uploads to recompress
            max_workers: Per-call override of the worker limit

        Returns:
            Compressed bytes positioned like their uploads

        Raises:
            UnsupportedTypeError: Before any work starts, if a type is not allowed
            DecodeError, EncodeError: The first failing upload in input order
        """
        uploads = list(uploads)
        self.compressor.validator.validate(uploads)
        if not uploads:
            return []

        limit = self.max_workers if max_workers is None else max_workers
        workers = max(1, min(limit, MAX_COMPRESSION_WORKERS, len(uploads)))

        logger.debug(
            f"Compressing {len(uploads)} uploads with {workers} workers",
            extra_context={"uploads": len(uploads), "workers": workers},
        )

        if workers == 1:
            return [self.compressor.compress_validated(upload) for upload in uploads]

        with ThreadPoolExecutor(max_workers=workers) as executor:
            return list(executor.map(self.compressor.compress_validated, uploads))
