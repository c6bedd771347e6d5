# Standard library imports
import asyncio
import logging
from typing import BinaryIO, Optional

# Local application imports
from ....domain.exceptions import ValidationError
from ....domain.repositories.media_store import MediaStore
from ...dto.video_dto import UploadedFile, UploadVideoResponse

logger = logging.getLogger(__name__)


class UploadVideoUseCase:
    """Use case for storing an uploaded video (step 1 of the flow)"""
    
    def __init__(self, media_store: MediaStore) -> None:
        self.media_store = media_store
    
    async def execute(
        self,
        stream: Optional[BinaryIO],
        mime_type: Optional[str],
        filename: Optional[str],
    ) -> UploadVideoResponse:
        """
        Store the upload under a generated name
        
        Args:
            stream: Binary stream of the uploaded file (None when no file was sent)
            mime_type: Content type declared by the client
            filename: Original file name
            
        Returns:
            UploadVideoResponse with the stored file descriptor
        """
        if stream is None:
            raise ValidationError("No video file uploaded")
        
        asset = await asyncio.to_thread(
            self.media_store.store_stream, stream, mime_type or "", filename or ""
        )
        logger.info("Video uploaded successfully: %s", asset.local_id)
        
        return UploadVideoResponse(
            file=UploadedFile(
                filename=asset.local_id,
                path=asset.storage_path,
                size=asset.byte_size,
                mimetype=asset.mime_type,
            )
        )
