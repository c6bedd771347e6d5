# Standard library imports
import asyncio

# Local application imports
from ....domain.exceptions import NotFoundError
from ....domain.repositories.media_store import MediaStore
from ...dto.video_dto import DeleteVideoResponse


class DeleteVideoUseCase:
    """Use case for reclaiming a stored upload"""
    
    def __init__(self, media_store: MediaStore) -> None:
        self.media_store = media_store
    
    async def execute(self, filename: str) -> DeleteVideoResponse:
        deleted = await asyncio.to_thread(self.media_store.delete, filename)
        if not deleted:
            raise NotFoundError("Video file not found", details={"filename": filename})
        return DeleteVideoResponse(filename=filename)
