from abc import ABC, abstractmethod
from typing import BinaryIO
from ..models.media import MediaAsset


class MediaStore(ABC):
    """Repository interface - defines contract for uploaded video storage"""
    
    @abstractmethod
    def store(self, data: bytes, mime_type: str, original_name: str) -> MediaAsset:
        """Store video bytes under a generated unique name"""
        pass
    
    @abstractmethod
    def store_stream(self, stream: BinaryIO, mime_type: str, original_name: str) -> MediaAsset:
        """Store a video read from a binary stream under a generated unique name"""
        pass
    
    @abstractmethod
    def get(self, local_id: str) -> MediaAsset:
        """Return the descriptor of a stored video"""
        pass
    
    @abstractmethod
    def locate(self, path_or_name: str) -> MediaAsset:
        """Return the descriptor for a stored video given its path or name"""
        pass
    
    @abstractmethod
    def resolve(self, local_id: str) -> bytes:
        """Read the bytes of a stored video"""
        pass
    
    @abstractmethod
    def delete(self, local_id: str) -> bool:
        """Delete a stored video; returns False when nothing was deleted"""
        pass
