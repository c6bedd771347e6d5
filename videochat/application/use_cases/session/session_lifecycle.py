"""Use case for server-side chat sessions driving the analysis lifecycle."""
import asyncio
import uuid
from typing import BinaryIO, Optional

from ....domain.exceptions import ValidationError
from ....domain.models.generation import AnalysisProtocol, GenerationConfig
from ....domain.repositories.media_store import MediaStore
from ....domain.repositories.session_repository import SessionRepository
from ....utils.datetime_utils import to_iso
from ...dto.session_dto import SessionResponse, SessionView
from ...services.analysis_lifecycle import AnalysisLifecycle
from ...services.video_analyzer import VideoAnalyzer


class SessionLifecycleUseCase:
    """Create, drive and tear down AnalysisLifecycle sessions."""
    
    def __init__(
        self,
        session_repository: SessionRepository,
        media_store: MediaStore,
        analyzer: VideoAnalyzer,
        protocol: AnalysisProtocol = AnalysisProtocol.INLINE,
        generation_config: Optional[GenerationConfig] = None,
        model: Optional[str] = None,
    ) -> None:
        self.session_repository = session_repository
        self.media_store = media_store
        self.analyzer = analyzer
        self.protocol = protocol
        self.generation_config = generation_config
        self.model = model
    
    async def create(self) -> SessionResponse:
        session = AnalysisLifecycle(
            session_id=self._create_session_id(),
            media_store=self.media_store,
            analyzer=self.analyzer,
            protocol=self.protocol,
            generation_config=self.generation_config,
            model=self.model,
        )
        self.session_repository.add(session)
        return self._response(session)
    
    async def get(self, session_id: str) -> SessionResponse:
        return self._response(self.session_repository.get(session_id))
    
    async def upload(
        self,
        session_id: str,
        stream: Optional[BinaryIO],
        mime_type: Optional[str],
        filename: Optional[str],
    ) -> SessionResponse:
        session = self.session_repository.get(session_id)
        if stream is None:
            raise ValidationError("No video file uploaded")
        await asyncio.to_thread(session.upload, stream, mime_type or "", filename or "")
        return self._response(session)
    
    async def analyze(self, session_id: str, prompt: Optional[str]) -> SessionResponse:
        session = self.session_repository.get(session_id)
        result = await asyncio.to_thread(session.analyze, prompt)
        return self._response(
            session,
            reply={
                "text": result.text,
                "videoUri": result.source_uri,
                "timestamp": to_iso(result.produced_at),
                "type": result.kind,
            },
        )
    
    async def chat(self, session_id: str, question: Optional[str]) -> SessionResponse:
        session = self.session_repository.get(session_id)
        reply = await asyncio.to_thread(session.chat, question or "")
        return self._response(
            session,
            reply={
                "text": reply.text,
                "timestamp": to_iso(reply.produced_at),
                "type": reply.kind,
            },
        )
    
    async def close(self, session_id: str) -> SessionResponse:
        session = self.session_repository.remove(session_id)
        await asyncio.to_thread(session.close)
        return self._response(session)
    
    def _response(self, session: AnalysisLifecycle, reply: Optional[dict] = None) -> SessionResponse:
        return SessionResponse(session=SessionView(**session.snapshot()), reply=reply)
    
    def _create_session_id(self) -> str:
        """Generate a unique session ID"""
        return str(uuid.uuid4())
