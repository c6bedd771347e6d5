"""Google Gemini: video understanding via inline bytes or the Files API."""

import io
import logging
import time
from typing import Any, Callable, Optional, Sequence

from google import genai
from google.genai import types

from ...core.config import Settings
from ...domain.exceptions import (
    ProcessingFailedError,
    ProcessingTimeoutError,
    ProviderError,
)
from ...domain.gateways.provider_gateway import ProviderGateway
from ...domain.models.chat import HistoryEntry
from ...domain.models.generation import GenerationConfig
from ...domain.models.media import (
    InlineMedia,
    MediaReference,
    ProcessingState,
    RemoteFileHandle,
    RemoteMedia,
)

logger = logging.getLogger(__name__)

DEFAULT_MODEL_ID = "gemini-2.5-flash"
DEFAULT_POLL_INTERVAL_SEC = 2.0
DEFAULT_MAX_POLL_ATTEMPTS = 30  # about one minute


def render_prompt(prompt: str, history: Sequence[HistoryEntry]) -> str:
    """Prefix the prompt with the prior conversation as `role: content` lines."""
    if not history:
        return prompt
    lines = "\n".join(f"{entry.role}: {entry.content}" for entry in history)
    return f"Previous conversation:\n{lines}\n\n{prompt}"


def to_genai_config(config: Optional[GenerationConfig]) -> Optional[types.GenerateContentConfig]:
    if config is None:
        return None
    return types.GenerateContentConfig(
        temperature=config.temperature,
        top_k=config.top_k,
        top_p=config.top_p,
        max_output_tokens=config.max_output_tokens,
    )


def _state_name(state: Any) -> str:
    if state is None:
        return "UNKNOWN"
    return (getattr(state, "name", None) or str(state)).rsplit(".", 1)[-1]


def _to_handle(file_obj: Any, fallback_mime: str = "") -> RemoteFileHandle:
    return RemoteFileHandle(
        uri=getattr(file_obj, "uri", None) or "",
        name=getattr(file_obj, "name", None) or "",
        state=ProcessingState.from_provider(getattr(file_obj, "state", None)),
        mime_type=getattr(file_obj, "mime_type", None) or fallback_mime,
    )


class GeminiGateway(ProviderGateway):
    """
    Thin wrapper over a shared genai.Client.

    One instance is built at start-up and shared by all requests. All methods
    block; callers in async code run them in a worker thread.
    """

    def __init__(
        self,
        client: Any,
        model: str = DEFAULT_MODEL_ID,
        poll_interval_sec: float = DEFAULT_POLL_INTERVAL_SEC,
        max_poll_attempts: int = DEFAULT_MAX_POLL_ATTEMPTS,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self._client = client
        self.model = model
        self.poll_interval_sec = poll_interval_sec
        self.max_poll_attempts = max_poll_attempts
        self._sleep = sleep

    # ------------------------------------------------------------------
    # Generation
    # ------------------------------------------------------------------

    def generate_content(
        self,
        media: MediaReference,
        prompt: str,
        history: Sequence[HistoryEntry] = (),
        generation_config: Optional[GenerationConfig] = None,
        model: Optional[str] = None,
    ) -> str:
        if isinstance(media, InlineMedia):
            # The SDK base64-encodes inline bytes on the wire
            media_part = types.Part.from_bytes(data=media.data, mime_type=media.mime_type)
        elif isinstance(media, RemoteMedia):
            media_part = types.Part.from_uri(file_uri=media.uri, mime_type=media.mime_type)
        else:
            raise ProviderError(f"Unsupported media reference: {type(media).__name__}")

        try:
            response = self._client.models.generate_content(
                model=model or self.model,
                contents=[media_part, render_prompt(prompt, history)],
                config=to_genai_config(generation_config),
            )
        except Exception as e:
            logger.error("Gemini generate_content failed: %s", e)
            raise ProviderError(f"Gemini API Error: {e}") from e

        text = getattr(response, "text", None) if response is not None else None
        if not text:
            raise ProviderError("No response from Gemini API")
        return text.strip()

    # ------------------------------------------------------------------
    # Files API
    # ------------------------------------------------------------------

    def upload_file(self, data: bytes, mime_type: str, display_name: str) -> RemoteFileHandle:
        try:
            file_obj = self._client.files.upload(
                file=io.BytesIO(data),
                config=types.UploadFileConfig(mime_type=mime_type, display_name=display_name),
            )
        except Exception as e:
            logger.error("Gemini file upload failed for %s: %s", display_name, e)
            raise ProviderError(f"Gemini API Error: {e}") from e

        if file_obj is None or not getattr(file_obj, "name", None):
            raise ProviderError("Failed to get upload response from Gemini")

        handle = _to_handle(file_obj, fallback_mime=mime_type)
        logger.info("Upload successful: %s", handle.name)
        return handle

    def _get_file(self, name: str) -> Any:
        try:
            return self._client.files.get(name=name)
        except Exception as e:
            raise ProviderError(f"Gemini API Error: {e}") from e

    def wait_until_active(self, handle: RemoteFileHandle) -> RemoteFileHandle:
        """
        Poll until the file is ACTIVE. Each poll fetches the file state; polls
        are spaced by poll_interval_sec and capped at max_poll_attempts.
        """
        last_state = handle.state.value
        for attempt in range(1, self.max_poll_attempts + 1):
            file_obj = self._get_file(handle.name)
            current = _to_handle(file_obj, fallback_mime=handle.mime_type)
            last_state = _state_name(getattr(file_obj, "state", None))
            logger.info("Processing attempt %d, state: %s", attempt, last_state)

            if current.is_active:
                return current
            if current.state != ProcessingState.PROCESSING:
                raise ProcessingFailedError(handle.name, last_state)
            if attempt < self.max_poll_attempts:
                self._sleep(self.poll_interval_sec)

        raise ProcessingTimeoutError(handle.name, last_state, self.max_poll_attempts)

    def delete_file(self, handle: RemoteFileHandle) -> None:
        try:
            self._client.files.delete(name=handle.name)
        except Exception as e:
            raise ProviderError(f"Failed to delete remote file {handle.name}: {e}") from e
        logger.info("Cleaned up uploaded file %s", handle.name)


class UnavailableGateway(ProviderGateway):
    """Stands in when the provider client could not be created; every call fails."""

    def __init__(self, reason: str) -> None:
        self.reason = reason

    def _fail(self) -> ProviderError:
        return ProviderError(
            "Gemini API not properly initialized",
            details={"reason": self.reason},
        )

    def generate_content(self, media, prompt, history=(), generation_config=None, model=None) -> str:
        raise self._fail()

    def upload_file(self, data, mime_type, display_name) -> RemoteFileHandle:
        raise self._fail()

    def wait_until_active(self, handle) -> RemoteFileHandle:
        raise self._fail()

    def delete_file(self, handle) -> None:
        raise self._fail()


def create_provider_gateway(settings: Settings) -> ProviderGateway:
    """
    Build the process-wide gateway from settings.

    Missing credentials are detected here, once; the app still starts and
    every AI call then fails with an initialization error.
    """
    if not settings.gemini_api_key:
        logger.error("Failed to initialize Gemini API: GEMINI_API_KEY is not configured")
        return UnavailableGateway("GEMINI_API_KEY is not configured")

    try:
        client = genai.Client(api_key=settings.gemini_api_key)
    except Exception as e:
        logger.error("Failed to initialize Gemini API: %s", e, exc_info=True)
        return UnavailableGateway(str(e))

    return GeminiGateway(
        client=client,
        model=settings.video_model,
        poll_interval_sec=settings.file_poll_interval_sec,
        max_poll_attempts=settings.file_poll_max_attempts,
    )
