"""
Unit tests for the exception hierarchy and get_user_message
"""
from videochat.domain.exceptions import (
    NotFoundError,
    ProcessingFailedError,
    ProcessingTimeoutError,
    ProviderError,
    StorageError,
    ValidationError,
    VideoChatError,
    get_user_message,
)


def test_http_status_mapping():
    assert ValidationError("x").http_status == 400
    assert StorageError("x").http_status == 400
    assert NotFoundError("x").http_status == 404
    assert ProviderError("x").http_status == 500
    assert VideoChatError("x").http_status == 500


def test_processing_errors_are_provider_errors():
    failed = ProcessingFailedError("files/a", "FAILED")
    timeout = ProcessingTimeoutError("files/a", "PROCESSING", 30)
    assert isinstance(failed, ProviderError)
    assert isinstance(timeout, ProviderError)
    assert failed.last_state == "FAILED"
    assert "State: FAILED" in failed.message
    assert timeout.attempts == 30
    assert timeout.details["state"] == "PROCESSING"


def test_user_message_defaults_to_message():
    assert ValidationError("Question is required").user_message == "Question is required"
    assert NotFoundError("internal", user_message="Not here").user_message == "Not here"


def test_get_user_message_hides_unexpected_errors():
    assert get_user_message(ValidationError("Video path is required")) == "Video path is required"
    assert get_user_message(RuntimeError("db password is hunter2")) == "Something went wrong!"
