# Standard library imports
import os
from typing import Final, Optional


def _first_env(*names: str, default: str = "") -> str:
    """Return the first non-empty environment variable among names."""
    for name in names:
        value = os.getenv(name)
        if value:
            return value
    return default


class Settings:
    """
    Application settings loaded from environment variables.
    
    This class centralizes all configuration settings for the application.
    All settings are loaded from environment variables with sensible defaults.
    """
    
    def __init__(self) -> None:
        # Server Configuration
        self.host: Final[str] = os.getenv("HOST", "0.0.0.0")
        self.port: Final[int] = int(os.getenv("PORT", "5000"))
        self.client_url: Final[str] = os.getenv("CLIENT_URL", "http://localhost:5173")
        self.log_level: Final[str] = os.getenv("LOG_LEVEL", "INFO").upper()
        
        # Gemini Configuration
        self.gemini_api_key: Final[str] = _first_env(
            "GEMINI_API_KEY", "GOOGLE_AI_KEY", "GOOGLE_API_KEY"
        )
        self.video_model: Final[str] = os.getenv("VIDEO_MODEL", "gemini-2.5-flash")
        self.ai_model: Final[str] = os.getenv("AI_MODEL", "gemini-2.5-pro")
        self.file_poll_interval_sec: Final[float] = float(
            os.getenv("FILE_POLL_INTERVAL_SEC", "2")
        )
        self.file_poll_max_attempts: Final[int] = int(
            os.getenv("FILE_POLL_MAX_ATTEMPTS", "30")
        )
        
        # Upload Configuration
        self.upload_dir: Final[str] = os.getenv("UPLOAD_DIR", "uploads")
        self.upload_max_mb: Final[int] = int(os.getenv("UPLOAD_MAX_MB", "25"))
        
        # Session Configuration ("inline" or "remote")
        self.session_analysis_protocol: Final[str] = os.getenv(
            "SESSION_ANALYSIS_PROTOCOL", "inline"
        ).lower()
    
    @property
    def upload_max_bytes(self) -> int:
        return self.upload_max_mb * 1024 * 1024


# Global settings instance (singleton pattern)
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """
    Get application settings (singleton pattern)
    
    Returns:
        Settings instance with all configuration values
    """
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def reset_settings() -> None:
    """Drop the cached settings so the next get_settings() re-reads the environment."""
    global _settings
    _settings = None
