# Standard library imports
from dataclasses import dataclass
from enum import Enum
from typing import Optional


class AnalysisProtocol(str, Enum):
    """How video media reaches the provider."""
    INLINE = "inline"  # base64 bytes inside a single generate call
    REMOTE = "remote"  # file upload, poll until ACTIVE, reference by URI


@dataclass(frozen=True)
class GenerationConfig:
    """
    Sampling options passed through verbatim to the provider.
    
    Values are not clamped; only their types are fixed here.
    """
    temperature: Optional[float] = None
    top_k: Optional[int] = None
    top_p: Optional[float] = None
    max_output_tokens: Optional[int] = None


# Used by the /api/video endpoints and inline sessions
VIDEO_GENERATION_CONFIG = GenerationConfig(
    temperature=0.7,
    top_k=16,
    top_p=0.8,
    max_output_tokens=1024,
)

# Used by the /api/ai endpoints and remote sessions
AI_GENERATION_CONFIG = GenerationConfig(
    temperature=0.7,
    top_k=32,
    top_p=1.0,
    max_output_tokens=4096,
)
