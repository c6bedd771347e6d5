from .analysis_lifecycle import AnalysisLifecycle
from .video_analyzer import VideoAnalyzer

__all__ = ["AnalysisLifecycle", "VideoAnalyzer"]
