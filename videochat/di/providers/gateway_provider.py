"""Gemini gateway provider for dependency injection."""
import logging
from typing import TYPE_CHECKING
from ...core.config import get_settings
from ...domain.gateways.provider_gateway import ProviderGateway
from ...domain.repositories.media_store import MediaStore
from ...infrastructure.external import UnavailableGateway, create_provider_gateway
from ...application.services.video_analyzer import VideoAnalyzer

if TYPE_CHECKING:
    from ..base_container import BaseContainer

logger = logging.getLogger(__name__)


class GatewayProvider:
    """Gateway provider - builds the one shared Gemini client"""
    
    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register ProviderGateway as a singleton, validated once here.
        VideoAnalyzer is a factory so it always picks up the registered gateway.
        """
        gateway = create_provider_gateway(get_settings())
        container.register_singleton(ProviderGateway, gateway)
        
        if isinstance(gateway, UnavailableGateway):
            logger.warning("AI endpoints disabled: %s", gateway.reason)
        else:
            logger.info("Registered Gemini gateway")
        
        container.register_factory(
            VideoAnalyzer,
            lambda: VideoAnalyzer(
                gateway=container.get(ProviderGateway),
                media_store=container.get(MediaStore),
            )
        )
