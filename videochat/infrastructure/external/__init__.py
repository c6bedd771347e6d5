from .gemini_gateway import GeminiGateway, UnavailableGateway, create_provider_gateway

__all__ = ["GeminiGateway", "UnavailableGateway", "create_provider_gateway"]
