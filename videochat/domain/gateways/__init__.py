from .provider_gateway import ProviderGateway

__all__ = ["ProviderGateway"]
