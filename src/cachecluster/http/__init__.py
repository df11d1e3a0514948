from cachecluster.http.transport import ProviderTransport

__all__ = ["ProviderTransport"]
