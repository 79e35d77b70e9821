from proxygen.api.health import router as health_router
from proxygen.api.proxies import router as proxies_router

__all__ = [
    "health_router",
    "proxies_router",
]
