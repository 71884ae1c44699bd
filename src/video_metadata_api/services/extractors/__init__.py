"""Platform extractor registry for video metadata extraction."""
from typing import Dict, List, Type

import httpx

from .base import PlatformExtractor, ExtractionError

_EXTRACTOR_REGISTRY: Dict[str, Type[PlatformExtractor]] = {}


def register_extractor(extractor_class: Type[PlatformExtractor]) -> None:
    """Register a platform extractor class.

    Raises:
        ValueError: If an extractor is already registered for this platform.
    """
    name = extractor_class.platform_name()
    if name in _EXTRACTOR_REGISTRY:
        raise ValueError(f"Extractor already registered for platform '{name}'")
    _EXTRACTOR_REGISTRY[name] = extractor_class


def get_extractor(platform: str, client: httpx.AsyncClient) -> PlatformExtractor:
    """Get an extractor for the given platform bound to ``client``.

    Raises:
        KeyError: If no extractor is registered for the platform.
    """
    cls = _EXTRACTOR_REGISTRY[platform]
    return cls(client)


def registered_platforms() -> List[str]:
    return sorted(_EXTRACTOR_REGISTRY)


__all__ = [
    "register_extractor",
    "get_extractor",
    "registered_platforms",
    "PlatformExtractor",
    "ExtractionError",
]

# Auto-load extractors (triggers self-registration)
from . import tiktok_extractor  # noqa: F401,E402
from . import instagram_extractor  # noqa: F401,E402
from . import youtube_extractor  # noqa: F401,E402
