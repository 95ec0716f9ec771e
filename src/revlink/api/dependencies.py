"""FastAPI dependencies for dependency injection."""

from typing import Annotated

from fastapi import Depends, Request

from revlink.config import Settings, get_settings
from revlink.services.linking import LinkService


def get_settings_dep() -> Settings:
    """Get application settings."""
    return get_settings()


def get_link_service(request: Request) -> LinkService:
    """Get the link service from app state."""
    if hasattr(request.app.state, "link_service"):
        return request.app.state.link_service

    service = LinkService(get_settings())
    request.app.state.link_service = service
    return service


# Type aliases for dependency injection
SettingsDep = Annotated[Settings, Depends(get_settings_dep)]
LinkServiceDep = Annotated[LinkService, Depends(get_link_service)]
