"""FastAPI dependencies for auth, services and the voice platform client."""

from typing import Annotated

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession

from voice_matrix.core.auth import decode_access_token
from voice_matrix.core.request_context import set_user_context
from voice_matrix.domain.services.assistant_service import AssistantService, ClientFactory
from voice_matrix.domain.templates.catalog import TemplateCatalog, get_catalog
from voice_matrix.infrastructure.voice_platform.base import DeploymentClientProtocol
from voice_matrix.infrastructure.voice_platform.factory import get_deployment_client
from voice_matrix.persistence.database import get_db
from voice_matrix.settings import Settings, settings

security = HTTPBearer()


async def get_current_user_id(
    credentials: Annotated[HTTPAuthorizationCredentials, Depends(security)],
) -> str:
    """Get the authenticated user id from the bearer JWT.

    Raises:
        HTTPException: If the token is invalid or has no subject
    """
    payload = decode_access_token(credentials.credentials)
    if payload is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid authentication credentials",
            headers={"WWW-Authenticate": "Bearer"},
        )

    user_id = payload.get("sub")
    if not user_id:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid token payload",
        )

    set_user_context(str(user_id))
    return str(user_id)


def get_settings() -> Settings:
    """Settings for the current request."""
    return settings


def get_template_catalog() -> TemplateCatalog:
    """Template catalog dependency."""
    return get_catalog()


async def get_assistant_service(
    db: Annotated[AsyncSession, Depends(get_db)],
    catalog: Annotated[TemplateCatalog, Depends(get_template_catalog)],
) -> AssistantService:
    """Assistant service bound to the request's database session."""
    return AssistantService(db, catalog=catalog)


def get_client_factory(
    request_settings: Annotated[Settings, Depends(get_settings)],
) -> ClientFactory:
    """Deferred deployment client construction.

    The client is only built when a remote call is actually needed, so missing
    platform credentials do not block purely local operations.
    """

    def factory() -> DeploymentClientProtocol:
        return get_deployment_client(request_settings)

    return factory


CurrentUserId = Annotated[str, Depends(get_current_user_id)]
Catalog = Annotated[TemplateCatalog, Depends(get_template_catalog)]
Service = Annotated[AssistantService, Depends(get_assistant_service)]
ClientFactoryDep = Annotated[ClientFactory, Depends(get_client_factory)]
