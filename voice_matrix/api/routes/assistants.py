"""Assistant configuration routes."""

from typing import Literal, Optional

from fastapi import APIRouter, Query, Response, status

from voice_matrix.api.deps import ClientFactoryDep, CurrentUserId, Service
from voice_matrix.api.schemas.assistants import AssistantDetailResponse, AssistantResponse
from voice_matrix.domain.assistants.builder import AssistantDraft

router = APIRouter()


@router.post("", response_model=AssistantDetailResponse, status_code=status.HTTP_201_CREATED)
async def create_assistant(
    draft: AssistantDraft,
    user_id: CurrentUserId,
    service: Service,
) -> AssistantDetailResponse:
    """Create an assistant from a template and the user's segment values."""
    record = await service.create(user_id, draft)
    return AssistantDetailResponse.from_record(record)


@router.get("", response_model=list[AssistantResponse])
async def list_assistants(
    user_id: CurrentUserId,
    service: Service,
    skip: int = 0,
    limit: int = 100,
    status_filter: Optional[Literal["assembled", "deployed"]] = Query(default=None, alias="status"),
) -> list[AssistantResponse]:
    """List the current user's assistants."""
    records = await service.list(user_id, skip=skip, limit=limit, status=status_filter)
    return [AssistantResponse.from_record(r) for r in records]


@router.get("/{assistant_id}", response_model=AssistantDetailResponse)
async def get_assistant(
    assistant_id: str,
    user_id: CurrentUserId,
    service: Service,
) -> AssistantDetailResponse:
    """Get an assistant with its deployable configuration."""
    record = await service.get(user_id, assistant_id)
    return AssistantDetailResponse.from_record(record)


@router.put("/{assistant_id}", response_model=AssistantDetailResponse)
async def update_assistant(
    assistant_id: str,
    draft: AssistantDraft,
    user_id: CurrentUserId,
    service: Service,
) -> AssistantDetailResponse:
    """Replace an assistant's draft and rebuild it."""
    record = await service.update(user_id, assistant_id, draft)
    return AssistantDetailResponse.from_record(record)


@router.delete("/{assistant_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_assistant(
    assistant_id: str,
    user_id: CurrentUserId,
    service: Service,
    client_factory: ClientFactoryDep,
) -> Response:
    """Delete an assistant and its remote counterpart."""
    await service.delete(user_id, assistant_id, client_factory=client_factory)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post("/{assistant_id}/deploy", response_model=AssistantDetailResponse)
async def deploy_assistant(
    assistant_id: str,
    user_id: CurrentUserId,
    service: Service,
    client_factory: ClientFactoryDep,
) -> AssistantDetailResponse:
    """Deploy an assistant to the voice platform."""
    record = await service.deploy(user_id, assistant_id, client_factory)
    return AssistantDetailResponse.from_record(record)
