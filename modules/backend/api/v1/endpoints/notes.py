"""
Notes API Endpoints.

REST adapter for note management. Maps request bodies to service calls
and domain notes to NoteResponse; carries no business rules of its own.
"""

from uuid import UUID

from fastapi import APIRouter, Response

from modules.backend.core.dependencies import NoteServiceDep, RequestId
from modules.backend.schemas.base import ApiResponse, ResponseMetadata
from modules.backend.schemas.note import NoteCreate, NoteResponse, NoteUpdate

router = APIRouter()


@router.post(
    "",
    response_model=ApiResponse[NoteResponse],
    status_code=201,
    summary="Create a note",
    description="Create a new note with title, content and optional tags.",
)
async def create_note(
    data: NoteCreate,
    service: NoteServiceDep,
    request_id: RequestId,
) -> ApiResponse[NoteResponse]:
    """Create a new note."""
    note = await service.create_note(data.title, data.content, data.tags)
    return ApiResponse(
        data=NoteResponse.from_domain(note),
        metadata=ResponseMetadata(request_id=request_id),
    )


@router.get(
    "",
    response_model=ApiResponse[list[NoteResponse]],
    summary="List notes",
    description="Get every note. No particular order is guaranteed.",
)
async def list_notes(
    service: NoteServiceDep,
    request_id: RequestId,
) -> ApiResponse[list[NoteResponse]]:
    """List all notes."""
    notes = await service.list_notes()
    return ApiResponse(
        data=[NoteResponse.from_domain(note) for note in notes],
        metadata=ResponseMetadata(request_id=request_id),
    )


@router.get(
    "/{note_id}",
    response_model=ApiResponse[NoteResponse],
    summary="Get a note",
    description="Get a single note by ID.",
)
async def get_note(
    note_id: UUID,
    service: NoteServiceDep,
    request_id: RequestId,
) -> ApiResponse[NoteResponse]:
    """Get a note by ID."""
    note = await service.get_note(note_id)
    return ApiResponse(
        data=NoteResponse.from_domain(note),
        metadata=ResponseMetadata(request_id=request_id),
    )


@router.put(
    "/{note_id}",
    response_model=ApiResponse[NoteResponse],
    summary="Update a note",
    description="Replace a note's title, content and tags.",
)
async def update_note(
    note_id: UUID,
    data: NoteUpdate,
    service: NoteServiceDep,
    request_id: RequestId,
) -> ApiResponse[NoteResponse]:
    """Update a note."""
    note = await service.update_note(note_id, data.title, data.content, data.tags)
    return ApiResponse(
        data=NoteResponse.from_domain(note),
        metadata=ResponseMetadata(request_id=request_id),
    )


@router.delete(
    "/{note_id}",
    status_code=204,
    response_class=Response,
    summary="Delete a note",
    description="Permanently delete a note.",
)
async def delete_note(
    note_id: UUID,
    service: NoteServiceDep,
) -> Response:
    """Delete a note."""
    await service.delete_note(note_id)
    return Response(status_code=204)
