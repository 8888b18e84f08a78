from fastapi import APIRouter, Depends, status

from roster.schemas import ApiResponse, CharacterPayload, CharacterRead, DeletedCharacter
from roster.services.character import CharacterService

router = APIRouter(prefix="/characters", tags=["characters"])


@router.get(
    "",
    response_model=ApiResponse[list[CharacterRead]],
    response_model_exclude_none=True,
    summary="List characters in insertion order",
)
async def list_characters(service: CharacterService = Depends()):
    characters = await service.list_characters()
    return ApiResponse(
        success=True, data=characters, message="Characters retrieved successfully"
    )


@router.get(
    "/{character_id}",
    response_model=ApiResponse[CharacterRead],
    response_model_exclude_none=True,
    summary="Get a character by id",
)
async def get_character(character_id: str, service: CharacterService = Depends()):
    character = await service.get_character(character_id)
    return ApiResponse(success=True, data=character, message="Character retrieved successfully")


@router.post(
    "",
    response_model=ApiResponse[CharacterRead],
    response_model_exclude_none=True,
    status_code=status.HTTP_201_CREATED,
    summary="Create a character",
)
async def create_character(payload: CharacterPayload, service: CharacterService = Depends()):
    character = await service.create_character(payload)
    return ApiResponse(success=True, data=character, message="Character created successfully")


@router.put(
    "/{character_id}",
    response_model=ApiResponse[CharacterRead],
    response_model_exclude_none=True,
    summary="Update a character",
)
async def update_character(
    character_id: str,
    payload: CharacterPayload,
    service: CharacterService = Depends(),
):
    character = await service.update_character(character_id, payload)
    return ApiResponse(success=True, data=character, message="Character updated successfully")


@router.delete(
    "/{character_id}",
    response_model=ApiResponse[DeletedCharacter],
    response_model_exclude_none=True,
    summary="Delete a character",
)
async def delete_character(character_id: str, service: CharacterService = Depends()):
    deleted = await service.delete_character(character_id)
    return ApiResponse(success=True, data=deleted, message="Character deleted successfully")
