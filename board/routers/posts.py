from fastapi import APIRouter, Depends

from board.dependencies import PaginationParams, get_uow
from board.schemas import (
    CreatePostRequest,
    CreatePostResponse,
    DeletePostResponse,
    Page,
    ReadPostResponse,
    UpdatePostRequest,
    UpdatePostResponse,
)
from board.services import post_service
from board.unit_of_work import AbstractUnitOfWork

router = APIRouter(prefix="/api/v1/posts", tags=["posts"])

@router.get("", response_model=Page[ReadPostResponse])
async def list_posts(
    pagination: PaginationParams = Depends(),
    uow: AbstractUnitOfWork = Depends(get_uow),
):
    return await post_service.read_all_posts(uow, pagination.to_page_request())

@router.get("/{post_id}", response_model=ReadPostResponse)
async def get_post(post_id: int, uow: AbstractUnitOfWork = Depends(get_uow)):
    return await post_service.read_post_by_id(uow, post_id)

@router.post("", status_code=201, response_model=CreatePostResponse)
async def create_post(data: CreatePostRequest, uow: AbstractUnitOfWork = Depends(get_uow)):
    return await post_service.create_post(uow, data)

@router.put("/{post_id}", response_model=UpdatePostResponse)
async def update_post(post_id: int, data: UpdatePostRequest, uow: AbstractUnitOfWork = Depends(get_uow)):
    return await post_service.update_post(uow, post_id, data)

@router.delete("/{post_id}", response_model=DeletePostResponse)
async def delete_post(post_id: int, uow: AbstractUnitOfWork = Depends(get_uow)):
    return await post_service.delete_post(uow, post_id)
