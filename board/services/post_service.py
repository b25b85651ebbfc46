"""
Post service — business logic for the Post resource.

Design notes
------------
- Every public function opens its own transaction scope through
  ``uow.transaction()``.  Reads use a read-only scope; create, update and
  delete use a read-write scope that commits on success and rolls back on
  any exception.
- ``update_post`` saves the mutated post explicitly.  Repositories without
  dirty tracking would otherwise drop the change.
- The only error raised here is ``PostNotFoundError``.  Store failures
  propagate unchanged.
"""
from board.exceptions import PostNotFoundError
from board.models import Post
from board.schemas import (
    CreatePostRequest,
    CreatePostResponse,
    DeletePostResponse,
    Page,
    PageRequest,
    ReadPostResponse,
    UpdatePostRequest,
    UpdatePostResponse,
)
from board.unit_of_work import AbstractUnitOfWork


async def _get_post_or_raise(uow: AbstractUnitOfWork, post_id: int) -> Post:
    post = await uow.posts.find_by_id(post_id)
    if post is None:
        raise PostNotFoundError(post_id)
    return post


def _to_read_response(post: Post) -> ReadPostResponse:
    return ReadPostResponse(post_id=post.post_id, title=post.title, content=post.content)


async def create_post(uow: AbstractUnitOfWork, request: CreatePostRequest) -> CreatePostResponse:
    """Persist a new post and return it with its store-assigned key."""
    async with uow.transaction():
        post = Post(title=request.title, content=request.content)
        saved = await uow.posts.save(post)
        return CreatePostResponse(post_id=saved.post_id, title=saved.title, content=saved.content)


async def read_post_by_id(uow: AbstractUnitOfWork, post_id: int) -> ReadPostResponse:
    async with uow.transaction(read_only=True):
        post = await _get_post_or_raise(uow, post_id)
        return _to_read_response(post)


async def update_post(
    uow: AbstractUnitOfWork, post_id: int, request: UpdatePostRequest
) -> UpdatePostResponse:
    """
    Replace the title and content of *post_id*.

    The key is never changed.  Raises ``PostNotFoundError`` when the post
    does not exist.
    """
    async with uow.transaction():
        post = await _get_post_or_raise(uow, post_id)
        post.update(request.title, request.content)
        saved = await uow.posts.save(post)
        return UpdatePostResponse(post_id=saved.post_id, title=saved.title, content=saved.content)


async def delete_post(uow: AbstractUnitOfWork, post_id: int) -> DeletePostResponse:
    """Remove *post_id* and echo back only its key."""
    async with uow.transaction():
        post = await _get_post_or_raise(uow, post_id)
        await uow.posts.delete(post)
        return DeletePostResponse(post_id=post_id)


async def read_all_posts(uow: AbstractUnitOfWork, page_request: PageRequest) -> Page[ReadPostResponse]:
    """
    Return one page of all posts in store order.

    A page past the end of the data comes back empty with the real
    ``total`` and ``pages``; it is not an error.
    """
    async with uow.transaction(read_only=True):
        posts = await uow.posts.find_all(page_request)
        return posts.map(_to_read_response, ReadPostResponse)
