"""Lesson comment endpoints."""

from typing import Any, Dict, List

from fastapi import APIRouter, Depends

from app.crud.lesson import CommentCRUD
from app.dependencies import get_comment_crud
from app.schemas.lesson_schema import CommentCreateRequest

router = APIRouter()


@router.post("")
async def add_comment(
    request: CommentCreateRequest,
    comments: CommentCRUD = Depends(get_comment_crud),
) -> Dict[str, Any]:
    """Store a comment; the server stamps ``createdAt``."""
    return comments.add_comment(request.model_dump())


@router.get("/{lesson_id}")
async def list_comments(
    lesson_id: str,
    comments: CommentCRUD = Depends(get_comment_crud),
) -> List[Dict[str, Any]]:
    """Comments on a lesson, newest first."""
    return comments.get_for_lesson(lesson_id)
