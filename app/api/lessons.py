"""Lesson catalog, bookmark and report endpoints."""

from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Depends, Query

from app.crud.lesson import LessonCRUD, LessonReportCRUD
from app.crud.user import UserCRUD
from app.dependencies import get_lesson_crud, get_report_crud, get_user_crud
from app.schemas.lesson_schema import (
    LessonCreateRequest,
    ReportCreateRequest,
    SaveLessonRequest,
    SuccessResponse,
    UpdateResult,
)
from app.services.access_control import redact_all
from app.utils.exceptions import DocumentStoreError, NotFoundError
from app.utils.logger import get_logger

logger = get_logger(__name__)
router = APIRouter()


@router.post("")
async def create_lesson(
    request: LessonCreateRequest,
    lessons: LessonCRUD = Depends(get_lesson_crud),
) -> Dict[str, Any]:
    """Store a lesson as submitted and return the stored record."""
    lesson = lessons.create_lesson(request.model_dump())
    logger.info(f"Lesson created: {lesson['id']} by {lesson.get('authorEmail')}")
    return lesson


@router.get("")
async def list_lessons(
    user_id: Optional[str] = Query(None, alias="userId", description="Requester email"),
    lessons: LessonCRUD = Depends(get_lesson_crud),
    users: UserCRUD = Depends(get_user_crud),
) -> List[Dict[str, Any]]:
    """
    List all lessons, hiding premium content from non-premium requesters.

    Args:
        user_id: Email of the requesting user, if any
        lessons: Lesson CRUD
        users: User CRUD

    Returns:
        Lessons, each carrying a ``locked`` flag

    Raises:
        DocumentStoreError: If the store cannot be read (500)
    """
    try:
        requester_is_premium = users.is_premium(user_id)
        return redact_all(lessons.list_all(), requester_is_premium)
    except Exception as e:
        logger.error(f"Error listing lessons: {str(e)}")
        raise DocumentStoreError(f"Failed to list lessons: {str(e)}")


@router.post("/save", response_model=UpdateResult)
async def save_lesson(
    request: SaveLessonRequest,
    users: UserCRUD = Depends(get_user_crud),
) -> UpdateResult:
    """
    Bookmark a lesson for a user. Saving twice keeps a single entry.

    Raises:
        NotFoundError: If the user does not exist (404)
    """
    result = users.add_saved_lesson(request.userEmail, request.lessonId)
    logger.info(f"User {request.userEmail} saved lesson {request.lessonId}")
    return UpdateResult(**result)


@router.get("/save/{email}")
async def list_saved_lessons(
    email: str,
    users: UserCRUD = Depends(get_user_crud),
    lessons: LessonCRUD = Depends(get_lesson_crud),
) -> List[Dict[str, Any]]:
    """Lessons bookmarked by a user, fetched in one batch."""
    lesson_ids = users.get_saved_lesson_ids(email)
    if not lesson_ids:
        return []
    return lessons.get_many(lesson_ids)


@router.post("/report", response_model=SuccessResponse)
async def report_lesson(
    request: ReportCreateRequest,
    reports: LessonReportCRUD = Depends(get_report_crud),
) -> SuccessResponse:
    """Store a report about a lesson."""
    report = reports.add_report(request.model_dump())
    logger.info(f"Lesson report stored: {report['id']} for lesson {report.get('lessonId')}")
    return SuccessResponse(success=True)


@router.get("/author/{email}")
async def list_lessons_by_author(
    email: str,
    lessons: LessonCRUD = Depends(get_lesson_crud),
) -> List[Dict[str, Any]]:
    """Lessons written by one author."""
    return lessons.get_by_author(email)


@router.get("/related/{lesson_id}")
async def list_related_lessons(
    lesson_id: str,
    lessons: LessonCRUD = Depends(get_lesson_crud),
) -> List[Dict[str, Any]]:
    """
    Up to six lessons sharing a category or emotional tone with a lesson.

    Raises:
        NotFoundError: If the lesson does not exist (404)
    """
    lesson = lessons.get_by_id(lesson_id)
    if not lesson:
        raise NotFoundError("Lesson not found", details={"lesson_id": lesson_id})
    return lessons.get_related(lesson)


@router.get("/{lesson_id}")
async def get_lesson(
    lesson_id: str,
    lessons: LessonCRUD = Depends(get_lesson_crud),
) -> Dict[str, Any]:
    """
    Get a single lesson.

    Raises:
        NotFoundError: If the lesson does not exist (404)
    """
    lesson = lessons.get_by_id(lesson_id)
    if not lesson:
        raise NotFoundError("Lesson not found", details={"lesson_id": lesson_id})
    return lesson
