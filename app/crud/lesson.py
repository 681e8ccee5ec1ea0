"""
Lesson CRUD Operations
Database operations for lessons, comments and lesson reports.
"""

from typing import Any, Dict, List

from google.cloud.firestore import Client

from app.crud.base import BaseCRUD
from app.models.documents import stamped

RELATED_LESSONS_LIMIT = 6



class LessonCRUD(BaseCRUD):
    """CRUD operations for lesson documents."""

    def __init__(self, db: Client):
        """Initialize lesson CRUD."""
        super().__init__(db)

    @property
    def collection_name(self) -> str:
        """Get collection name."""
        return "lessons"

    def create_lesson(self, lesson: Dict[str, Any]) -> Dict[str, Any]:
        """Store a lesson as submitted, stamping its creation time."""
        return self.create(stamped(lesson))

    def get_by_author(self, email: str) -> List[Dict[str, Any]]:
        """
        Get lessons written by an author.

        Args:
            email: Author email

        Returns:
            Lessons whose ``authorEmail`` matches
        """
        return self.find("authorEmail", email)

    def get_related(self, lesson: Dict[str, Any], limit: int = RELATED_LESSONS_LIMIT) -> List[Dict[str, Any]]:
        """
        Get lessons sharing a category or emotional tone with ``lesson``.

        Firestore has no OR across fields without composite indexes, so the
        collection is scanned in natural order and filtered here.

        Args:
            lesson: Lesson to find neighbours for (must carry ``id``)
            limit: Maximum number of results

        Returns:
            Up to ``limit`` related lessons, never ``lesson`` itself
        """
        category = lesson.get("category")
        tone = lesson.get("emotionalTone")

        related = []
        for candidate in self.list_all():
            if candidate["id"] == lesson["id"]:
                continue
            same_category = category is not None and candidate.get("category") == category
            same_tone = tone is not None and candidate.get("emotionalTone") == tone
            if same_category or same_tone:
                related.append(candidate)
                if len(related) >= limit:
                    break
        return related


class CommentCRUD(BaseCRUD):
    """CRUD operations for comment documents."""

    @property
    def collection_name(self) -> str:
        return "comments"

    def add_comment(self, comment: Dict[str, Any]) -> Dict[str, Any]:
        return self.create(stamped(comment))

    def get_for_lesson(self, lesson_id: str) -> List[Dict[str, Any]]:
        """Comments on a lesson, newest first."""
        return self.find("lessonId", lesson_id, order_by="createdAt", direction="DESCENDING")


class LessonReportCRUD(BaseCRUD):
    """CRUD operations for lesson report documents."""

    @property
    def collection_name(self) -> str:
        return "lessonReports"

    def add_report(self, report: Dict[str, Any]) -> Dict[str, Any]:
        return self.create(stamped(report))
