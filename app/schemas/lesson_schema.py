"""
Lesson Request/Response Schemas
API schemas for lessons, comments, saves and reports.
"""

from pydantic import BaseModel, ConfigDict, Field


class LessonCreateRequest(BaseModel):
    """Lesson submitted by an author. Stored verbatim."""

    model_config = ConfigDict(extra="allow")


class CommentCreateRequest(BaseModel):
    """Comment on a lesson. No validation beyond being a JSON object."""

    model_config = ConfigDict(extra="allow")


class ReportCreateRequest(BaseModel):
    """Report against a lesson."""

    model_config = ConfigDict(extra="allow")


class SaveLessonRequest(BaseModel):
    """Bookmark a lesson for a user."""

    lessonId: str = Field(min_length=1, description="Lesson to bookmark")
    userEmail: str = Field(min_length=1, description="Owner of the bookmark")


class UpdateResult(BaseModel):
    """Outcome of a single-document update."""

    acknowledged: bool = True
    matchedCount: int = Field(ge=0)
    modifiedCount: int = Field(ge=0)


class SuccessResponse(BaseModel):
    """Bare success flag."""

    success: bool
