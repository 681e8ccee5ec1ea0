"""Premium gating for lesson listings."""

from typing import Any, Dict, Iterable, List

from app.models.lesson import AccessLevel

# Fields blanked out when a premium lesson is shown to a free user
REDACTED_FIELDS = ("description", "image")


def is_premium_lesson(lesson: Dict[str, Any]) -> bool:
    return lesson.get("accessLevel") == AccessLevel.PREMIUM.value


def redact(lesson: Dict[str, Any], requester_is_premium: bool) -> Dict[str, Any]:
    """
    Return the view of ``lesson`` a requester is allowed to see.

    Premium lessons shown to a non-premium requester keep their public fields
    (title, category, ...) but have their description and image emptied and
    are marked ``locked``. Everything else passes through with
    ``locked=False``. The input document is never modified.

    Args:
        lesson: Lesson document
        requester_is_premium: Premium flag of the requesting user

    Returns:
        A new lesson dictionary
    """
    view = dict(lesson)
    if is_premium_lesson(lesson) and not requester_is_premium:
        for field in REDACTED_FIELDS:
            view[field] = ""
        view["locked"] = True
    else:
        view["locked"] = False
    return view


def redact_all(lessons: Iterable[Dict[str, Any]], requester_is_premium: bool) -> List[Dict[str, Any]]:
    return [redact(lesson, requester_is_premium) for lesson in lessons]
