from app.services.access_control import redact

PREMIUM_LESSON = {
    "id": "l1",
    "title": "Stoicism at Work",
    "category": "Mindset",
    "description": "Full text",
    "image": "https://img.example/stoic.png",
    "accessLevel": "Premium",
}


def test_premium_lesson_is_locked_for_free_requester():
    view = redact(PREMIUM_LESSON, requester_is_premium=False)
    assert view["locked"] is True
    assert view["description"] == ""
    assert view["image"] == ""
    assert view["title"] == "Stoicism at Work"
    assert view["category"] == "Mindset"


def test_premium_lesson_is_open_for_premium_requester():
    view = redact(PREMIUM_LESSON, requester_is_premium=True)
    assert view["locked"] is False
    assert view["description"] == "Full text"
    assert view["image"] == "https://img.example/stoic.png"


def test_free_lesson_is_never_locked():
    lesson = {**PREMIUM_LESSON, "accessLevel": "Free"}
    view = redact(lesson, requester_is_premium=False)
    assert view["locked"] is False
    assert view["description"] == "Full text"


def test_redact_does_not_mutate_input():
    original = dict(PREMIUM_LESSON)
    redact(PREMIUM_LESSON, requester_is_premium=False)
    assert PREMIUM_LESSON == original
