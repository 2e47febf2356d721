from __future__ import annotations

import pytest

from app.core.exceptions import NotFoundError, ValidationError
from app.models.feedback import FeedbackCreate, FeedbackUpdate
from app.services.feedback_service import FeedbackService


@pytest.fixture
def service(fresh_store) -> FeedbackService:
    return FeedbackService(fresh_store.feedback, fresh_store.profiles)


def test_create_forces_recipient_and_author(service, coworker):
    created = service.create(coworker, "1", FeedbackCreate(content="Thanks for the onboarding help"))

    assert created.to_user_id == "1"
    assert created.from_user_id == "3"
    assert created.from_user_name == "Emily Davis"
    assert created.id.startswith("feedback_")
    assert created.created_at == created.updated_at


def test_create_defaults_enhanced_content_to_raw_content(service, coworker):
    created = service.create(coworker, "2", FeedbackCreate(content="Solid code reviews"))

    assert created.enhanced_content == "Solid code reviews"
    assert created.is_enhanced is False


def test_create_keeps_supplied_enhancement(service, employee):
    created = service.create(
        employee,
        "3",
        FeedbackCreate(content="nice", enhanced_content="Your work is consistently thoughtful.", is_enhanced=True),
    )

    assert created.enhanced_content == "Your work is consistently thoughtful."
    assert created.is_enhanced is True


def test_create_for_unknown_profile(service, employee):
    with pytest.raises(NotFoundError, match="Profile not found"):
        service.create(employee, "999", FeedbackCreate(content="hello"))


def test_create_rejects_whitespace_content(service, employee):
    with pytest.raises(ValidationError, match="content is required"):
        service.create(employee, "3", FeedbackCreate(content="   "))


def test_list_for_profile_is_role_filtered(service, manager, employee, coworker):
    service.create(manager, "2", FeedbackCreate(content="Great sprint"))

    assert len(service.list_for_profile(manager, "2")) == 2
    assert len(service.list_for_profile(employee, "2")) == 2
    # the co-worker only sees the seeded entry they wrote themselves
    assert [f.from_user_id for f in service.list_for_profile(coworker, "2")] == ["3"]


def test_list_received(service, manager, coworker):
    assert len(service.list_received(manager)) == len(service.feedback.list())
    assert {f.to_user_id for f in service.list_received(coworker)} == {"3"}


def test_list_keeps_insertion_order(service, manager):
    first = service.create(manager, "2", FeedbackCreate(content="one"))
    second = service.create(manager, "2", FeedbackCreate(content="two"))

    ids = [f.id for f in service.list_for_profile(manager, "2")]
    assert ids.index(first.id) < ids.index(second.id)


def test_update_merges_fields(service):
    original = service.get("1")

    updated = service.update("1", FeedbackUpdate(enhanced_content="Rewritten", is_enhanced=True))

    assert updated.content == original.content
    assert updated.enhanced_content == "Rewritten"
    assert updated.updated_at > original.updated_at
    assert service.get("1").enhanced_content == "Rewritten"


def test_update_rejects_whitespace_content(service):
    with pytest.raises(ValidationError, match="Feedback content is required"):
        service.update("1", FeedbackUpdate(content="   "))
    assert service.get("1").content.startswith("Great team player")


def test_update_unknown(service):
    with pytest.raises(NotFoundError):
        service.update("missing", FeedbackUpdate(content="x"))


def test_delete(service):
    service.delete("1")
    with pytest.raises(NotFoundError):
        service.get("1")
    with pytest.raises(NotFoundError):
        service.delete("1")
