from __future__ import annotations

import logging
import secrets
import time
from datetime import datetime, timezone

from app.core.exceptions import NotFoundError, ValidationError
from app.core.policy import filter_profile_feedback, filter_received_feedback
from app.models.auth import User
from app.models.feedback import Feedback, FeedbackCreate, FeedbackUpdate
from app.repositories.base import FeedbackRepository, ProfileRepository
from app.repositories.memory import store

logger = logging.getLogger(__name__)


def _new_feedback_id() -> str:
    return f"feedback_{int(time.time() * 1000)}_{secrets.token_hex(5)[:9]}"


class FeedbackService:
    def __init__(self, feedback: FeedbackRepository, profiles: ProfileRepository) -> None:
        self.feedback = feedback
        self.profiles = profiles

    def create(self, author: User, profile_id: str, data: FeedbackCreate) -> Feedback:
        if self.profiles.get(profile_id) is None:
            raise NotFoundError("Profile not found")

        content = data.content.strip()
        if not content:
            raise ValidationError("Feedback content is required")

        now = datetime.now(timezone.utc)
        feedback = Feedback(
            id=_new_feedback_id(),
            from_user_id=author.id,
            from_user_name=author.full_name,
            to_user_id=profile_id,
            content=content,
            enhanced_content=data.enhanced_content or content,
            is_enhanced=data.is_enhanced,
            created_at=now,
            updated_at=now,
        )
        self.feedback.save(feedback)
        logger.info("Feedback %s created from user=%s to profile=%s", feedback.id, author.id, profile_id)
        return feedback

    def get(self, feedback_id: str) -> Feedback:
        feedback = self.feedback.get(feedback_id)
        if feedback is None:
            raise NotFoundError("Feedback not found")
        return feedback

    def list_for_profile(self, viewer: User, profile_id: str) -> list[Feedback]:
        return filter_profile_feedback(viewer, profile_id, self.feedback.list())

    def list_received(self, viewer: User) -> list[Feedback]:
        return filter_received_feedback(viewer, self.feedback.list())

    def update(self, feedback_id: str, changes: FeedbackUpdate) -> Feedback:
        feedback = self.get(feedback_id)

        fields = changes.model_dump(exclude_unset=True, exclude_none=True)
        if "content" in fields:
            fields["content"] = fields["content"].strip()
            if not fields["content"]:
                raise ValidationError("Feedback content is required")

        fields["updated_at"] = datetime.now(timezone.utc)
        updated = feedback.model_copy(update=fields)
        self.feedback.save(updated)
        logger.info("Feedback %s updated (%s)", feedback_id, ", ".join(sorted(fields)))
        return updated

    def delete(self, feedback_id: str) -> None:
        if not self.feedback.delete(feedback_id):
            raise NotFoundError("Feedback not found")
        logger.info("Feedback %s deleted", feedback_id)


feedback_service = FeedbackService(store.feedback, store.profiles)
