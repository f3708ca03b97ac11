"""Submission validation utilities."""

from typing import Optional, Tuple

from ..utils.errors import InvalidDocumentError
from ..utils.logging import get_logger
from .document import Delta
from .models import EditorValue

logger = get_logger(__name__)


class SubmissionValidator:
    """Validate editor values before they are handed on"""

    @staticmethod
    def is_blank_body(body: str) -> bool:
        """True when the serialized body holds no visible text"""
        try:
            return Delta.from_json(body).is_blank()
        except InvalidDocumentError:
            return True

    @staticmethod
    def validate(value: EditorValue) -> Tuple[bool, Optional[str]]:
        """Check that a submission carries text or an image"""
        try:
            document = Delta.from_json(value.body)
        except InvalidDocumentError as e:
            logger.warning(f"Rejected submission with malformed body: {e.message}")
            return False, e.message

        if document.is_blank() and value.image is None:
            return False, "Write a message or attach an image before sending"

        return True, None
