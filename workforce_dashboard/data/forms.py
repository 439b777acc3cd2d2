"""
Field rules for the add/edit employee form.
"""

from __future__ import annotations

import re
from typing import Dict

from workforce_dashboard.data.models import FormDraft
from workforce_dashboard.errors import ValidationError

EMAIL_PATTERN = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")

NAME_REQUIRED = "Name is required"
EMAIL_REQUIRED = "Email is required"
EMAIL_INVALID = "Invalid email format"
DEPARTMENT_REQUIRED = "Department is required"


def validate(draft: FormDraft) -> Dict[str, str]:
    """Return a field -> message map; empty means the draft can be submitted."""
    errors: Dict[str, str] = {}
    if not (draft.name or "").strip():
        errors["name"] = NAME_REQUIRED

    email = draft.email or ""
    if not email.strip():
        errors["email"] = EMAIL_REQUIRED
    elif not EMAIL_PATTERN.fullmatch(email):
        errors["email"] = EMAIL_INVALID

    if not (draft.department or "").strip():
        errors["department"] = DEPARTMENT_REQUIRED
    return errors


def require_valid(draft: FormDraft) -> FormDraft:
    """Record the validation result on the draft and raise if anything failed."""
    draft.errors = validate(draft)
    if draft.errors:
        raise ValidationError(draft.errors)
    return draft
