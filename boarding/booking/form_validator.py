"""
Owner/pet form validation gating booking submission.

Every problem is collected in one pass so a form can highlight all of
them at once. Email checking is syntactic only: non-empty and contains
an ``@``.
"""

import logging
from dataclasses import dataclass
from enum import Enum

from boarding.schemas.booking_schema import BookingForm
from boarding.schemas.pet_schema import PetCount

logger = logging.getLogger(__name__)


class FieldId(str, Enum):
    """Form fields that can be reported missing."""

    OWNER_NAME = "owner_name"
    OWNER_EMAIL = "owner_email"
    PET_NAME_1 = "pet_name_1"
    PET_NAME_2 = "pet_name_2"
    AGREED_TO_TERMS = "agreed_to_terms"

    @property
    def display_name(self) -> str:
        return _DISPLAY_NAMES[self]


_DISPLAY_NAMES: dict[FieldId, str] = {
    FieldId.OWNER_NAME: "your name",
    FieldId.OWNER_EMAIL: "email address",
    FieldId.PET_NAME_1: "pet's name",
    FieldId.PET_NAME_2: "second pet's name",
    FieldId.AGREED_TO_TERMS: "terms and conditions",
}


@dataclass(frozen=True)
class ValidationResult:
    valid: bool
    missing_fields: frozenset[FieldId] = frozenset()

    def describe(self) -> str:
        """Human-readable list of missing fields in form order."""
        ordered = [f.display_name for f in FieldId if f in self.missing_fields]
        return ", ".join(ordered)


def _filled(value: str) -> bool:
    return bool(value and value.strip())


def _pet_name(form: BookingForm, index: int) -> str:
    return form.pet_names[index] if len(form.pet_names) > index else ""


def validate(form: BookingForm) -> ValidationResult:
    """Check every required field; never raises."""
    missing: set[FieldId] = set()

    if not _filled(form.owner_name):
        missing.add(FieldId.OWNER_NAME)
    if not _filled(form.owner_email) or "@" not in form.owner_email:
        missing.add(FieldId.OWNER_EMAIL)
    if not _filled(_pet_name(form, 0)):
        missing.add(FieldId.PET_NAME_1)
    if form.pet_count == PetCount.TWO and not _filled(_pet_name(form, 1)):
        missing.add(FieldId.PET_NAME_2)
    if not form.agreed_to_terms:
        missing.add(FieldId.AGREED_TO_TERMS)

    if missing:
        logger.debug("Form validation failed: %s", sorted(f.value for f in missing))
    return ValidationResult(valid=not missing, missing_fields=frozenset(missing))
