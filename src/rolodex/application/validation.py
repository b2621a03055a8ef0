"""Field validation for create and update payloads.

Both variants run the same FIELD_RULES table. Every violated rule is reported, keyed by the
wire (camelCase) field name, so a caller can fix all problems in one round trip.
"""

import re
from collections.abc import Callable, Mapping
from dataclasses import dataclass

from email_validator import EmailNotValidError, validate_email

from rolodex.application.dto import CreateContactData, UpdateContactData
from rolodex.domain.entities import (
    ADDRESS_LINE_MAX_LENGTH,
    CITY_MAX_LENGTH,
    COMPANY_MAX_LENGTH,
    COUNTRY_MAX_LENGTH,
    EMAIL_MAX_LENGTH,
    FIRST_NAME_MAX_LENGTH,
    LAST_NAME_MAX_LENGTH,
    PHONE_MAX_LENGTH,
    POSTAL_CODE_MAX_LENGTH,
    STATE_MAX_LENGTH,
)

PHONE_PATTERN = re.compile(r"[0-9]{3}-[0-9]{3}-[0-9]{4}")


def _is_email(value: str) -> bool:
    try:
        validate_email(value, check_deliverability=False)
    except EmailNotValidError:
        return False
    return True


def _is_phone(value: str) -> bool:
    return PHONE_PATTERN.fullmatch(value) is not None


@dataclass(frozen=True)
class FieldRule:
    attr: str
    wire: str
    label: str
    max_length: int
    required: bool = False
    check: Callable[[str], bool] | None = None
    check_message: str = ""


FIELD_RULES: tuple[FieldRule, ...] = (
    FieldRule("first_name", "firstName", "First name", FIRST_NAME_MAX_LENGTH, required=True),
    FieldRule("last_name", "lastName", "Last name", LAST_NAME_MAX_LENGTH, required=True),
    FieldRule(
        "email",
        "email",
        "Email",
        EMAIL_MAX_LENGTH,
        required=True,
        check=_is_email,
        check_message="Valid email address is required.",
    ),
    FieldRule(
        "phone",
        "phone",
        "Phone number",
        PHONE_MAX_LENGTH,
        check=_is_phone,
        check_message="Phone number must be in format 555-555-5555.",
    ),
    FieldRule("company", "company", "Company name", COMPANY_MAX_LENGTH),
    FieldRule("address_line1", "addressLine1", "Address line 1", ADDRESS_LINE_MAX_LENGTH),
    FieldRule("address_line2", "addressLine2", "Address line 2", ADDRESS_LINE_MAX_LENGTH),
    FieldRule("city", "city", "City", CITY_MAX_LENGTH),
    FieldRule("state", "state", "State", STATE_MAX_LENGTH),
    FieldRule("postal_code", "postalCode", "Postal code", POSTAL_CODE_MAX_LENGTH),
    FieldRule("country", "country", "Country", COUNTRY_MAX_LENGTH),
)


def _check_field(rule: FieldRule, value: object) -> list[str]:
    """Return the messages for every rule the value violates."""
    if value is None or value == "":
        return [f"{rule.label} is required."] if rule.required else []
    if not isinstance(value, str):
        return [f"{rule.label} must be a string."]
    messages = []
    blank = not value.strip()
    if rule.required and blank:
        messages.append(f"{rule.label} is required.")
    if len(value) > rule.max_length:
        messages.append(f"{rule.label} must be at most {rule.max_length} characters.")
    # Only None and "" count as absent; whitespace is a present value.
    if rule.check is not None and not (rule.required and blank) and not rule.check(value):
        messages.append(rule.check_message)
    return messages


def _validate(values: Mapping[str, object]) -> dict[str, list[str]]:
    errors: dict[str, list[str]] = {}
    for rule in FIELD_RULES:
        if rule.attr not in values:
            continue
        messages = _check_field(rule, values[rule.attr])
        if messages:
            errors[rule.wire] = messages
    if "is_active" in values and not isinstance(values["is_active"], bool):
        errors["isActive"] = ["Active flag must be true or false."]
    return errors


def validate_create(payload: CreateContactData) -> dict[str, list[str]]:
    """Validate a create payload. Returns an empty dict when valid."""
    values = {rule.attr: getattr(payload, rule.attr) for rule in FIELD_RULES}
    values["is_active"] = payload.is_active
    return _validate(values)


def validate_update(payload: UpdateContactData) -> dict[str, list[str]]:
    """Validate only the fields an update supplies. Returns an empty dict when valid."""
    return _validate(payload.supplied())
