"""Unit tests for create/update payload validation."""

from rolodex.application import CreateContactData, UpdateContactData
from rolodex.application.validation import FIELD_RULES, validate_create, validate_update


def _valid_create(**overrides) -> CreateContactData:
    values = {
        "first_name": "Alice",
        "last_name": "Walker",
        "email": "alice@example.com",
        "phone": "555-123-4567",
        "company": "Tech Corp",
    }
    values.update(overrides)
    return CreateContactData(**values)


def test_valid_create_has_no_errors() -> None:
    assert validate_create(_valid_create()) == {}


def test_optional_fields_may_be_missing() -> None:
    payload = CreateContactData(first_name="A", last_name="B", email="a.b@example.com")
    assert validate_create(payload) == {}


def test_create_requires_names_and_email() -> None:
    errors = validate_create(CreateContactData())
    assert set(errors) == {"firstName", "lastName", "email"}
    assert errors["firstName"] == ["First name is required."]


def test_blank_required_field_is_missing() -> None:
    errors = validate_create(_valid_create(first_name="   "))
    assert list(errors) == ["firstName"]


def test_bad_email_is_keyed_to_email() -> None:
    errors = validate_create(_valid_create(email="bad"))
    assert list(errors) == ["email"]
    assert errors["email"] == ["Valid email address is required."]


def test_all_violations_are_collected() -> None:
    payload = _valid_create(
        first_name="x" * 101,
        email="not-an-email",
        phone="5551234567",
        city="c" * 101,
        postal_code="1" * 21,
    )
    errors = validate_create(payload)
    assert set(errors) == {"firstName", "email", "phone", "city", "postalCode"}
    assert errors["firstName"] == ["First name must be at most 100 characters."]
    assert errors["phone"] == ["Phone number must be in format 555-555-5555."]


def test_field_can_report_more_than_one_message() -> None:
    long_bad_email = "x" * 260
    errors = validate_create(_valid_create(email=long_bad_email))
    assert errors["email"] == [
        "Email must be at most 255 characters.",
        "Valid email address is required.",
    ]


def test_bounds_are_inclusive() -> None:
    payload = _valid_create(
        first_name="x" * 100,
        company="c" * 200,
        address_line1="a" * 255,
        country="u" * 100,
    )
    assert validate_create(payload) == {}


def test_phone_format() -> None:
    assert validate_create(_valid_create(phone="555-555-5555")) == {}
    assert "phone" in validate_create(_valid_create(phone="555 555 5555"))
    assert "phone" in validate_create(_valid_create(phone="555-555-555a"))
    assert "phone" in validate_create(_valid_create(phone="555-555-55555"))


def test_empty_phone_is_absent() -> None:
    assert validate_create(_valid_create(phone="")) == {}
    assert validate_create(_valid_create(phone=None)) == {}


def test_whitespace_optional_value_is_checked() -> None:
    errors = validate_create(_valid_create(phone=" " * 50, company=" " * 500))
    assert set(errors) == {"phone", "company"}
    assert errors["phone"] == [
        "Phone number must be at most 20 characters.",
        "Phone number must be in format 555-555-5555.",
    ]
    assert errors["company"] == ["Company name must be at most 200 characters."]


def test_update_whitespace_optional_value_is_checked() -> None:
    errors = validate_update(UpdateContactData(phone="   ", company=" " * 201))
    assert errors["phone"] == ["Phone number must be in format 555-555-5555."]
    assert errors["company"] == ["Company name must be at most 200 characters."]


def test_non_string_value_is_reported() -> None:
    errors = validate_create(_valid_create(first_name=5, is_active=None))
    assert errors == {
        "firstName": ["First name must be a string."],
        "isActive": ["Active flag must be true or false."],
    }


def test_email_domain_without_dot_is_rejected() -> None:
    assert "email" in validate_create(_valid_create(email="a@b"))


def test_update_validates_only_supplied_fields() -> None:
    assert validate_update(UpdateContactData()) == {}
    assert validate_update(UpdateContactData(city="Chicago")) == {}
    errors = validate_update(UpdateContactData(phone="nope"))
    assert list(errors) == ["phone"]


def test_update_cannot_blank_required_field() -> None:
    errors = validate_update(UpdateContactData(last_name="", email=None))
    assert set(errors) == {"lastName", "email"}


def test_update_may_clear_optional_field() -> None:
    assert validate_update(UpdateContactData(company=None, phone="")) == {}


def test_update_rejects_null_active_flag() -> None:
    errors = validate_update(UpdateContactData(is_active=None))
    assert list(errors) == ["isActive"]


def test_rule_table_covers_every_string_field() -> None:
    attrs = {rule.attr for rule in FIELD_RULES}
    assert attrs == {
        "first_name",
        "last_name",
        "email",
        "phone",
        "company",
        "address_line1",
        "address_line2",
        "city",
        "state",
        "postal_code",
        "country",
    }
