from authflow.forms.cross_field import FieldsMatch, passwords_match
from authflow.forms.model import FieldValue
from authflow.forms.violations import Violation


def _values(**kwargs):
    return {name: FieldValue(name=name, value=value) for name, value in kwargs.items()}


def test_matching_passwords_have_no_violation():
    values = _values(password="Abc12345!", password_confirm="Abc12345!")
    assert passwords_match(values) is None


def test_different_passwords_are_a_mismatch():
    values = _values(password="Abc12345!", password_confirm="different")
    assert passwords_match(values) is Violation.PASSWORD_MISMATCH


def test_absent_field_is_not_judged():
    assert passwords_match(_values(password="Abc12345!")) is None
    assert passwords_match(_values(password_confirm="x")) is None
    assert passwords_match({}) is None


def test_custom_pair():
    rule = FieldsMatch(("email", "email_confirm"))
    assert rule(_values(email="a@b.com", email_confirm="a@b.org")) is Violation.PASSWORD_MISMATCH
    assert rule.fields == ("email", "email_confirm")
