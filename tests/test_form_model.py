import pytest

from authflow.core.exceptions import FormDefinitionError, UnknownFieldError
from authflow.forms.cross_field import FieldsMatch, passwords_match
from authflow.forms.model import FieldSpec, FormModel
from authflow.forms.validators import email_format, min_length, required, strong_password
from authflow.forms.violations import Violation


def login_form():
    return FormModel([
        FieldSpec("email", "", (required, email_format), label="Email"),
        FieldSpec("password", "", (required, min_length(8)), label="Password"),
        FieldSpec("remember_me", False),
    ])


def reset_form():
    return FormModel(
        [
            FieldSpec("password", "", (required, min_length(8), strong_password), label="Password"),
            FieldSpec(
                "password_confirm",
                "",
                (required,),
                label="Confirm password",
                shows=(Violation.PASSWORD_MISMATCH,),
            ),
        ],
        cross_field=[passwords_match],
    )


class TestConstruction:
    def test_fields_start_untouched_with_initial_values(self):
        form = login_form()
        assert list(form.fields) == ["email", "password", "remember_me"]
        assert form.field("email").value == ""
        assert form.field("remember_me").value is False
        assert not any(f.touched for f in form.fields.values())

    def test_initial_values_are_validated(self):
        form = login_form()
        assert form.field("email").violations == [Violation.REQUIRED, Violation.EMAIL_FORMAT]
        assert form.field("remember_me").valid
        assert not form.is_valid()

    def test_duplicate_field_names_rejected(self):
        with pytest.raises(FormDefinitionError):
            FormModel([FieldSpec("email"), FieldSpec("email")])

    def test_cross_field_rule_must_name_existing_fields(self):
        with pytest.raises(FormDefinitionError):
            FormModel([FieldSpec("password")], cross_field=[passwords_match])

    def test_fields_mapping_is_read_only(self):
        form = login_form()
        with pytest.raises(TypeError):
            form.fields["email"] = None


class TestSetValue:
    def test_set_value_revalidates_and_touches(self):
        form = login_form()
        form.set_value("email", "user@example.com")
        email = form.field("email")
        assert email.value == "user@example.com"
        assert email.violations == []
        assert email.touched
        assert not form.field("password").touched

    def test_set_value_without_touch(self):
        form = login_form()
        form.set_value("email", "user", touch=False)
        assert form.field("email").violations == [Violation.EMAIL_FORMAT]
        assert not form.field("email").touched

    def test_unknown_field(self):
        form = login_form()
        with pytest.raises(UnknownFieldError):
            form.set_value("username", "bob")
        with pytest.raises(KeyError):
            form.field("username")

    def test_valid_login_form(self):
        form = login_form()
        form.set_value("email", "user@example.com")
        form.set_value("password", "longenough1")
        assert form.is_valid()

    def test_cross_field_reevaluated_on_either_field(self):
        form = reset_form()
        form.set_value("password", "Abc12345!")
        assert form.form_violations == (Violation.PASSWORD_MISMATCH,)

        form.set_value("password_confirm", "Abc12345!")
        assert form.form_violations == ()
        assert form.is_valid()

        form.set_value("password", "Abc12345?x")
        assert form.form_violations == (Violation.PASSWORD_MISMATCH,)
        assert not form.is_valid()

    def test_fields_valid_but_mismatch_keeps_form_invalid(self):
        form = reset_form()
        form.set_value("password", "Abc12345!")
        form.set_value("password_confirm", "Abc12345@")
        assert all(f.valid for f in form.fields.values())
        assert not form.is_valid()
        assert not form.state().valid


class TestTouched:
    def test_mark_all_touched_is_idempotent(self):
        form = login_form()
        form.mark_all_touched()
        first = {n: (f.touched, list(f.violations)) for n, f in form.fields.items()}
        form.mark_all_touched()
        second = {n: (f.touched, list(f.violations)) for n, f in form.fields.items()}
        assert first == second
        assert all(touched for touched, _ in second.values())

    def test_mark_touched_single_field(self):
        form = login_form()
        form.mark_touched("password")
        assert form.field("password").touched
        assert not form.field("email").touched

    def test_violations_hidden_until_touched(self):
        form = login_form()
        assert form.visible_violations("email") == []
        form.mark_touched("email")
        assert form.visible_violations("email") == [Violation.REQUIRED, Violation.EMAIL_FORMAT]


class TestPresentation:
    def test_messages_use_labels(self):
        form = login_form()
        form.set_value("password", "short1")
        assert form.messages("password") == ["Password must be at least 8 characters"]
        form.set_value("password", "")
        assert form.messages("password") == [
            "Password is required",
            "Password must be at least 8 characters",
        ]

    def test_mismatch_shown_under_confirmation(self):
        form = reset_form()
        form.set_value("password", "Abc12345!")
        form.set_value("password_confirm", "different")
        assert form.visible_violations("password_confirm") == [Violation.PASSWORD_MISMATCH]
        assert form.messages("password_confirm") == ["Passwords do not match"]
        assert Violation.PASSWORD_MISMATCH not in form.visible_violations("password")

    def test_messages_unknown_field(self):
        with pytest.raises(UnknownFieldError):
            login_form().messages("nope")

    def test_errors_lists_invalid_fields_and_form_rules(self):
        form = reset_form()
        form.set_value("password", "Abc12345!")
        assert form.errors() == {
            "password_confirm": ["required"],
            "__form__": ["password-mismatch"],
        }


class TestSnapshot:
    def test_snapshot_includes_untouched_defaults(self):
        form = login_form()
        form.set_value("email", "user@example.com")
        assert form.snapshot() == {
            "email": "user@example.com",
            "password": "",
            "remember_me": False,
        }

    def test_state_is_a_copy(self):
        form = login_form()
        state = form.state()
        form.set_value("email", "user@example.com")
        assert state.fields["email"].value == ""
        assert state.fields["email"].violations == [Violation.REQUIRED, Violation.EMAIL_FORMAT]
        assert form.field("email").violations == []


def test_generic_match_rule_on_custom_form():
    form = FormModel(
        [FieldSpec("email", "", (required,)), FieldSpec("email_confirm", "", (required,))],
        cross_field=[FieldsMatch(("email", "email_confirm"))],
    )
    form.set_value("email", "a@b.com")
    form.set_value("email_confirm", "a@b.com")
    assert form.is_valid()
