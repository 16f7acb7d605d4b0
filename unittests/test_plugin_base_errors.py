import pytest

from paramtree import Validation


@pytest.fixture
def auth_validation() -> type[Validation]:
    class AuthValidation(Validation):
        def validation_block(self, i):
            @i.params("email", "password")
            def _(email, password):
                if not email.value:
                    email.add_error("must be present")
                if not password.value:
                    password.add_error("must be present")
                if email.invalid or password.invalid:
                    self.add_base_error("Invalid email or password")
                    self.add_base_error("Please try again")

    AuthValidation.plugin("base_errors")
    return AuthValidation


class TestBaseErrors:
    def test_base_errors_are_nested_under_base_key(self, auth_validation):
        assert auth_validation.call({"email": "john@example.com"}).messages == {
            "password": ["must be present"],
            "base": ["Invalid email or password", "Please try again"],
        }

    def test_no_base_errors_on_success(self, auth_validation):
        assert auth_validation.call({"email": "john@example.com", "password": "secret"}).success

    def test_custom_key(self, auth_validation):
        auth_validation.plugin("base_errors", key="general")
        messages = auth_validation.call({}).messages
        assert messages["general"] == ["Invalid email or password", "Please try again"]
        assert "base" not in messages

    def test_key_is_inherited(self, auth_validation):
        auth_validation.plugin("base_errors", key="general")

        class SubValidation(auth_validation):
            pass

        SubValidation.plugin("base_errors")
        assert SubValidation.opts["base_errors_key"] == "general"
