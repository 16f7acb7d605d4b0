import pytest

from paramtree import Validation


@pytest.fixture
def user_validation() -> type[Validation]:
    class UserValidation(Validation):
        def validation_block(self, i):
            @i.param("account_type")
            def _(account_type):
                if self.context("admin") and account_type.value != "admin":
                    account_type.add_error("must be equal to 'admin'")
                self.context(
                    "visitor",
                    "demo",
                    block=lambda: account_type.value is None or account_type.add_error("must be empty"),
                )
                if self.context("default") and account_type.value is not None:
                    account_type.add_error("must not be set")

    UserValidation.plugin("contexts")
    return UserValidation


class TestContexts:
    def test_default_context(self, user_validation):
        assert user_validation().current_context == "default"
        assert user_validation.call({"account_type": "admin"}).messages == {"account_type": ["must not be set"]}
        assert user_validation.call({}).success

    def test_context_passed_on_initialization(self, user_validation):
        validation = user_validation(context="admin")
        assert validation({"account_type": "invalid"}).messages == {"account_type": ["must be equal to 'admin'"]}
        assert validation({"account_type": "admin"}).success

    @pytest.mark.parametrize("context", ["visitor", "demo"])
    def test_multiple_context_values(self, user_validation, context):
        assert user_validation.call({"account_type": "x"}, context=context).messages == {
            "account_type": ["must be empty"]
        }

    def test_context_returns_whether_it_matches(self, user_validation):
        validation = user_validation(context="editor")
        assert validation.context("editor", "admin")
        assert not validation.context("admin")
