from dataclasses import dataclass, field
from typing import Optional

import pytest

from paramtree import Validation


@dataclass
class Address:
    city: Optional[str] = None


@dataclass
class User:
    username: Optional[str] = None
    address: Address = field(default_factory=Address)
    settings: dict = field(default_factory=dict)


@pytest.fixture
def validation_class() -> type[Validation]:
    class UserModelValidation(Validation):
        pass

    UserModelValidation.plugin("object_validation")
    return UserModelValidation


def _require_string(param):
    if not isinstance(param.value, str):
        param.add_error("must be string")


class TestObjectValidation:
    def test_fetch_attr_value(self, validation_class):
        param = validation_class.Param("input", User(username="john"))
        assert param.fetch_attr_value("username") == "john"
        assert param.fetch_attr_value("email") is None
        assert param.fetch_attr_value("address.city") is None

    def test_attrs(self, validation_class):
        @validation_class.validate
        def _(validation, user):
            @user.attrs("username", "address.city", "email")
            def _(username, city, email):
                _require_string(username)
                _require_string(city)
                assert email.value is None

        assert validation_class.call(User(username="john", address=Address(city="Cologne"))).success
        assert validation_class.call(User()).messages == {
            "username": ["must be string"],
            "address.city": ["must be string"],
        }

    def test_dict_attributes_can_be_validated_with_params(self, validation_class):
        @validation_class.validate
        def _(validation, user):
            @user.attrs("settings")
            def _(settings):
                settings.param("theme", _require_string)

        assert validation_class.call(User(settings={"theme": "dark"})).success
        assert validation_class.call(User()).messages == {"settings": {"theme": ["must be string"]}}

    def test_attrs_are_skipped_for_invalid_flat_params(self, validation_class):
        @validation_class.validate
        def _(validation, user):
            if not isinstance(user.value, User):
                user.add_error("must be user")
            user.attrs("username", block=_require_string)

        assert validation_class.call("john").messages == ["must be user"]

    def test_with_validation_options(self, validation_class):
        validation_class.plugin("validation_options")

        class SubValidation(validation_class):
            def validation_block(self, user):
                @user.attrs("username")
                def _(username):
                    username.validate(presence=True, max_length=3, type=str)

        assert SubValidation.call(User(username="john")).messages == {
            "username": ["length cannot be greater than 3"]
        }
