import re

import pytest

from paramtree import ConfigurationError, UnknownValidatorError, Validation

EMAIL_REGEX = re.compile(r"^[^@\s]+@[^@\s]+$")


@pytest.fixture
def validation_class() -> type[Validation]:
    class OptionsValidation(Validation):
        pass

    OptionsValidation.plugin("validation_options")
    return OptionsValidation


def _errors(validation_class: type[Validation], value, **options) -> list[str]:
    param = validation_class.Param("value", value)
    param.validate(**options)
    return param.errors


class TestValidationOptions:
    def test_dependencies_are_loaded(self, validation_class):
        assert hasattr(validation_class.Param, "validate_presence")
        assert hasattr(validation_class.Param, "type_of")

    @pytest.mark.parametrize(
        "value, options, expected",
        [
            pytest.param(None, {"presence": True}, ["must be present"], id="presence"),
            pytest.param(None, {"presence": False}, [], id="presence disabled"),
            pytest.param("x", {"absence": True}, ["must be absent"], id="absence"),
            pytest.param("x", {"presence": {"message": "is required"}}, [], id="presence with options"),
            pytest.param(None, {"presence": {"message": "is required"}}, ["is required"], id="presence message"),
            pytest.param("abc", {"max_length": 2}, ["length cannot be greater than 2"], id="argument"),
            pytest.param("abc", {"max_length": {"of": 2}}, ["length cannot be greater than 2"], id="mandatory key"),
            pytest.param(
                "abc", {"max_length": {"value": 2}}, ["length cannot be greater than 2"], id="default mandatory key"
            ),
            pytest.param("c", {"inclusion": {"in": ["a", "b"]}}, ["must be one of: a, b"], id="inclusion"),
            pytest.param("a", {"exclusion": {"from": ["a"]}}, ["cannot be one of: a"], id="exclusion"),
            pytest.param(
                "ab", {"length_range": {"within": range(3, 5)}}, ["length must be between 3 and 4"], id="range"
            ),
            pytest.param("x", {"type": {"of": int, "message": "wrong"}}, ["wrong"], id="message"),
            pytest.param(
                1,
                {"gteq": 2, "lteq": 0},
                ["must be greater than or equal to 2", "must be less than or equal to 0"],
                id="aliases",
            ),
            pytest.param(
                "no-email",
                {"format": {"with": EMAIL_REGEX, "message": "is not an email address"}},
                ["is not an email address"],
                id="format",
            ),
            pytest.param(None, {"format": r"^\w+$"}, ["is in invalid format"], id="format of none"),
            pytest.param(
                "", {"presence": True, "max_length": 3, "type": str}, ["must be present"], id="multiple validators"
            ),
        ],
    )
    def test_validate(self, validation_class, value, options, expected):
        assert _errors(validation_class, value, **options) == expected

    def test_allow_nil(self, validation_class):
        assert _errors(validation_class, None, type={"of": int, "allow_nil": True}) == []
        assert _errors(validation_class, None, type={"of": int}) == ["must be integer"]
        assert _errors(validation_class, "", type={"of": int, "allow_nil": True}) == ["must be integer"]

    def test_allow_blank(self, validation_class):
        assert _errors(validation_class, " ", min_length={"of": 3, "allow_blank": True}) == []
        assert _errors(validation_class, None, min_length={"of": 3, "allow_blank": True}) == []
        assert _errors(validation_class, "a", min_length={"of": 3, "allow_blank": True}) == [
            "length cannot be less than 3"
        ]

    def test_unknown_validator(self, validation_class):
        with pytest.raises(UnknownValidatorError, match="unicorn") as error_info:
            _errors(validation_class, 1, unicorn=True)
        assert error_info.value.validator_name == "unicorn"

    def test_missing_mandatory_argument(self, validation_class):
        with pytest.raises(ConfigurationError, match="missing mandatory argument for 'max_length' validator"):
            _errors(validation_class, "a", max_length={"message": "too long"})

    def test_custom_validators(self, validation_class):
        def validate_uuid(param, version=4, message=None):
            if not re.fullmatch(r"[0-9a-f-]{36}", str(param.value)):
                param.add_error(message or f"must be an UUID (version {version})")

        validation_class.plugin("validation_options", validators={"uuid": validate_uuid})

        assert _errors(validation_class, "123", uuid=4) == ["must be an UUID (version 4)"]
        assert _errors(validation_class, "123", uuid={"value": 1, "message": "no UUID"}) == ["no UUID"]
        assert _errors(validation_class, "123", presence=True) == []

    def test_custom_validators_are_inherited_but_not_shared(self, validation_class):
        class SubValidation(validation_class):
            pass

        SubValidation.plugin("validation_options", validators={"even": lambda param, _: None})

        assert _errors(SubValidation, 1, even=True) == []
        with pytest.raises(UnknownValidatorError):
            _errors(validation_class, 1, even=True)

    def test_in_validation_block(self, validation_class):
        class UserValidation(validation_class):
            def validation_block(self, i):
                @i.params("username", "email", "age")
                def _(username, email, age):
                    username.validate(presence=True, max_length=20, type=str)
                    email.validate(presence=True, format={"with": EMAIL_REGEX, "message": "is not an email"})
                    age.validate(type={"of": int, "allow_nil": True}, gteq={"value": 18, "allow_nil": True})

        assert UserValidation.call({"username": "john", "email": "john@example.com"}).success
        assert UserValidation.call({"username": "", "email": "john", "age": 16}).messages == {
            "username": ["must be present"],
            "email": ["is not an email"],
            "age": ["must be greater than or equal to 18"],
        }
