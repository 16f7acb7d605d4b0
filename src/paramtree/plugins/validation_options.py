"""
The `validation_options` plugin allows you to declare the validations of a param in one call:
```
UserValidation.plugin("validation_options")

@i.params("username", "email", "age")
def _(username, email, age):
    username.validate(presence=True, max_length=20, type=str)
    email.validate(format={"with": EMAIL_REGEX, "message": "is not an email address"})
    age.validate(type={"of": int, "allow_nil": True})
```
Option values are either the argument of the validation method or a dict with the mandatory argument (under its
key from `MANDATORY_ARG_KEYS` or under `"value"`) and further keyword arguments. `allow_nil` and `allow_blank`
skip the validation for None and blank values respectively.

Validators are looked up in a table which contains all methods of the `validation_helpers` plugin. Custom
validators (functions which receive the param and the arguments) can be added on activation:
```
UserValidation.plugin("validation_options", validators={"uuid": validate_uuid})
```
"""
import sys
from collections.abc import Mapping
from typing import Any, Callable, Optional

from frozendict import frozendict

from ..errors import ConfigurationError, UnknownValidatorError
from . import register_plugin, validation_helpers

ValidatorFunction = Callable[..., None]

NO_ARG_VALIDATORS = frozenset({"absence", "presence", "acceptance"})

DEFAULT_ARG_KEY = "value"
MANDATORY_ARG_KEYS: frozendict[str, str] = frozendict(
    {
        "equality": "value",
        "exact_length": "of",
        "exclusion": "from",
        "format": "with",
        "greater_than": "value",
        "greater_than_or_equal_to": "value",
        "gteq": "value",
        "inclusion": "in",
        "length_range": "within",
        "less_than": "value",
        "less_than_or_equal_to": "value",
        "lteq": "value",
        "max_length": "of",
        "min_length": "of",
        "type": "of",
    }
)

_helpers = validation_helpers.ParamMethods
BUILT_IN_VALIDATORS: frozendict[str, ValidatorFunction] = frozendict(
    {
        "absence": _helpers.validate_absence,
        "acceptance": _helpers.validate_acceptance,
        "equality": _helpers.validate_equality,
        "exact_length": _helpers.validate_exact_length,
        "exclusion": _helpers.validate_exclusion,
        "format": _helpers.validate_format,
        "greater_than": _helpers.validate_greater_than,
        "greater_than_or_equal_to": _helpers.validate_greater_than_or_equal_to,
        "gteq": _helpers.validate_gteq,
        "inclusion": _helpers.validate_inclusion,
        "length_range": _helpers.validate_length_range,
        "less_than": _helpers.validate_less_than,
        "less_than_or_equal_to": _helpers.validate_less_than_or_equal_to,
        "lteq": _helpers.validate_lteq,
        "max_length": _helpers.validate_max_length,
        "min_length": _helpers.validate_min_length,
        "presence": _helpers.validate_presence,
        "type": _helpers.validate_type,
    }
)


def load_dependencies(validation: Any, *args: Any, **kwargs: Any) -> None:  # pylint: disable=unused-argument
    """Activates the `validation_helpers` plugin"""
    validation.plugin("validation_helpers")


def configure(validation: Any, validators: Optional[Mapping[str, ValidatorFunction]] = None) -> None:
    """Adds `validators` to the table of validators"""
    validation.opts["validation_options_validators"] = {
        **validation.opts.get("validation_options_validators", BUILT_IN_VALIDATORS),
        **(validators or {}),
    }


class ParamMethods:
    """Adds `validate` to params"""

    def validate(self, **options: Any) -> None:
        """
        Runs the validators named by the keys of `options`. Raises an `UnknownValidatorError` for names which are
        not in the validator table.
        """
        validators: Mapping[str, ValidatorFunction] = self.validation_class.opts["validation_options_validators"]
        for validator_name, args in options.items():
            validator = validators.get(validator_name)
            if validator is None:
                raise UnknownValidatorError(validator_name)

            if validator_name in NO_ARG_VALIDATORS:
                if isinstance(args, bool):
                    if args:
                        validator(self)
                elif isinstance(args, Mapping):
                    validator(self, **args)
                else:
                    validator(self, args)
            elif isinstance(args, Mapping):
                keyword_args = dict(args)
                allow_nil = keyword_args.pop("allow_nil", False)
                allow_blank = keyword_args.pop("allow_blank", False)
                if allow_nil is True and self.value is None:
                    continue
                if allow_blank is True and self.blank:
                    continue
                mandatory_arg_key = MANDATORY_ARG_KEYS.get(validator_name, DEFAULT_ARG_KEY)
                if mandatory_arg_key in keyword_args:
                    mandatory_arg = keyword_args.pop(mandatory_arg_key)
                elif DEFAULT_ARG_KEY in keyword_args:
                    mandatory_arg = keyword_args.pop(DEFAULT_ARG_KEY)
                else:
                    raise ConfigurationError(f"missing mandatory argument for '{validator_name}' validator")
                validator(self, mandatory_arg, **keyword_args)
            else:
                validator(self, args)


register_plugin("validation_options", sys.modules[__name__])
