import re
from dataclasses import dataclass
from typing import Optional

from frozendict import frozendict

from paramtree import Validation


class TestComplexExamples:
    def test_end_to_end_scenario(self):
        class UserValidation(Validation):
            def validation_block(self, i):
                @i.params("username", "age", "tags")
                def _(username, age, tags):
                    if not isinstance(username.value, str):
                        username.add_error("must be string")
                    if not isinstance(age.value, int):
                        age.add_error("must be integer")

                    @tags.each
                    def _(tag):
                        if not isinstance(tag.value, str):
                            tag.add_error("must be string")

        result = UserValidation.call({"username": 123, "age": "18", "tags": [1, "ok"]})

        assert result.failure
        assert result.messages == {
            "username": ["must be string"],
            "age": ["must be integer"],
            "tags": {0: ["must be string"]},
        }

    def test_nested_params(self):
        def check_present_string(param):
            if param.value is None or param.value == "":
                param.add_error("must be present")
            if not isinstance(param.value, str):
                param.add_error("must be string")

        class AddressValidation(Validation):
            def validation_block(self, i):
                @i.param("address")
                def _(address):
                    if not isinstance(address.value, dict):
                        address.add_error("must be hash")

                    @address.params("city", "street")
                    def _(city, street):
                        check_present_string(city)
                        check_present_string(street)

        assert AddressValidation.call({}).messages == {"address": ["must be hash"]}
        assert AddressValidation.call({"address": {}}).messages == {
            "address": {
                "city": ["must be present", "must be string"],
                "street": ["must be present", "must be string"],
            }
        }
        assert AddressValidation.call({"address": {"city": "Cologne", "street": "Domkloster"}}).success

    def test_object_validation_with_plugins(self):
        @dataclass(frozen=True)
        class BankingData:
            iban: str

        @dataclass(frozen=True)
        class Customer:
            name: str
            age: int
            banking_data_per_contract: frozendict[str, BankingData]
            paying_through_sepa: frozendict[str, bool]
            email: Optional[str] = None

        iban_format = re.compile(r"^[A-Z]{2}\d+$")

        class CustomerValidation(Validation):
            pass

        CustomerValidation.plugin("object_validation")
        CustomerValidation.plugin("validation_options")
        CustomerValidation.plugin("full_messages", array_member_names={"banking_data_per_contract": "contract"})

        @CustomerValidation.validate
        def _(validation, customer):
            @customer.attrs("name", "age", "email", "banking_data_per_contract")
            def _(name, age, email, banking_data_per_contract):
                name.validate(presence=True, type=str)
                age.validate(type=int, greater_than_or_equal_to=18)
                email.validate(format={"with": r"@", "allow_nil": True})

                @banking_data_per_contract.each(mapping=True)
                def _(banking_data):
                    @banking_data.attrs("iban")
                    def _(iban):
                        iban.validate(format={"with": iban_format, "message": "is not a valid IBAN"})

        customer = Customer(
            name="John Doe",
            age=42,
            banking_data_per_contract=frozendict(
                {
                    "contract_1": BankingData(iban="DE52940594210000082271"),
                    "contract_2": BankingData(iban="DEA9370400440532013000"),
                    "contract_3": BankingData(iban="DE89370400440532013001"),
                }
            ),
            paying_through_sepa=frozendict({"contract_1": True, "contract_2": True, "contract_3": False}),
        )
        result = CustomerValidation.call(customer)

        assert result.messages == {"banking_data_per_contract": {"contract_2": {"iban": ["is not a valid IBAN"]}}}
        assert result.full_messages == {
            "banking_data_per_contract": {"contract_2": {"iban": ["iban is not a valid IBAN"]}}
        }
        assert result.input is customer
