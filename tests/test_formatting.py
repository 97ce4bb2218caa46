"""
Tests for pet type formatting.
"""

import pytest

from petclinic_core.exceptions import PetTypeParseException, ValidationException
from petclinic_core.formatting import (
    PetTypeFormatter,
    PetTypeLookup,
    StaticPetTypeLookup,
)
from petclinic_core.models import PetType
from petclinic_core.utils.config import ClinicConfig


class RecordingLookup(PetTypeLookup):
    """Lookup that counts how often the known types are requested."""

    def __init__(self, pet_types):
        self.pet_types = pet_types
        self.calls = 0

    def find_pet_types(self):
        self.calls += 1
        return self.pet_types


class TestPetTypeFormatterPrint:
    """Test cases for PetTypeFormatter.print."""

    def test_print_name(self, formatter, dog):
        assert formatter.print(dog) == "dog"

    def test_print_missing_name(self, formatter):
        assert formatter.print(PetType()) == "<null>"


class TestPetTypeFormatterParse:
    """Test cases for PetTypeFormatter.parse."""

    def test_parse_known_type(self, formatter):
        result = formatter.parse("dog")

        assert result.name == "dog"
        assert result.id == 2

    def test_parse_is_case_sensitive(self, formatter):
        with pytest.raises(PetTypeParseException, match="type not found: Dog"):
            formatter.parse("Dog")

    def test_parse_unknown_type(self, formatter):
        with pytest.raises(PetTypeParseException) as exc_info:
            formatter.parse("dragon")

        exc = exc_info.value
        assert isinstance(exc, ValidationException)
        assert exc.text == "dragon"
        assert exc.details["text"] == "dragon"
        assert exc.error_code == "PARSE_ERROR"
        assert str(exc) == "type not found: dragon"

    def test_parse_returns_first_match(self):
        first = PetType(id=1, name="bird")
        second = PetType(id=2, name="bird")
        formatter = PetTypeFormatter(StaticPetTypeLookup([first, second]))

        assert formatter.parse("bird") is first

    def test_parse_asks_lookup_each_time(self, dog):
        lookup = RecordingLookup([dog])
        formatter = PetTypeFormatter(lookup)

        formatter.parse("dog")
        formatter.parse("dog")

        assert lookup.calls == 2

    def test_parse_with_empty_lookup(self):
        formatter = PetTypeFormatter(StaticPetTypeLookup([]))

        with pytest.raises(PetTypeParseException):
            formatter.parse("cat")

    def test_print_then_parse(self, formatter, pet_type_lookup):
        hamster = pet_type_lookup.find_pet_types()[2]

        assert formatter.parse(formatter.print(hamster)) is hamster


class TestStaticPetTypeLookup:
    """Test cases for StaticPetTypeLookup."""

    def test_from_names_numbers_types(self, pet_type_lookup):
        pet_types = pet_type_lookup.find_pet_types()

        assert [(t.id, t.name) for t in pet_types] == [
            (1, "cat"),
            (2, "dog"),
            (3, "hamster"),
        ]

    def test_returns_copy(self, pet_type_lookup):
        pet_type_lookup.find_pet_types().clear()

        assert len(pet_type_lookup.find_pet_types()) == 3

    def test_from_config(self):
        lookup = StaticPetTypeLookup.from_config(ClinicConfig(pet_types=["ferret"]))

        assert [t.name for t in lookup.find_pet_types()] == ["ferret"]

    def test_lookup_is_abstract(self):
        with pytest.raises(TypeError):
            PetTypeLookup()
