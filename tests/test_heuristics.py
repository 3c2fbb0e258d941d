"""Tests for the integer and string heuristics and their factories."""

import pytest

from valuefuzz.exceptions import UnknownHeuristicError
from valuefuzz.heuristics import (
    HeuristicKind,
    INTEGER_GENERATORS,
    INTEGER_OPERATORS,
    IntegerSpecification,
    STRING_GENERATORS,
    STRING_OPERATORS,
    StringSpecification,
)
from valuefuzz.heuristics.seeding import derive_seed
from valuefuzz.heuristics.string.data import FORMAT_STRINGS

SEED = 42
INT32 = IntegerSpecification()
INT8 = IntegerSpecification(bits=8)
STRINGS = StringSpecification()


def drain(heuristic):
    return [v.value for v in heuristic]


class TestSeeding:
    def test_derive_seed_is_stable(self):
        assert derive_seed(1, "generator", "BoundaryNumbers") == derive_seed(1, "generator", "boundarynumbers")

    def test_derive_seed_separates_components(self):
        assert derive_seed(1, "generator", "A") != derive_seed(1, "operator", "A")
        assert derive_seed(1, "generator", "A") != derive_seed(2, "generator", "A")


class TestIntegerSpecification:
    def test_defaults(self):
        spec = IntegerSpecification.from_dict({})
        assert spec.bits == 32
        assert spec.signed is True
        assert spec.min_value == -(2 ** 31)
        assert spec.max_value == 2 ** 31 - 1

    def test_unsigned(self):
        spec = IntegerSpecification.from_dict({"bits": 16, "signed": "false"})
        assert spec.min_value == 0
        assert spec.max_value == 65535

    def test_unsupported_width_falls_back(self):
        assert IntegerSpecification.from_dict({"bits": 12}).bits == 32
        assert IntegerSpecification.from_dict({"bits": "wide"}).bits == 32


class TestIntegerGenerators:
    def test_boundary_numbers_for_8_bits(self):
        values = drain(INTEGER_GENERATORS.create("BoundaryNumbers", None, INT8, SEED))
        assert values == [0, -1, 1, -129, -128, -127, 126, 127, 128, 254, 255, 256]

    def test_boundary_numbers_are_unique(self):
        values = drain(INTEGER_GENERATORS.create("BoundaryNumbers", None, INT32, SEED))
        assert len(values) == len(set(values))
        assert 2 ** 31 - 1 in values
        assert 2 ** 32 in values
        assert 2 ** 63 - 1 not in values

    def test_powers_of_two(self):
        values = drain(INTEGER_GENERATORS.create("PowersOfTwo", None, INT8, SEED))
        assert values[:4] == [2, 1, -2, -1]
        assert 256 in values
        assert 512 not in values

    def test_random_numbers_stay_in_range(self):
        spec = IntegerSpecification(bits=8, signed=False)
        values = drain(INTEGER_GENERATORS.create("RandomNumbers", {"count": 200}, spec, SEED))
        assert len(values) == 200
        assert all(0 <= v <= 255 for v in values)

    def test_random_numbers_invalid_count_uses_default(self):
        values = drain(INTEGER_GENERATORS.create("RandomNumbers", {"count": "many"}, INT32, SEED))
        assert len(values) == 50

    def test_null_parameters_use_defaults(self):
        values = drain(INTEGER_GENERATORS.create("RandomNumbers", {"count": None}, INT32, SEED))
        assert len(values) == 50
        variance = INTEGER_OPERATORS.create("NumericalVariance", {"range": None, "count": None}, INT32, SEED, [100])
        assert len(drain(variance)) == 5

    def test_same_seed_same_sequence(self):
        first = drain(INTEGER_GENERATORS.create("RandomNumbers", None, INT32, SEED))
        second = drain(INTEGER_GENERATORS.create("RandomNumbers", None, INT32, SEED))
        third = drain(INTEGER_GENERATORS.create("RandomNumbers", None, INT32, SEED + 1))
        assert first == second
        assert first != third

    def test_source_name_is_heuristic_name(self):
        heuristic = INTEGER_GENERATORS.create("boundarynumbers", None, INT32, SEED)
        assert next(heuristic).source_name == "BoundaryNumbers"


class TestIntegerOperators:
    def test_arithmetic_neighbors(self):
        values = drain(INTEGER_OPERATORS.create("ArithmeticNeighbors", None, INT32, SEED, [10]))
        assert values == [9, 11, -10, 20, 5]

    def test_arithmetic_neighbors_of_zero_deduplicated(self):
        values = drain(INTEGER_OPERATORS.create("ArithmeticNeighbors", None, INT32, SEED, [0]))
        assert values == [-1, 1, 0]

    def test_numerical_variance_never_returns_input(self):
        heuristic = INTEGER_OPERATORS.create("NumericalVariance", {"range": 3}, INT32, SEED, [100, 200])
        values = drain(heuristic)
        assert len(values) == 10
        assert all(1 <= abs(v - 100) <= 3 for v in values[:5])
        assert all(1 <= abs(v - 200) <= 3 for v in values[5:])

    def test_bit_flip_changes_one_bit(self):
        values = drain(INTEGER_OPERATORS.create("BitFlip", {"count": 8}, INT8, SEED, [0b1010]))
        assert len(values) == 8
        assert all(bin(v ^ 0b1010).count("1") == 1 for v in values)
        assert len(set(values)) == 8

    def test_operator_keeps_snapshot_of_valid_values(self):
        values = [1, 2]
        heuristic = INTEGER_OPERATORS.create("ArithmeticNeighbors", None, INT32, SEED, values)
        values.append(3)
        assert heuristic.valid_values == (1, 2)


class TestStringHeuristics:
    def test_format_strings_respect_max_length(self):
        spec = StringSpecification(max_length=250)
        values = drain(STRING_GENERATORS.create("FormatStrings", None, spec, SEED))
        assert values == [v for v in FORMAT_STRINGS if len(v) <= 250]
        assert values == ["%n" * 100, "%s" * 100]

    def test_special_characters_include_empty_and_nul(self):
        values = drain(STRING_GENERATORS.create("SpecialCharacters", None, STRINGS, SEED))
        assert "" in values
        assert "\x00" in values

    def test_long_strings(self):
        spec = StringSpecification(max_length=300)
        values = drain(STRING_GENERATORS.create("LongStrings", {"character": "B"}, spec, SEED))
        assert [len(v) for v in values] == [127, 127, 128, 128, 255, 255, 256, 256, 300, 300]
        assert values[0] == "B" * 127

    def test_string_case(self):
        values = drain(STRING_OPERATORS.create("StringCase", None, STRINGS, SEED, ["Hello"]))
        assert values == ["HELLO", "hello", "hELLO"]

    def test_string_repetition(self):
        spec = StringSpecification(max_length=50)
        heuristic = STRING_OPERATORS.create("StringRepetition", {"factors": "2,10,100"}, spec, SEED, ["abc", ""])
        assert drain(heuristic) == ["abc" * 2, "abc" * 10]

    def test_random_character_insertion_adds_one_character(self):
        heuristic = STRING_OPERATORS.create("RandomCharacterInsertion", None, STRINGS, SEED, ["abc"])
        values = drain(heuristic)
        assert len(values) == 3
        assert all(len(v) == 4 for v in values)


class TestHeuristicFactory:
    def test_names_in_registration_order(self):
        assert INTEGER_GENERATORS.names() == ["BoundaryNumbers", "PowersOfTwo", "RandomNumbers"]
        assert INTEGER_OPERATORS.names() == ["NumericalVariance", "ArithmeticNeighbors", "BitFlip"]
        assert STRING_GENERATORS.names() == ["FormatStrings", "SpecialCharacters", "LongStrings"]

    def test_try_create_unknown_returns_none(self):
        assert INTEGER_GENERATORS.try_create("NoSuchGenerator", None, INT32, SEED) is None

    def test_create_unknown_raises(self):
        with pytest.raises(UnknownHeuristicError) as exc_info:
            INTEGER_OPERATORS.create("NoSuchOperator", None, INT32, SEED, [1])
        assert exc_info.value.name == "NoSuchOperator"
        assert exc_info.value.error_code == "unknown_heuristic"

    def test_lookup_is_case_insensitive(self):
        assert "powersoftwo" in INTEGER_GENERATORS
        assert "POWERSOFTWO" in INTEGER_GENERATORS
        assert "StringCase" not in INTEGER_OPERATORS

    def test_create_all_generators(self):
        heuristics = INTEGER_GENERATORS.create_all(INT32, SEED)
        assert [h.name for h in heuristics] == INTEGER_GENERATORS.names()
        assert all(h.kind is HeuristicKind.GENERATOR for h in heuristics)

    def test_create_all_operators_requires_valid_values(self):
        assert INTEGER_OPERATORS.create_all(INT32, SEED, []) == []
        assert INTEGER_OPERATORS.create_all(INT32, SEED) == []
        assert len(INTEGER_OPERATORS.create_all(INT32, SEED, [5])) == 3

    def test_register_rejects_wrong_kind_and_duplicates(self):
        operator_class = type(INTEGER_OPERATORS.create("BitFlip", None, INT32, SEED, [1]))
        generator_class = type(INTEGER_GENERATORS.create("PowersOfTwo", None, INT32, SEED))
        with pytest.raises(TypeError):
            INTEGER_GENERATORS.register(operator_class)
        with pytest.raises(ValueError):
            INTEGER_GENERATORS.register(generator_class)

    def test_describe(self):
        description = STRING_OPERATORS.describe()
        assert description[1]["name"] == "StringRepetition"
        assert description[1]["parameters"] == {"factors": "2,10,100,1000"}
        assert description[1]["kind"] == "operator"
