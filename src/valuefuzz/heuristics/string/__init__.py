"""String heuristics.

Generators (evaluation order of ``create_all``):
1. FormatStrings
2. SpecialCharacters
3. LongStrings

Operators:
1. StringCase
2. StringRepetition
3. RandomCharacterInsertion
"""

from ..base_heuristic import HeuristicKind
from ..factory import HeuristicFactory
from .specification import StringSpecification
from .generators import (
    FormatStringsGenerator,
    SpecialCharactersGenerator,
    LongStringsGenerator,
)
from .operators import (
    StringCaseOperator,
    StringRepetitionOperator,
    RandomCharacterInsertionOperator,
)

STRING_GENERATORS = HeuristicFactory(HeuristicKind.GENERATOR, "string")
STRING_GENERATORS.register(FormatStringsGenerator)
STRING_GENERATORS.register(SpecialCharactersGenerator)
STRING_GENERATORS.register(LongStringsGenerator)

STRING_OPERATORS = HeuristicFactory(HeuristicKind.OPERATOR, "string")
STRING_OPERATORS.register(StringCaseOperator)
STRING_OPERATORS.register(StringRepetitionOperator)
STRING_OPERATORS.register(RandomCharacterInsertionOperator)

__all__ = [
    'StringSpecification',
    'STRING_GENERATORS',
    'STRING_OPERATORS',
    'FormatStringsGenerator',
    'SpecialCharactersGenerator',
    'LongStringsGenerator',
    'StringCaseOperator',
    'StringRepetitionOperator',
    'RandomCharacterInsertionOperator',
]
