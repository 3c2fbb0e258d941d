"""Fuzzing heuristics and their composition.

Each value type has two factories, one for generators and one for operators:

- integer: BoundaryNumbers, PowersOfTwo, RandomNumbers /
  NumericalVariance, ArithmeticNeighbors, BitFlip
- string: FormatStrings, SpecialCharacters, LongStrings /
  StringCase, StringRepetition, RandomCharacterInsertion
"""

from .base_heuristic import FuzzingHeuristic, Generator, Operator, HeuristicKind
from .factory import HeuristicFactory
from .composed import ComposedHeuristic
from .integer import INTEGER_GENERATORS, INTEGER_OPERATORS, IntegerSpecification
from .string import STRING_GENERATORS, STRING_OPERATORS, StringSpecification

__all__ = [
    'FuzzingHeuristic',
    'Generator',
    'Operator',
    'HeuristicKind',
    'HeuristicFactory',
    'ComposedHeuristic',
    'INTEGER_GENERATORS',
    'INTEGER_OPERATORS',
    'IntegerSpecification',
    'STRING_GENERATORS',
    'STRING_OPERATORS',
    'StringSpecification',
]
