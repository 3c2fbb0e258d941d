"""Integer heuristics.

Generators (evaluation order of ``create_all``):
1. BoundaryNumbers
2. PowersOfTwo
3. RandomNumbers

Operators:
1. NumericalVariance
2. ArithmeticNeighbors
3. BitFlip
"""

from ..base_heuristic import HeuristicKind
from ..factory import HeuristicFactory
from .specification import IntegerSpecification, SUPPORTED_BITS
from .generators import (
    BoundaryNumbersGenerator,
    PowersOfTwoGenerator,
    RandomNumbersGenerator,
)
from .operators import (
    NumericalVarianceOperator,
    ArithmeticNeighborsOperator,
    BitFlipOperator,
)

INTEGER_GENERATORS = HeuristicFactory(HeuristicKind.GENERATOR, "integer")
INTEGER_GENERATORS.register(BoundaryNumbersGenerator)
INTEGER_GENERATORS.register(PowersOfTwoGenerator)
INTEGER_GENERATORS.register(RandomNumbersGenerator)

INTEGER_OPERATORS = HeuristicFactory(HeuristicKind.OPERATOR, "integer")
INTEGER_OPERATORS.register(NumericalVarianceOperator)
INTEGER_OPERATORS.register(ArithmeticNeighborsOperator)
INTEGER_OPERATORS.register(BitFlipOperator)

__all__ = [
    'IntegerSpecification',
    'SUPPORTED_BITS',
    'INTEGER_GENERATORS',
    'INTEGER_OPERATORS',
    'BoundaryNumbersGenerator',
    'PowersOfTwoGenerator',
    'RandomNumbersGenerator',
    'NumericalVarianceOperator',
    'ArithmeticNeighborsOperator',
    'BitFlipOperator',
]
