"""Seed derivation for deterministic heuristics."""

import random
import hashlib
from datetime import datetime
from typing import Any

from valuefuzz.utils.logger import get_logger

logger = get_logger(__name__)

SEED_BYTES = 8


def generate_seed() -> int:
    """Generate a fresh 64-bit seed based on the current timestamp."""
    timestamp = datetime.now().timestamp()
    # Use hash to ensure we get a good distribution
    seed_bytes = hashlib.md5(f"{timestamp}:{random.random()}".encode()).digest()
    seed = int.from_bytes(seed_bytes[:SEED_BYTES], byteorder='big', signed=True)
    logger.debug(f"Generated request seed {seed}")
    return seed


def derive_seed(master_seed: int, component: str, operation: str = "default") -> int:
    """Derive a deterministic seed for one heuristic from the request seed.

    Args:
        master_seed: Seed of the request
        component: Heuristic kind, e.g. 'generator' or 'operator'
        operation: Heuristic name

    Returns:
        Deterministic 64-bit seed for the component/operation
    """
    seed_input = f"{master_seed}:{component}:{operation.lower()}"
    seed_bytes = hashlib.md5(seed_input.encode()).digest()
    return int.from_bytes(seed_bytes[:SEED_BYTES], byteorder='big')


def random_for(master_seed: int, component: str, operation: str = "default") -> random.Random:
    """Get a Random instance seeded for a specific heuristic."""
    return random.Random(derive_seed(master_seed, component, operation))


def shuffle_deterministic(rng: random.Random, items: Any) -> list:
    """Shuffle a copy of items with the given Random instance."""
    shuffled = list(items)
    rng.shuffle(shuffled)
    return shuffled
