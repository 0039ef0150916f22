"""Pet configuration enums shared by pricing, validation and booking."""

from enum import Enum


class PetType(str, Enum):
    CAT = "cat"
    DOG = "dog"


class DogSize(str, Enum):
    """Size class of a boarded dog. Ignored for cats."""
    SMALL = "small"
    LARGE = "large"


class PetCount(str, Enum):
    ONE = "one"
    TWO = "two"

    @property
    def count(self) -> int:
        return 1 if self is PetCount.ONE else 2
