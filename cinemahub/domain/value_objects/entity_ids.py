"""Entity ID value objects"""

from dataclasses import dataclass


@dataclass(frozen=True)
class UserId:
    value: int

    def __post_init__(self):
        if isinstance(self.value, bool) or not isinstance(self.value, int) or self.value < 1:
            raise ValueError("User ID must be a positive integer")

    def __str__(self) -> str:
        return str(self.value)
