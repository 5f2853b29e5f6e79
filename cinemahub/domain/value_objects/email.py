"""Email value object"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Email:
    """Email address as supplied by the user.

    Comparison is case-sensitive; syntax is checked by the API DTOs, this only
    guards against obviously broken values reaching the store.
    """
    value: str

    def __post_init__(self):
        if not isinstance(self.value, str) or "@" not in self.value:
            raise ValueError(f"Invalid email address: {self.value!r}")
        local, _, domain = self.value.rpartition("@")
        if not local or not domain:
            raise ValueError(f"Invalid email address: {self.value!r}")

    def __str__(self) -> str:
        return self.value
