from dataclasses import dataclass


@dataclass(frozen=True)
class HotelId:
    """ホテルID"""

    value: str

    def __post_init__(self) -> None:
        if not self.value or not self.value.strip():
            raise ValueError("HotelId cannot be empty")
        if "#" in self.value:
            raise ValueError("HotelId cannot contain '#'")

    def __str__(self) -> str:
        return self.value
