from dataclasses import dataclass


@dataclass(frozen=True)
class RoomTypeId:
    """客室タイプID（ホテル内で一意）"""

    value: str

    def __post_init__(self) -> None:
        if not self.value or not self.value.strip():
            raise ValueError("RoomTypeId cannot be empty")
        if "#" in self.value:
            raise ValueError("RoomTypeId cannot contain '#'")

    def __str__(self) -> str:
        return self.value
