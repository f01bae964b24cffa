from dataclasses import dataclass


@dataclass(frozen=True)
class UserId:
    """利用者ID（全サービス共通）

    認証は外部サービスが担い、ここでは識別子としてのみ扱う。
    """

    value: str

    def __post_init__(self) -> None:
        if not self.value or not self.value.strip():
            raise ValueError("UserId cannot be empty")

    def __str__(self) -> str:
        return self.value
