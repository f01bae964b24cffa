from typing import TypeVar

from .entity import Entity

ID = TypeVar("ID")


class AggregateRoot(Entity[ID]):
    """集約ルートの基底クラス

    状態遷移で発生したドメインイベントを、呼び出し側が取り出すまで保持する。
    """

    def __init__(self, id: ID) -> None:
        super().__init__(id)
        self._domain_events: list[object] = []

    def add_domain_event(self, event: object) -> None:
        self._domain_events.append(event)

    def flush_domain_events(self) -> list[object]:
        """保持しているイベントを発生順に返し、空にする"""
        events, self._domain_events = self._domain_events, []
        return events
