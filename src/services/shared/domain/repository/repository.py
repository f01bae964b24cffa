from abc import ABC, abstractmethod
from typing import Generic, TypeVar

T = TypeVar("T")
ID = TypeVar("ID")


class Repository(ABC, Generic[T, ID]):
    """集約を ID で取得するレポジトリの基底クラス

    書き込み操作（save / append など）は集約ごとにサブクラスで定義する。
    """

    @abstractmethod
    def find_by_id(self, id: ID) -> T | None:
        raise NotImplementedError
