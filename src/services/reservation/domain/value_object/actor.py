from dataclasses import dataclass

from services.shared.domain import UserId


@dataclass(frozen=True)
class Actor:
    """操作者（認証済みの利用者または管理者）"""

    user_id: UserId
    is_admin: bool = False

    def can_act_for(self, owner_id: UserId) -> bool:
        """owner_id の予約を操作できるか"""
        return self.is_admin or self.user_id == owner_id
