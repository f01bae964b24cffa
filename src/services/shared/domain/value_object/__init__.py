from .currency import Currency
from .money import Money
from .user_id import UserId

__all__ = ["Currency", "Money", "UserId"]
