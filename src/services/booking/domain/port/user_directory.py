from abc import ABC, abstractmethod

from services.shared.domain import UserId


class UserDirectory(ABC):
    """ユーザー管理（外部コンテキスト）への問い合わせ口"""

    @abstractmethod
    def exists(self, user_id: UserId) -> bool:
        raise NotImplementedError
