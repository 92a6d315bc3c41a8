class DomainException(Exception):
    """ドメイン層で発生する基底例外"""

    pass


class ResourceNotFoundException(DomainException):
    """リソースが見つからない場合

    アクセス権の無いリソースの存在を隠す目的でも使用する。
    """

    pass


class AccessDeniedException(DomainException):
    """操作者に権限が無い場合（操作者の存在は判明している）"""

    pass


class BusinessRuleViolationException(DomainException):
    """ビジネスルールに違反した場合"""

    pass


class UnsupportedStateException(DomainException):
    """一覧取得の state パラメータが未知の値の場合"""

    def __init__(self, state: str) -> None:
        super().__init__("Unknown state: UNSUPPORTED_STATUS")
        self.state = state


class DuplicateResourceException(DomainException):
    """リソースの重複エラー（条件付き書き込みの失敗時）"""

    pass


class OptimisticLockException(DomainException):
    """楽観ロックの競合エラー（ステータスが期待値と異なる場合）"""

    pass
