class DomainException(Exception):
    """ドメイン層で発生する基底例外"""

    pass


class BusinessRuleViolationException(DomainException):
    """ビジネスルールに違反した場合（定員・運賃が正でない等）"""

    pass


class DuplicateResourceException(DomainException):
    """リソースの重複エラー（同一の便IDが既に登録済み）"""

    pass


class EmptyIdentifierException(DuplicateResourceException):
    """識別子が空の場合"""

    pass
