class PrettyLogException(Exception):
    """prettylog の例外基底クラス"""

    pass


class UnknownZoneAlias(PrettyLogException):
    """エイリアスがタイムゾーン表のどの行にも一致しない場合の例外"""

    def __init__(self, alias: str, normalized: str | None = None, reason: str | None = None):
        self.alias = alias
        self.normalized = normalized if normalized is not None else alias
        detail = f"unknown timezone alias: {alias!r}"
        if self.normalized != alias:
            detail += f" (normalized to {self.normalized!r})"
        if reason:
            detail += f": {reason}"
        super().__init__(detail)


class ConfigurationError(PrettyLogException):
    """環境変数や .env の設定値が不正な場合の例外"""

    pass
