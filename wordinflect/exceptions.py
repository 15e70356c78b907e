class UnknownLocaleError(Exception):
    pass


class InvalidScopeError(Exception):
    pass


class InvalidRuleConfig(Exception):
    pass
