class InvalidRuleError(ValueError):
    """
    Raised when a recurrence rule can not be built from the supplied params
    """
    pass
