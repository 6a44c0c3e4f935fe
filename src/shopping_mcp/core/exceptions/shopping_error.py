class ShoppingError(Exception):
    """
    Base class for every error the shopping server reports to a caller.
    Handlers catch this type and turn it into an error result.
    """

    pass
