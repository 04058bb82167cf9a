"""Custom warning category for multiflag."""


class MultiflagWarning(UserWarning):
    """Warning category for multiflag-specific warnings.

    This can be used to filter multiflag warnings:
    >>> import warnings
    >>> warnings.filterwarnings("ignore", category=MultiflagWarning)
    """

    pass
