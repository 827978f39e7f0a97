## Exception raised by the gridSOM package when a caller passes an unusable argument


class InvalidArgumentError(ValueError):
    """Raised when a required argument is missing, empty, or has the wrong depth.

    Args:
            message (str): Human-readable description of the violated precondition.
            parameter (str, optional): Name of the offending parameter. Defaults to None.
    """

    def __init__(self, message: str, parameter: str = None):
        self.parameter = parameter
        if parameter is not None:
            message = f"{message} (parameter: {parameter})"
        super().__init__(message)
