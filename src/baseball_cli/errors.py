class BaseballCliError(Exception):
    """Base class for every failure that ends a CLI invocation."""

    exit_code = 1


class InvalidDateArgument(BaseballCliError):
    """The --date token is neither a relative keyword nor a YYYY-MM-DD date."""

    exit_code = 2

    def __init__(self, token):
        self.token = token
        super().__init__(
            f"Invalid date '{token}': use yesterday, today, tomorrow or YYYY-MM-DD")


class NetworkError(BaseballCliError):
    """The request to the Stats API failed at the transport or HTTP level."""


class SchemaValidationError(BaseballCliError):
    """The Stats API returned a body that does not match the schedule schema."""


class ConfigError(BaseballCliError):
    pass
