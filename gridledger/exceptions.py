class GridError(Exception):
    """
    The base exception for gridledger. The fmt directive
    will be overloaded by the inheriting classes

    :ivar msg: The message associated with the error
    """
    fmt = 'An unspecified error occurred'

    def __init__(self, **kwargs):
        msg = self.fmt.format(**kwargs)
        Exception.__init__(self, msg)
        self.kwargs = kwargs


class NotAdmin(GridError):
    """
    An admin-only operation was called by another account

    :ivar caller: The account that made the call
    """
    fmt = "Account '{caller}' is not the administrator"


class NotOwner(GridError):
    """
    An owner-only operation on a pixel was called by another account

    :ivar caller: The account that made the call
    :ivar row: Row of the pixel
    :ivar column: Column of the pixel
    """
    fmt = "Account '{caller}' does not own pixel ({row}, {column})"


class OutOfBounds(GridError):
    """
    A coordinate outside of [0, size) was passed

    :ivar row: The row requested
    :ivar column: The column requested
    :ivar size: The grid dimension
    """
    fmt = 'Coordinate ({row}, {column}) is outside of a {size}x{size} grid'


class PriceCeilingExceeded(GridError):
    fmt = 'Price {price} is above the ceiling of {ceiling}'


class InvalidColor(GridError):
    fmt = 'Color {color!r} is not allowed'


class InvalidAmount(GridError):
    fmt = 'Amount {amount!r} must be a non-negative integer'


class InvalidMessage(GridError):
    fmt = 'Message could not be stored: {reason}'


class InsufficientFunds(GridError):
    """
    An account tried to spend more than its currency balance

    :ivar account: The spending account
    :ivar balance: The balance it holds
    :ivar amount: The amount it tried to spend
    """
    fmt = "Account '{account}' has {balance} and cannot spend {amount}"


class InvalidConfiguration(GridError):
    fmt = 'Invalid configuration: {reason}'


class ContractExists(GridError):
    """
    When attempting to set a contract, found that it
    already exists in the database

    :ivar contract_name: The name of the contract
                         submitted.
    """
    fmt = "Contract with name '{contract_name}' already exists in the database"


class ContractNotFound(GridError):
    fmt = "No contract named '{contract_name}'"


class PrivateMethodCall(GridError):
    fmt = "Function '{function_name}' of '{contract_name}' is not exported"


class CallDepthExceeded(GridError):
    fmt = 'Call depth exceeded the limit of {limit}'


class InvalidAccount(GridError):
    fmt = 'Account {account!r} must be a non-empty string without separators'


class InvalidKey(GridError):
    """
    A storage key contained a reserved separator or was too long

    :ivar key: The offending key, truncated
    """
    fmt = 'Key {key!r} cannot be stored'
