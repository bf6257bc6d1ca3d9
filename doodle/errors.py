class DoodleError(Exception):
    """ Base class for all Doodle errors"""
    pass

class DoodleTypeError(DoodleError):
    """ Raised when a value has the wrong type for the variant holding it"""

class BindingArityError(DoodleError):
    """ Raised when a binding list does not hold an even number of forms"""

class BindingKeyError(DoodleError):
    """ Raised in strict mode when a binding key is not a symbol"""

class UnboundSymbolError(DoodleError):
    """ Raised when a symbol is used before it is bound"""

class KeyValueCountMismatch(DoodleError):
    """ Raised when keys and values of unequal length are zipped into a frame"""

    def __init__(self, key_count: int, value_count: int, context: str = ""):
        message = f"Expected as many values as keys, got {key_count} key(s) and {value_count} value(s)"
        if context:
            message = f"{message} {context}"
        super().__init__(message)
        self.key_count = key_count
        self.value_count = value_count
