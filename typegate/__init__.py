"""typegate: composable validators for untrusted input."""
from typegate.errors import (
    ConfigurationError,
    Err,
    ErrorKind,
    Ok,
    Result,
    ValidationException,
    ValidationFailure,
)
from typegate.validation import (
    Validator,
    array,
    boolean,
    custom,
    number,
    obj,
    optional,
    or_,
    string,
    validator,
)

__all__ = [
    "ConfigurationError",
    "Err",
    "ErrorKind",
    "Ok",
    "Result",
    "ValidationException",
    "ValidationFailure",
    "Validator",
    "array",
    "boolean",
    "custom",
    "number",
    "obj",
    "optional",
    "or_",
    "string",
    "validator",
]
