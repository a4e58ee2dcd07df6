"""InfiValidator: request input validation and NoSQL/XSS injection cleaning."""

from infivalidator.validators import InfiValidator, InfiValidatorError, ValidatorOptions

__version__ = "1.0.0"

__all__ = ["InfiValidator", "InfiValidatorError", "ValidatorOptions", "__version__"]
