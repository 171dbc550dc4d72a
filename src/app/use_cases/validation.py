from src.domain.validator import Validator
from src.libs.result import Error


def validation_error(v: Validator) -> Error:
    """Wrap the accumulated field errors in a VALIDATION_FAILED error"""
    return Error("VALIDATION_FAILED", "one or more fields failed validation", details=dict(v.errors))
