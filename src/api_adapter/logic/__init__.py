"""Request validation."""

from api_adapter.logic.validation import NoValidation, Validator, no_validation, validator

__all__ = ["NoValidation", "Validator", "no_validation", "validator"]
