class DomainError(Exception):
    code = "E_DOMAIN"

    def __init__(self, message: str = "") -> None:
        super().__init__(message)


class InvalidInputError(DomainError):
    code = "E_INVALID_INPUT"


class MissingFieldError(InvalidInputError):
    code = "E_MISSING_FIELD"

    def __init__(self, field: str, message: str = "") -> None:
        self.field = field
        super().__init__(message or f"{field} is required. Please complete your profile.")


class MacroConfigurationError(InvalidInputError):
    code = "E_MACRO_CONFIG"
