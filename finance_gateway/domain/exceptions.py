"""Domain-specific exceptions"""

from typing import Dict


class DomainException(Exception):
    """Base exception for domain layer"""

    pass


class RecordStoreError(DomainException):
    """Record store returned an error or is unavailable"""

    pass


class RecordNotFoundError(DomainException):
    """Requested record does not exist"""

    pass


class RecordValidationError(DomainException):
    """Submitted record failed validation"""

    def __init__(self, errors: Dict[str, str]):
        self.errors = errors
        super().__init__("; ".join(f"{field}: {message}" for field, message in errors.items()))


class InvalidTargetError(DomainException, ValueError):
    """Budget or goal target is not a positive finite number"""

    pass


class InvalidAmountError(DomainException, ValueError):
    """Current/spent amount is not a finite number"""

    pass
