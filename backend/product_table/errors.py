"""Errors raised by the record core."""


class RecordValidationError(ValueError):
    """A draft record was rejected. Nothing was inserted."""

    code = "InvalidRecord"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidId(RecordValidationError):
    code = "InvalidId"


class DuplicateId(RecordValidationError):
    code = "DuplicateId"


class InvalidCategory(RecordValidationError):
    code = "InvalidCategory"


class InvalidPrice(RecordValidationError):
    code = "InvalidPrice"


class InvalidInStock(RecordValidationError):
    code = "InvalidInStock"


class InvalidRating(RecordValidationError):
    code = "InvalidRating"


class RatingOutOfRange(RecordValidationError):
    code = "RatingOutOfRange"


class UnknownField(ValueError):
    """A sort or filter request named a column the table does not have."""

    def __init__(self, field: str):
        super().__init__(f"Unknown field: {field}")
        self.field = field
