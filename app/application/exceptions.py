class NotFoundError(LookupError):
    """Raised when a referenced record (service, size, staff, order, item) does not exist."""
    pass


class SaleValidationError(ValueError):
    """Raised when a sale submission is missing required fields or does not resolve to a price."""

    def __init__(self, fields: list[str], message: str | None = None) -> None:
        self.fields = list(fields)
        super().__init__(message or f"Missing or invalid fields: {', '.join(self.fields)}")


class NoStaffError(RuntimeError):
    """Raised when a sale is recorded before any staff member exists."""
    pass


class InvalidStatusTransitionError(ValueError):
    """Raised when an order status change is not one of the allowed workflow actions."""
    pass


class CatalogValidationError(ValueError):
    """Raised when a service document or a catalog edit has an invalid shape or value."""
    pass


class InvalidRecordError(ValueError):
    """Raised when a stored document does not match the expected record shape."""
    pass
