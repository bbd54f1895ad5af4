class BookingStoreError(RuntimeError):
    """Raised when the booking store fails (connection, constraint or query errors)."""
    pass


class BookingNotFoundError(BookingStoreError):
    """Raised when a booking id does not exist in the store."""
    pass


class SlotConflictError(BookingStoreError):
    """Raised when a write would overlap an existing booking."""
    pass
