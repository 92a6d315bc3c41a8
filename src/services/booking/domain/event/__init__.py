from .booking_events import BookingRequested, BookingStatusChanged

__all__ = ["BookingRequested", "BookingStatusChanged"]
