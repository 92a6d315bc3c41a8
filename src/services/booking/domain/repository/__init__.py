from .booking_repository import BookingRepository, newest_first

__all__ = ["BookingRepository", "newest_first"]
