from .booking_lifecycle import BookingDetails, BookingLifecycleService
from .comment_eligibility import CommentEligibilityChecker
from .item_booking_projector import ItemBookingProjector, ItemBookings
from .list_bookings import ListBookingsService

__all__ = [
    "BookingDetails",
    "BookingLifecycleService",
    "CommentEligibilityChecker",
    "ItemBookingProjector",
    "ItemBookings",
    "ListBookingsService",
]
