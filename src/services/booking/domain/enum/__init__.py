from .booker_role import BookerRole
from .booking_state import BookingState
from .booking_status import BookingStatus

__all__ = ["BookerRole", "BookingState", "BookingStatus"]
