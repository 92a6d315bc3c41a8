from .bookable_item import BookableItem
from .booking_criteria import BookingCriteria
from .booking_id import BookingId
from .booking_period import BookingPeriod
from .page_request import PageRequest

__all__ = [
    "BookableItem",
    "BookingCriteria",
    "BookingId",
    "BookingPeriod",
    "PageRequest",
]
