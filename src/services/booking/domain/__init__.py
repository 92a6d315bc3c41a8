from .entity import Booking as Booking
from .enum import BookerRole as BookerRole
from .enum import BookingState as BookingState
from .enum import BookingStatus as BookingStatus
from .event import BookingRequested as BookingRequested
from .event import BookingStatusChanged as BookingStatusChanged
from .factory import BookingFactory as BookingFactory
from .port import ItemCatalog as ItemCatalog
from .port import UserDirectory as UserDirectory
from .repository import BookingRepository as BookingRepository
from .value_object import BookableItem as BookableItem
from .value_object import BookingCriteria as BookingCriteria
from .value_object import BookingId as BookingId
from .value_object import BookingPeriod as BookingPeriod
from .value_object import PageRequest as PageRequest
