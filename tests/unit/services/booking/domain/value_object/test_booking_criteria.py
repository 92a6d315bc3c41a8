import pytest

from services.booking.domain.enum import BookerRole, BookingState, BookingStatus
from services.booking.domain.value_object import BookingCriteria


class TestBookingCriteria:
    """state ごとの条件判定"""

    def test_all_matches_everything(self, now, create_booking):
        criteria = BookingCriteria.for_state(BookingState.ALL, BookerRole.BOOKER, now)
        assert criteria == BookingCriteria()
        assert criteria.is_satisfied_by(
            create_booking(start=-20, end=-10, status=BookingStatus.REJECTED)
        )

    @pytest.mark.parametrize(
        "start, end, expected",
        [(-5, 5, True), (-20, -10, False), (5, 10, False)],
    )
    def test_current(self, now, create_booking, start, end, expected):
        criteria = BookingCriteria.for_state(
            BookingState.CURRENT, BookerRole.BOOKER, now
        )
        assert criteria.is_satisfied_by(create_booking(start=start, end=end)) is expected

    def test_future_for_booker_includes_rejected(self, now, create_booking):
        criteria = BookingCriteria.for_state(
            BookingState.FUTURE, BookerRole.BOOKER, now
        )
        assert criteria.is_satisfied_by(
            create_booking(start=5, end=10, status=BookingStatus.REJECTED)
        )
        assert not criteria.is_satisfied_by(create_booking(start=-5, end=10))

    def test_future_for_owner_excludes_rejected(self, now, create_booking):
        criteria = BookingCriteria.for_state(BookingState.FUTURE, BookerRole.OWNER, now)
        assert not criteria.is_satisfied_by(
            create_booking(start=5, end=10, status=BookingStatus.REJECTED)
        )
        assert criteria.is_satisfied_by(
            create_booking(start=5, end=10, status=BookingStatus.WAITING)
        )

    @pytest.mark.parametrize(
        "status, expected",
        [
            (BookingStatus.APPROVED, True),
            (BookingStatus.CANCELED, True),
            (BookingStatus.WAITING, False),
            (BookingStatus.REJECTED, False),
        ],
    )
    def test_past_excludes_waiting_and_rejected(
        self, now, create_booking, status, expected
    ):
        criteria = BookingCriteria.for_state(BookingState.PAST, BookerRole.BOOKER, now)
        booking = create_booking(start=-20, end=-10, status=status)
        assert criteria.is_satisfied_by(booking) is expected

    @pytest.mark.parametrize("state", [BookingState.WAITING, BookingState.REJECTED])
    def test_status_states_ignore_time(self, now, create_booking, state):
        criteria = BookingCriteria.for_state(state, BookerRole.OWNER, now)
        status = BookingStatus(state.value)
        assert criteria.is_satisfied_by(
            create_booking(start=-20, end=-10, status=status)
        )
        assert criteria.is_satisfied_by(create_booking(start=5, end=10, status=status))
        assert not criteria.is_satisfied_by(
            create_booking(start=5, end=10, status=BookingStatus.APPROVED)
        )

    def test_completed(self, now, create_booking):
        criteria = BookingCriteria.completed(now)
        assert criteria.is_satisfied_by(
            create_booking(start=-20, end=-10, status=BookingStatus.APPROVED)
        )
        assert not criteria.is_satisfied_by(
            create_booking(start=-20, end=10, status=BookingStatus.APPROVED)
        )
        assert not criteria.is_satisfied_by(
            create_booking(start=-20, end=-10, status=BookingStatus.WAITING)
        )
