import pytest

from services.booking.domain.enum import BookingState
from services.shared.domain import UnsupportedStateException


class TestBookingState:
    @pytest.mark.parametrize(
        "token, expected",
        [
            ("ALL", BookingState.ALL),
            ("current", BookingState.CURRENT),
            ("Future", BookingState.FUTURE),
            (" past ", BookingState.PAST),
            ("WAITING", BookingState.WAITING),
            ("rejected", BookingState.REJECTED),
        ],
    )
    def test_parse(self, token, expected):
        assert BookingState.parse(token) == expected

    def test_parse_passes_enum_through(self):
        assert BookingState.parse(BookingState.PAST) is BookingState.PAST

    @pytest.mark.parametrize("token", ["UNSUPPORTED_STATUS", "", "APPROVED"])
    def test_unknown_state_raises_error(self, token):
        with pytest.raises(
            UnsupportedStateException, match="Unknown state: UNSUPPORTED_STATUS"
        ):
            BookingState.parse(token)
