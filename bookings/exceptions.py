class ReservationError(Exception):
    """Base class for reservation workflow failures."""


class HostelNotFound(ReservationError):
    def __init__(self, hostel_id):
        super().__init__(f"Hostel {hostel_id} does not exist")
        self.hostel_id = hostel_id


class HostelUnavailable(ReservationError):
    def __init__(self, hostel):
        super().__init__(f"Hostel {hostel.pk} is not available")
        self.hostel = hostel


class InvalidReservationStatus(ReservationError):
    def __init__(self, status):
        super().__init__(f"Unknown reservation status: {status!r}")
        self.status = status
