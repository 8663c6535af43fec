# ============================================================
# errors.py — Erreurs métier du service Booking
# ------------------------------------------------------------
# Levées par la couche service / repository, traduites en
# réponses HTTP par les handlers enregistrés dans app.py.
# ============================================================


class BookingError(Exception):
    status_code = 400

    def __init__(self, reason: str):
        super().__init__(reason)
        self.reason = reason


class InvalidInput(BookingError):
    status_code = 400


class Conflict(BookingError):
    status_code = 409

    def __init__(self, reason: str = "Time slot already booked"):
        super().__init__(reason)


class NotFound(BookingError):
    status_code = 404

    def __init__(self, reason: str = "not found"):
        super().__init__(reason)
