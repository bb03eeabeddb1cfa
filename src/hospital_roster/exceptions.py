from datetime import date, time
from decimal import Decimal


class HospitalError(Exception):
    pass


class RegistrationError(HospitalError):
    pass


class HospitalNotFoundError(RegistrationError):
    def __init__(self, hospital: str) -> None:
        self.hospital = hospital
        super().__init__(f"Hospital not found: {hospital!r}")


class DepartmentMismatchError(RegistrationError):
    def __init__(self, hospital: str, departments: list[str], specializations: list[str]) -> None:
        self.hospital = hospital
        self.departments = departments
        self.specializations = specializations
        super().__init__(
            f"None of the specializations {specializations} match a department of {hospital!r}: {departments}"
        )


class SlotOverlapError(RegistrationError):
    def __init__(self, unique_id: str, slot_id: str) -> None:
        self.unique_id = unique_id
        self.slot_id = slot_id
        super().__init__(f"Slot overlaps with existing slot {slot_id} of doctor {unique_id!r}")


class InvalidSlotError(RegistrationError):
    def __init__(self, slot_date: date, start_time: time, end_time: time, fee: Decimal) -> None:
        self.date = slot_date
        self.start_time = start_time
        self.end_time = end_time
        self.fee = fee
        super().__init__(
            f"Invalid slot on {slot_date}: {start_time:%H:%M}-{end_time:%H:%M}, fee {fee}. "
            "End time cannot be before start time and the fee cannot be negative"
        )


class UserNotFoundError(HospitalError):
    def __init__(self, user_id: int, role: str | None = None) -> None:
        self.user_id = user_id
        self.role = role
        if role is None:
            super().__init__(f"User not found: {user_id}")
        else:
            super().__init__(f"No {role} with id {user_id}")


class SlotNotFoundError(HospitalError):
    def __init__(self, doctor_id: int, slot_id: str) -> None:
        self.doctor_id = doctor_id
        self.slot_id = slot_id
        super().__init__(f"Doctor {doctor_id} has no slot {slot_id!r}")


class DuplicateUserIdError(HospitalError):
    def __init__(self, user_id: int) -> None:
        self.user_id = user_id
        super().__init__(f"User id already in use: {user_id}")
