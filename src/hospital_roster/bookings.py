import logging
from typing import cast

from src.hospital_roster.exceptions import SlotNotFoundError, UserNotFoundError
from src.hospital_roster.roster import find_slot, find_user
from src.hospital_roster.types import Booking, DoctorUser, PatientUser, User

logger = logging.getLogger(__name__)


def book_slot(roster: list[User], patient_id: int, doctor_id: int, slot_id: str) -> Booking:
    patient = find_user(roster, patient_id)
    if patient is None or patient["role"] != "patient":
        raise UserNotFoundError(patient_id, "patient")
    patient = cast(PatientUser, patient)

    doctor = find_user(roster, doctor_id)
    if doctor is None or doctor["role"] != "doctor":
        raise UserNotFoundError(doctor_id, "doctor")
    doctor = cast(DoctorUser, doctor)

    slot = find_slot(doctor, slot_id)
    if slot is None:
        raise SlotNotFoundError(doctor_id, slot_id)

    booking = Booking(
        slot_id=slot["id"],
        doctor_id=doctor["id"],
        hospital=slot["hospital"],
        date=slot["date"],
        time=slot["start_time"],
        amount=slot["fee"],
    )
    patient["bookings"].append(booking)
    logger.info("Patient %s booked slot %s with doctor %s", patient_id, slot_id, doctor_id)

    return booking
