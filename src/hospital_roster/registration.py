import logging
import uuid
from datetime import datetime

from src.hospital_roster.exceptions import (
    DepartmentMismatchError,
    HospitalNotFoundError,
    InvalidSlotError,
    SlotOverlapError,
)
from src.hospital_roster.roster import find_doctors_by_unique_id, find_hospital, next_user_id
from src.hospital_roster.types import (
    AdminRegistration,
    AdminUser,
    DoctorRegistration,
    DoctorUser,
    Hospital,
    PatientRegistration,
    PatientUser,
    Slot,
    SlotRequest,
    User,
)

logger = logging.getLogger(__name__)


def slot_interval(slot: Slot | SlotRequest) -> tuple[datetime, datetime]:
    return (
        datetime.combine(slot["date"], slot["start_time"]),
        datetime.combine(slot["date"], slot["end_time"]),
    )


def slots_overlap(first: Slot | SlotRequest, second: Slot | SlotRequest) -> bool:
    first_start, first_end = slot_interval(first)
    second_start, second_end = slot_interval(second)
    return first_start < second_end and first_end > second_start


def matching_departments(hospital: Hospital, specializations: list[str]) -> list[str]:
    wanted = {specialization.lower() for specialization in specializations}
    return [department for department in hospital["departments"] if department.lower() in wanted]


def new_slot_id(doctor_id: int) -> str:
    return f"{doctor_id}-slot-{uuid.uuid4().hex[:12]}"


def register_doctor(candidate: DoctorRegistration, roster: list[User]) -> DoctorUser:
    """
    Validate a doctor registration against the roster and build the doctor record.

    Checks run in order and the first failure is raised:

    * the slot itself must be sane (end not before start, non-negative fee),
    * some admin must run a hospital named exactly ``candidate["hospital"]``,
    * at least one specialization must equal one of its departments, ignoring case,
    * the slot must not overlap any slot of a doctor already registered under
      the same ``unique_id``.

    The roster is not modified; the caller commits the returned record.
    """
    requested = candidate["slot"]
    if requested["end_time"] < requested["start_time"] or requested["fee"] < 0:
        logger.warning("Rejected doctor %s: invalid slot", candidate["unique_id"])
        raise InvalidSlotError(requested["date"], requested["start_time"], requested["end_time"], requested["fee"])

    hospital = find_hospital(roster, candidate["hospital"])
    if hospital is None:
        logger.warning("Rejected doctor %s: unknown hospital %s", candidate["unique_id"], candidate["hospital"])
        raise HospitalNotFoundError(candidate["hospital"])

    if not matching_departments(hospital, candidate["specializations"]):
        logger.warning("Rejected doctor %s: no department matches at %s", candidate["unique_id"], hospital["name"])
        raise DepartmentMismatchError(hospital["name"], hospital["departments"], candidate["specializations"])

    for existing_doctor in find_doctors_by_unique_id(roster, candidate["unique_id"]):
        for existing_slot in existing_doctor["slots"]:
            if slots_overlap(requested, existing_slot):
                logger.warning(
                    "Rejected doctor %s: slot overlaps %s", candidate["unique_id"], existing_slot["id"]
                )
                raise SlotOverlapError(candidate["unique_id"], existing_slot["id"])

    doctor_id = next_user_id(roster)
    slot = Slot(
        id=new_slot_id(doctor_id),
        date=requested["date"],
        start_time=requested["start_time"],
        end_time=requested["end_time"],
        fee=requested["fee"],
        hospital=candidate["hospital"],
    )
    logger.info("Validated doctor %s at %s with slot %s", candidate["unique_id"], hospital["name"], slot["id"])

    return DoctorUser(
        id=doctor_id,
        role="doctor",
        name=candidate["name"],
        gender=candidate["gender"],
        dob=candidate["dob"],
        unique_id=candidate["unique_id"],
        qualifications=candidate["qualifications"],
        specializations=list(candidate["specializations"]),
        experience=candidate["experience"],
        hospital=candidate["hospital"],
        slots=[slot],
    )


def register_admin(registration: AdminRegistration, roster: list[User]) -> AdminUser:
    return AdminUser(
        id=next_user_id(roster),
        role="admin",
        name=registration["name"],
        gender=registration["gender"],
        dob=registration["dob"],
        unique_id=registration["unique_id"],
        hospital=registration["hospital"],
        location=registration["location"],
        departments=list(registration["departments"]),
    )


def register_patient(registration: PatientRegistration, roster: list[User]) -> PatientUser:
    return PatientUser(
        id=next_user_id(roster),
        role="patient",
        name=registration["name"],
        gender=registration["gender"],
        dob=registration["dob"],
        unique_id=registration["unique_id"],
        bookings=[],
    )
