import logging
from typing import cast

from src.hospital_roster.exceptions import DuplicateUserIdError
from src.hospital_roster.types import AdminUser, DoctorUser, Hospital, PatientUser, Slot, User

logger = logging.getLogger(__name__)


def next_user_id(roster: list[User]) -> int:
    return max((user["id"] for user in roster), default=0) + 1


def add_user(roster: list[User], user: User) -> User:
    if find_user(roster, user["id"]) is not None:
        raise DuplicateUserIdError(user["id"])
    roster.append(user)
    logger.info("Added %s %s with id %s", user["role"], user["name"], user["id"])
    return user


def find_user(roster: list[User], user_id: int) -> User | None:
    return next((user for user in roster if user["id"] == user_id), None)


def admins(roster: list[User]) -> list[AdminUser]:
    return [cast(AdminUser, user) for user in roster if user["role"] == "admin"]


def doctors(roster: list[User]) -> list[DoctorUser]:
    return [cast(DoctorUser, user) for user in roster if user["role"] == "doctor"]


def patients(roster: list[User]) -> list[PatientUser]:
    return [cast(PatientUser, user) for user in roster if user["role"] == "patient"]


def doctors_at(roster: list[User], hospital_name: str) -> list[DoctorUser]:
    return [doctor for doctor in doctors(roster) if doctor["hospital"] == hospital_name]


def find_doctors_by_unique_id(roster: list[User], unique_id: str) -> list[DoctorUser]:
    return [doctor for doctor in doctors(roster) if doctor["unique_id"] == unique_id]


def list_hospitals(roster: list[User]) -> list[Hospital]:
    """
    Project the hospitals out of the admin records.

    Each admin describes one hospital. The doctors list is every doctor whose
    ``hospital`` equals the admin's hospital name, so the view is only ever as
    fresh as the roster it was computed from.
    """
    return [
        Hospital(
            name=admin["hospital"],
            location=admin["location"],
            departments=list(admin["departments"]),
            doctors=doctors_at(roster, admin["hospital"]),
        )
        for admin in admins(roster)
    ]


def find_hospital(roster: list[User], name: str) -> Hospital | None:
    return next((hospital for hospital in list_hospitals(roster) if hospital["name"] == name), None)


def find_slot(doctor: DoctorUser, slot_id: str) -> Slot | None:
    return next((slot for slot in doctor["slots"] if slot["id"] == slot_id), None)
