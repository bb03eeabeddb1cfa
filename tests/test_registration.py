from datetime import date, time
from decimal import Decimal
from typing import Callable

import pytest

from src.hospital_roster.exceptions import (
    DepartmentMismatchError,
    HospitalNotFoundError,
    InvalidSlotError,
    RegistrationError,
    SlotOverlapError,
)
from src.hospital_roster.registration import register_admin, register_doctor, register_patient, slots_overlap
from src.hospital_roster.types import DoctorRegistration, DoctorUser, SlotRequest, User


def slot(start: time, end: time, on: date = date(2024, 1, 1)) -> SlotRequest:
    return {"date": on, "start_time": start, "end_time": end, "fee": Decimal("100")}


class TestSlotsOverlap:
    @pytest.mark.parametrize(
        ("first", "second", "expected"),
        [
            (slot(time(9, 0), time(10, 0)), slot(time(9, 30), time(10, 30)), True),
            (slot(time(9, 0), time(10, 0)), slot(time(8, 0), time(11, 0)), True),
            (slot(time(9, 0), time(10, 0)), slot(time(9, 0), time(10, 0)), True),
            (slot(time(9, 0), time(10, 0)), slot(time(10, 0), time(11, 0)), False),
            (slot(time(9, 0), time(10, 0)), slot(time(8, 0), time(9, 0)), False),
            (slot(time(9, 0), time(10, 0)), slot(time(9, 0), time(10, 0), on=date(2024, 1, 2)), False),
        ],
    )
    def test_half_open_intervals(self, first: SlotRequest, second: SlotRequest, expected: bool) -> None:
        assert slots_overlap(first, second) is expected
        assert slots_overlap(second, first) is expected


class TestRegisterDoctor:
    def test_unknown_hospital(self, roster: list[User], doctor_candidate: Callable[..., DoctorRegistration]) -> None:
        with pytest.raises(HospitalNotFoundError, match="Hospital not found") as exc_info:
            register_doctor(doctor_candidate(hospital="Nowhere General"), roster)
        assert exc_info.value.hospital == "Nowhere General"

    def test_hospital_name_must_match_exactly(
        self, roster: list[User], doctor_candidate: Callable[..., DoctorRegistration]
    ) -> None:
        with pytest.raises(HospitalNotFoundError):
            register_doctor(doctor_candidate(hospital="cityhosp"), roster)

    def test_empty_roster_has_no_hospitals(self, doctor_candidate: Callable[..., DoctorRegistration]) -> None:
        with pytest.raises(HospitalNotFoundError):
            register_doctor(doctor_candidate(), [])

    def test_department_mismatch(self, roster: list[User], doctor_candidate: Callable[..., DoctorRegistration]) -> None:
        with pytest.raises(DepartmentMismatchError) as exc_info:
            register_doctor(doctor_candidate(specializations=["Dermatology", "Orthopedics"]), roster)
        assert exc_info.value.departments == ["Cardiology", "Neurology"]

    def test_no_specializations_never_match(
        self, roster: list[User], doctor_candidate: Callable[..., DoctorRegistration]
    ) -> None:
        with pytest.raises(DepartmentMismatchError):
            register_doctor(doctor_candidate(specializations=[]), roster)

    def test_case_insensitive_partial_department_match(
        self, roster: list[User], doctor_candidate: Callable[..., DoctorRegistration]
    ) -> None:
        doctor = register_doctor(doctor_candidate(specializations=["cardiology"]), roster)

        assert doctor["role"] == "doctor"
        assert doctor["hospital"] == "CityHosp"
        assert doctor["specializations"] == ["cardiology"]

    def test_builds_record_without_touching_roster(
        self, roster: list[User], doctor_candidate: Callable[..., DoctorRegistration]
    ) -> None:
        doctor = register_doctor(doctor_candidate(fee=Decimal("450.50")), roster)

        assert len(roster) == 1
        assert doctor["id"] == 2
        assert len(doctor["slots"]) == 1
        new_slot = doctor["slots"][0]
        assert new_slot["date"] == date(2024, 1, 1)
        assert new_slot["start_time"] == time(9, 0)
        assert new_slot["end_time"] == time(10, 0)
        assert new_slot["fee"] == Decimal("450.50")
        assert new_slot["hospital"] == "CityHosp"

    def test_overlapping_slot_for_same_unique_id(
        self,
        roster: list[User],
        add_doctor: Callable[..., DoctorUser],
        doctor_candidate: Callable[..., DoctorRegistration],
    ) -> None:
        existing = add_doctor(unique_id="DOC-1", start_time=time(9, 0), end_time=time(10, 0))

        with pytest.raises(SlotOverlapError) as exc_info:
            register_doctor(doctor_candidate(unique_id="DOC-1", start_time=time(9, 30), end_time=time(10, 30)), roster)
        assert exc_info.value.slot_id == existing["slots"][0]["id"]
        assert isinstance(exc_info.value, RegistrationError)

    def test_back_to_back_slots_are_accepted(
        self,
        roster: list[User],
        add_doctor: Callable[..., DoctorUser],
        doctor_candidate: Callable[..., DoctorRegistration],
    ) -> None:
        add_doctor(unique_id="DOC-1", start_time=time(9, 0), end_time=time(10, 0))

        doctor = register_doctor(
            doctor_candidate(unique_id="DOC-1", start_time=time(10, 0), end_time=time(11, 0)), roster
        )
        assert doctor["slots"][0]["start_time"] == time(10, 0)

    def test_same_times_on_another_date_are_accepted(
        self,
        roster: list[User],
        add_doctor: Callable[..., DoctorUser],
        doctor_candidate: Callable[..., DoctorRegistration],
    ) -> None:
        add_doctor(unique_id="DOC-1")

        doctor = register_doctor(doctor_candidate(unique_id="DOC-1", slot_date=date(2024, 1, 2)), roster)
        assert doctor["slots"][0]["date"] == date(2024, 1, 2)

    def test_other_doctors_slots_are_ignored(
        self,
        roster: list[User],
        add_doctor: Callable[..., DoctorUser],
        doctor_candidate: Callable[..., DoctorRegistration],
    ) -> None:
        add_doctor(unique_id="DOC-1")

        doctor = register_doctor(doctor_candidate(unique_id="DOC-2", name="Dr. Mehta"), roster)
        assert doctor["unique_id"] == "DOC-2"

    def test_overlap_checked_against_every_registration_of_the_doctor(
        self,
        roster: list[User],
        add_doctor: Callable[..., DoctorUser],
        doctor_candidate: Callable[..., DoctorRegistration],
    ) -> None:
        add_doctor(unique_id="DOC-1", start_time=time(9, 0), end_time=time(10, 0))
        add_doctor(unique_id="DOC-1", start_time=time(12, 0), end_time=time(13, 0))

        with pytest.raises(SlotOverlapError):
            register_doctor(doctor_candidate(unique_id="DOC-1", start_time=time(12, 30), end_time=time(14, 0)), roster)

    def test_fresh_slot_ids(self, add_doctor: Callable[..., DoctorUser]) -> None:
        first = add_doctor(unique_id="DOC-1")
        second = add_doctor(unique_id="DOC-1", slot_date=date(2024, 1, 2))

        assert first["id"] != second["id"]
        assert first["slots"][0]["id"] != second["slots"][0]["id"]

    @pytest.mark.parametrize(
        ("start_time", "end_time", "fee"),
        [
            (time(10, 0), time(9, 0), Decimal("100")),
            (time(9, 0), time(10, 0), Decimal("-1")),
        ],
    )
    def test_invalid_slot(
        self,
        roster: list[User],
        doctor_candidate: Callable[..., DoctorRegistration],
        start_time: time,
        end_time: time,
        fee: Decimal,
    ) -> None:
        with pytest.raises(InvalidSlotError):
            register_doctor(doctor_candidate(start_time=start_time, end_time=end_time, fee=fee), roster)

    def test_zero_length_slot_is_accepted(
        self,
        roster: list[User],
        add_doctor: Callable[..., DoctorUser],
        doctor_candidate: Callable[..., DoctorRegistration],
    ) -> None:
        add_doctor(unique_id="DOC-1", start_time=time(9, 0), end_time=time(10, 0))

        doctor = register_doctor(
            doctor_candidate(unique_id="DOC-1", start_time=time(10, 0), end_time=time(10, 0)), roster
        )
        assert doctor["slots"][0]["start_time"] == doctor["slots"][0]["end_time"]

    def test_free_slot_is_valid(self, roster: list[User], doctor_candidate: Callable[..., DoctorRegistration]) -> None:
        doctor = register_doctor(doctor_candidate(fee=Decimal("0")), roster)
        assert doctor["slots"][0]["fee"] == Decimal("0")


class TestRegisterOtherRoles:
    def test_register_admin(self, roster: list[User]) -> None:
        admin = register_admin(
            {
                "role": "admin",
                "name": "Karan",
                "gender": "male",
                "dob": date(1975, 11, 2),
                "unique_id": "ADM-2",
                "hospital": "Green Valley",
                "location": "Mumbai",
                "departments": ["Orthopedics"],
            },
            roster,
        )

        assert admin["id"] == 2
        assert admin["role"] == "admin"
        assert admin["departments"] == ["Orthopedics"]

    def test_register_patient(self, roster: list[User]) -> None:
        patient = register_patient(
            {"role": "patient", "name": "Priya", "gender": "female", "dob": None, "unique_id": "PAT-1"}, roster
        )

        assert patient["id"] == 2
        assert patient["bookings"] == []
