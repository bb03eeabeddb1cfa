from datetime import date, time
from decimal import Decimal
from typing import Any, Callable

import pytest

from src.hospital_roster.registration import register_admin, register_doctor, register_patient
from src.hospital_roster.roster import add_user
from src.hospital_roster.types import DoctorRegistration, DoctorUser, PatientUser, User


@pytest.fixture
def roster() -> list[User]:
    hospital_roster: list[User] = []
    add_user(
        hospital_roster,
        register_admin(
            {
                "role": "admin",
                "name": "Asha",
                "gender": "female",
                "dob": None,
                "unique_id": "ADM-1",
                "hospital": "CityHosp",
                "location": "Pune",
                "departments": ["Cardiology", "Neurology"],
            },
            hospital_roster,
        ),
    )
    return hospital_roster


@pytest.fixture
def doctor_candidate() -> Callable[..., DoctorRegistration]:
    def build(
        unique_id: str = "DOC-1",
        hospital: str = "CityHosp",
        specializations: list[str] | None = None,
        slot_date: date = date(2024, 1, 1),
        start_time: time = time(9, 0),
        end_time: time = time(10, 0),
        fee: Decimal = Decimal("100"),
        name: str = "Dr. Rao",
    ) -> DoctorRegistration:
        return DoctorRegistration(
            role="doctor",
            name=name,
            gender="male",
            dob=None,
            unique_id=unique_id,
            qualifications="MBBS",
            specializations=specializations if specializations is not None else ["cardiology"],
            experience="10 years",
            hospital=hospital,
            slot={"date": slot_date, "start_time": start_time, "end_time": end_time, "fee": fee},
        )

    return build


@pytest.fixture
def add_doctor(
    roster: list[User], doctor_candidate: Callable[..., DoctorRegistration]
) -> Callable[..., DoctorUser]:
    def build(**kwargs: Any) -> DoctorUser:
        doctor = register_doctor(doctor_candidate(**kwargs), roster)
        add_user(roster, doctor)
        return doctor

    return build


@pytest.fixture
def add_patient(roster: list[User]) -> Callable[[str], PatientUser]:
    def build(name: str) -> PatientUser:
        patient = register_patient(
            {"role": "patient", "name": name, "gender": "female", "dob": None, "unique_id": f"PAT-{name}"},
            roster,
        )
        add_user(roster, patient)
        return patient

    return build
