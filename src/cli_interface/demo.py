from datetime import date, time
from decimal import Decimal

from src.hospital_roster.bookings import book_slot
from src.hospital_roster.registration import register_admin, register_doctor, register_patient
from src.hospital_roster.roster import add_user
from src.hospital_roster.types import User


def build_demo_roster() -> list[User]:
    """Two hospitals, three doctor registrations and two patients with a handful of bookings."""
    roster: list[User] = []

    add_user(
        roster,
        register_admin(
            {
                "role": "admin",
                "name": "Asha Verma",
                "gender": "female",
                "dob": date(1980, 3, 14),
                "unique_id": "ADM-001",
                "hospital": "CityHosp",
                "location": "Pune",
                "departments": ["Cardiology", "Neurology"],
            },
            roster,
        ),
    )
    add_user(
        roster,
        register_admin(
            {
                "role": "admin",
                "name": "Karan Shah",
                "gender": "male",
                "dob": date(1975, 11, 2),
                "unique_id": "ADM-002",
                "hospital": "Green Valley",
                "location": "Mumbai",
                "departments": ["Orthopedics", "Cardiology"],
            },
            roster,
        ),
    )

    rao_city = register_doctor(
        {
            "role": "doctor",
            "name": "Dr. Rao",
            "gender": "male",
            "dob": date(1970, 6, 1),
            "unique_id": "DOC-100",
            "qualifications": "MBBS, MD",
            "specializations": ["cardiology"],
            "experience": "15 years",
            "hospital": "CityHosp",
            "slot": {
                "date": date(2024, 1, 1),
                "start_time": time(9, 0),
                "end_time": time(10, 0),
                "fee": Decimal("500"),
            },
        },
        roster,
    )
    add_user(roster, rao_city)
    rao_valley = register_doctor(
        {
            "role": "doctor",
            "name": "Dr. Rao",
            "gender": "male",
            "dob": date(1970, 6, 1),
            "unique_id": "DOC-100",
            "qualifications": "MBBS, MD",
            "specializations": ["Cardiology"],
            "experience": "15 years",
            "hospital": "Green Valley",
            "slot": {
                "date": date(2024, 1, 1),
                "start_time": time(11, 0),
                "end_time": time(12, 0),
                "fee": Decimal("650"),
            },
        },
        roster,
    )
    add_user(roster, rao_valley)
    mehta = register_doctor(
        {
            "role": "doctor",
            "name": "Dr. Mehta",
            "gender": "female",
            "dob": date(1982, 9, 23),
            "unique_id": "DOC-200",
            "qualifications": "MBBS, DM",
            "specializations": ["Neurology", "Cardiology"],
            "experience": "9 years",
            "hospital": "CityHosp",
            "slot": {
                "date": date(2024, 1, 2),
                "start_time": time(14, 0),
                "end_time": time(15, 30),
                "fee": Decimal("800"),
            },
        },
        roster,
    )
    add_user(roster, mehta)

    priya = register_patient(
        {"role": "patient", "name": "Priya", "gender": "female", "dob": date(1995, 2, 8), "unique_id": "PAT-1"},
        roster,
    )
    add_user(roster, priya)
    arjun = register_patient(
        {"role": "patient", "name": "Arjun", "gender": "male", "dob": None, "unique_id": "PAT-2"},
        roster,
    )
    add_user(roster, arjun)

    book_slot(roster, priya["id"], rao_city["id"], rao_city["slots"][0]["id"])
    book_slot(roster, priya["id"], mehta["id"], mehta["slots"][0]["id"])
    book_slot(roster, arjun["id"], rao_city["id"], rao_city["slots"][0]["id"])
    book_slot(roster, arjun["id"], rao_valley["id"], rao_valley["slots"][0]["id"])

    return roster
