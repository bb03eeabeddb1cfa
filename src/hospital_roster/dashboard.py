from decimal import ROUND_HALF_EVEN, Decimal
from typing import cast

from src.hospital_roster.exceptions import UserNotFoundError
from src.hospital_roster.roster import doctors_at, find_user, patients
from src.hospital_roster.types import (
    AdminUser,
    AdminView,
    Booking,
    DashboardView,
    DoctorUser,
    DoctorView,
    PatientUser,
    PatientView,
    User,
)

DOCTOR_SHARE = Decimal("0.6")
CENT = Decimal("0.01")


def to_money(amount: Decimal) -> Decimal:
    return amount.quantize(CENT, rounding=ROUND_HALF_EVEN)


def count_slot_bookings(roster: list[User], slot_id: str) -> int:
    return sum(
        1 for patient in patients(roster) if any(booking["slot_id"] == slot_id for booking in patient["bookings"])
    )


def admin_view(admin: AdminUser, roster: list[User]) -> AdminView:
    """
    Revenue rollup for the admin's hospital.

    A slot's booking count is the number of patients holding a booking for it.
    A doctor with several specializations adds the full slot revenue to every
    one of those departments, so the department totals can exceed the hospital total.
    Each slot's revenue is rounded to the cent before it is added anywhere, so the
    per-doctor figures always add up to the hospital total.
    """
    total_consultations = 0
    total_revenue = Decimal(0)
    revenue_by_doctor: dict[str, Decimal] = {}
    revenue_by_department: dict[str, Decimal] = {}

    for doctor in doctors_at(roster, admin["hospital"]):
        for slot in doctor["slots"]:
            booking_count = count_slot_bookings(roster, slot["id"])
            revenue = to_money(booking_count * slot["fee"])
            total_consultations += booking_count
            total_revenue += revenue
            revenue_by_doctor[doctor["name"]] = revenue_by_doctor.get(doctor["name"], Decimal(0)) + revenue
            for department in doctor["specializations"]:
                revenue_by_department[department] = revenue_by_department.get(department, Decimal(0)) + revenue

    return AdminView(
        role="admin",
        user_id=admin["id"],
        hospital=admin["hospital"],
        total_consultations=total_consultations,
        total_revenue=to_money(total_revenue),
        revenue_by_doctor={name: to_money(amount) for name, amount in revenue_by_doctor.items()},
        revenue_by_department={name: to_money(amount) for name, amount in revenue_by_department.items()},
    )


def doctor_bookings(roster: list[User], doctor_id: int) -> list[Booking]:
    return [
        booking for patient in patients(roster) for booking in patient["bookings"] if booking["doctor_id"] == doctor_id
    ]


def doctor_view(doctor: DoctorUser, roster: list[User]) -> DoctorView:
    consultations = doctor_bookings(roster, doctor["id"])
    total_earnings = Decimal(0)
    earnings_by_hospital: dict[str, Decimal] = {}

    for booking in consultations:
        earning = to_money(booking["amount"] * DOCTOR_SHARE)
        total_earnings += earning
        earnings_by_hospital[booking["hospital"]] = earnings_by_hospital.get(booking["hospital"], Decimal(0)) + earning

    return DoctorView(
        role="doctor",
        user_id=doctor["id"],
        name=doctor["name"],
        total_consultations=len(consultations),
        total_earnings=to_money(total_earnings),
        earnings_by_hospital={name: to_money(amount) for name, amount in earnings_by_hospital.items()},
    )


def patient_view(patient: PatientUser) -> PatientView:
    return PatientView(
        role="patient",
        user_id=patient["id"],
        name=patient["name"],
        bookings=list(patient["bookings"]),
    )


def get_dashboard(user_id: int, roster: list[User]) -> DashboardView:
    user = find_user(roster, user_id)
    if user is None:
        raise UserNotFoundError(user_id)

    if user["role"] == "admin":
        return admin_view(cast(AdminUser, user), roster)
    if user["role"] == "doctor":
        return doctor_view(cast(DoctorUser, user), roster)
    return patient_view(cast(PatientUser, user))
