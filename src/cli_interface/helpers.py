from datetime import date, datetime, time
from decimal import Decimal, InvalidOperation
from typing import cast

import asyncclick as click

from src.hospital_roster.types import (
    AdminView,
    DashboardView,
    DoctorUser,
    DoctorView,
    PatientView,
    Slot,
    User,
)

DATE_FORMAT = "%Y-%m-%d"
TIME_FORMAT = "%H:%M"


def parse_list(text: str) -> list[str]:
    return [item.strip() for item in text.split(",") if item.strip()]


def parse_date(text: str) -> date:
    try:
        return datetime.strptime(text.strip(), DATE_FORMAT).date()
    except ValueError as err:
        raise click.BadParameter(f"{text!r} is not a date in YYYY-MM-DD format") from err


def parse_optional_date(text: str) -> date | None:
    if not text.strip():
        return None
    return parse_date(text)


def parse_time(text: str) -> time:
    try:
        return datetime.strptime(text.strip(), TIME_FORMAT).time()
    except ValueError as err:
        raise click.BadParameter(f"{text!r} is not a time in HH:MM format") from err


def parse_fee(text: str) -> Decimal:
    try:
        fee = Decimal(text.strip())
    except InvalidOperation as err:
        raise click.BadParameter(f"{text!r} is not a number") from err
    if not fee.is_finite() or fee < 0:
        raise click.BadParameter("Fee must be a non-negative number")
    return fee


def format_money(amount: Decimal, currency: str) -> str:
    return f"{currency}{amount}"


def format_user(user: User) -> str:
    return f"ID: {user['id']} | Name: {user['name']} | Role: {user['role']}"


def format_slot(slot: Slot, currency: str) -> str:
    return (
        f"{slot['date']:{DATE_FORMAT}} {slot['start_time']:{TIME_FORMAT}}-{slot['end_time']:{TIME_FORMAT}} "
        f"at {slot['hospital']} ({format_money(slot['fee'], currency)})"
    )


def format_doctor(doctor: DoctorUser) -> str:
    return f"{doctor['name']} ({', '.join(doctor['specializations'])}) - {doctor['hospital']}"


def get_admin_text(view: AdminView, currency: str) -> str:
    text = f"Admin Dashboard - {view['hospital']}\n"
    text += f"Total Consultations: {view['total_consultations']}\n"
    text += f"Total Revenue: {format_money(view['total_revenue'], currency)}\n"
    text += "Revenue by Doctor:\n"
    for name, revenue in view["revenue_by_doctor"].items():
        text += f"  - {name}: {format_money(revenue, currency)}\n"
    text += "Revenue by Department:\n"
    for department, revenue in view["revenue_by_department"].items():
        text += f"  - {department}: {format_money(revenue, currency)}\n"
    return text


def get_doctor_text(view: DoctorView, currency: str) -> str:
    text = f"Doctor Dashboard - {view['name']}\n"
    text += f"Total Consultations: {view['total_consultations']}\n"
    text += f"Total Earnings: {format_money(view['total_earnings'], currency)}\n"
    text += "Earnings by Hospital:\n"
    for hospital, earnings in view["earnings_by_hospital"].items():
        text += f"  - {hospital}: {format_money(earnings, currency)}\n"
    return text


def get_patient_text(view: PatientView, currency: str) -> str:
    text = f"Patient History - {view['name']}\n"
    if not view["bookings"]:
        text += "  No bookings yet\n"
    for booking in view["bookings"]:
        text += (
            f"  - Doctor ID: {booking['doctor_id']}, Hospital: {booking['hospital']}, "
            f"Date: {booking['date']:{DATE_FORMAT}}, Time: {booking['time']:{TIME_FORMAT}}, "
            f"Fee: {format_money(booking['amount'], currency)}\n"
        )
    return text


def get_dashboard_text(view: DashboardView, currency: str) -> str:
    if view["role"] == "admin":
        return get_admin_text(cast(AdminView, view), currency)
    if view["role"] == "doctor":
        return get_doctor_text(cast(DoctorView, view), currency)
    return get_patient_text(cast(PatientView, view), currency)
