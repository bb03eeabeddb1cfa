import logging
from datetime import date
from typing import cast

import asyncclick as click
from pick import pick

from src.cli_interface.helpers import (
    format_doctor,
    format_slot,
    format_user,
    get_dashboard_text,
    parse_date,
    parse_fee,
    parse_list,
    parse_optional_date,
    parse_time,
)
from src.hospital_roster.bookings import book_slot
from src.hospital_roster.dashboard import get_dashboard
from src.hospital_roster.exceptions import HospitalError, RegistrationError, UserNotFoundError
from src.hospital_roster.registration import register_admin, register_doctor, register_patient
from src.hospital_roster.roster import add_user, doctors, patients
from src.hospital_roster.types import DoctorRegistration, PatientUser, Role, User

logger = logging.getLogger(__name__)

REGISTER_USER = "Register user"
BOOK_SLOT = "Book a slot"
LIST_USERS = "List users"
VIEW_DASHBOARD = "View dashboard"
QUIT = "Quit"
MENU_OPTIONS = [REGISTER_USER, BOOK_SLOT, LIST_USERS, VIEW_DASHBOARD, QUIT]
ROLES: list[Role] = ["admin", "doctor", "patient"]


def prompt_text(label: str) -> str:
    return cast(str, click.prompt(label, type=str, default="", show_default=False))


def prompt_doctor_registration(name: str, gender: str, dob: date | None, unique_id: str) -> DoctorRegistration:
    qualifications = prompt_text("Qualifications")
    specializations = parse_list(prompt_text("Specializations (comma separated)"))
    experience = prompt_text("Experience")
    hospital = prompt_text("Hospital")
    fee = click.prompt("Fee", type=str, value_proc=parse_fee)
    slot_date = click.prompt("Slot date (YYYY-MM-DD)", type=str, value_proc=parse_date)
    start_time = click.prompt("Start time (HH:MM)", type=str, value_proc=parse_time)
    end_time = click.prompt("End time (HH:MM)", type=str, value_proc=parse_time)

    return DoctorRegistration(
        role="doctor",
        name=name,
        gender=gender,
        dob=dob,
        unique_id=unique_id,
        qualifications=qualifications,
        specializations=specializations,
        experience=experience,
        hospital=hospital,
        slot={"date": slot_date, "start_time": start_time, "end_time": end_time, "fee": fee},
    )


def register_user_flow(roster: list[User]) -> User | None:
    role, _ = pick(ROLES, "Select the role")
    name = prompt_text("Name")
    gender = prompt_text("Gender")
    dob = click.prompt(
        "Date of birth (YYYY-MM-DD, Enter to skip)",
        type=str,
        default="",
        show_default=False,
        value_proc=parse_optional_date,
    )
    unique_id = prompt_text("Unique ID")

    user: User
    if role == "admin":
        user = register_admin(
            {
                "role": "admin",
                "name": name,
                "gender": gender,
                "dob": dob,
                "unique_id": unique_id,
                "hospital": prompt_text("Hospital name"),
                "location": prompt_text("Location"),
                "departments": parse_list(prompt_text("Departments (comma separated)")),
            },
            roster,
        )
    elif role == "doctor":
        candidate = prompt_doctor_registration(name, gender, dob, unique_id)
        try:
            user = register_doctor(candidate, roster)
        except RegistrationError as e:
            click.secho(f"Registration rejected: {e}", fg="red")
            return None
    else:
        user = register_patient(
            {
                "role": "patient",
                "name": name,
                "gender": gender,
                "dob": dob,
                "unique_id": unique_id,
            },
            roster,
        )

    add_user(roster, user)
    click.secho(f"User registered successfully (ID: {user['id']})", fg="green")
    return user


def book_slot_flow(roster: list[User], currency: str) -> None:
    all_patients = patients(roster)
    bookable_doctors = [doctor for doctor in doctors(roster) if doctor["slots"]]
    if not all_patients or not bookable_doctors:
        click.secho("A booking needs at least one patient and one doctor with a slot", fg="yellow")
        return

    _, patient_index = pick([format_user(patient) for patient in all_patients], "Select the patient")
    patient: PatientUser = all_patients[patient_index]
    _, doctor_index = pick([format_doctor(doctor) for doctor in bookable_doctors], "Select the doctor")
    doctor = bookable_doctors[doctor_index]
    _, slot_index = pick([format_slot(slot, currency) for slot in doctor["slots"]], "Select the slot")
    slot = doctor["slots"][slot_index]

    try:
        book_slot(roster, patient["id"], doctor["id"], slot["id"])
    except HospitalError as e:
        click.secho(f"Booking failed: {e}", fg="red")
        return
    click.secho(f"Booked {format_slot(slot, currency)} for {patient['name']}", fg="green")


def list_users_flow(roster: list[User]) -> None:
    if not roster:
        click.echo("No registered users")
        return
    click.echo("Registered Users:")
    for user in roster:
        click.echo(format_user(user))


def dashboard_flow(roster: list[User], currency: str) -> None:
    user_id = click.prompt("Enter User ID to view dashboard", type=int)
    try:
        view = get_dashboard(user_id, roster)
    except UserNotFoundError:
        click.secho("No user selected", fg="yellow")
        return
    click.secho("-----------------------", fg="yellow")
    click.echo(get_dashboard_text(view, currency))


def run_session(roster: list[User], currency: str) -> None:
    while True:
        option, _ = pick(MENU_OPTIONS, f"Hospital roster ({len(roster)} users)")
        logger.debug("Selected menu option %s", option)
        if option == REGISTER_USER:
            register_user_flow(roster)
        elif option == BOOK_SLOT:
            book_slot_flow(roster, currency)
        elif option == LIST_USERS:
            list_users_flow(roster)
        elif option == VIEW_DASHBOARD:
            dashboard_flow(roster, currency)
        else:
            return
