"""Open-slot computation for appointment options."""
from collections import defaultdict
from typing import Dict, List, Mapping, Sequence, Set


def compute_availability(
    options: Sequence[Mapping],
    bookings_on_date: Sequence[Mapping],
) -> List[dict]:
    """Return copies of ``options`` with booked slots removed.

    ``bookings_on_date`` must already be restricted to a single
    appointment date. A booking takes its slot out of the option whose
    ``name`` equals the booking's ``treatment``; slots are compared as exact
    strings and the original slot order is kept. Bookings for treatments
    with no matching option are ignored. Inputs are never mutated.
    """
    booked: Dict[str, Set[str]] = defaultdict(set)
    for booking in bookings_on_date:
        booked[booking.get("treatment")].add(booking.get("slot"))

    available = []
    for option in options:
        taken = booked.get(option.get("name"), set())
        remaining = dict(option)
        remaining["slots"] = [slot for slot in option.get("slots") or [] if slot not in taken]
        available.append(remaining)
    return available


def project_specialties(options: Sequence[Mapping]) -> List[dict]:
    """Project options down to their identifier and name."""
    return [{"_id": option.get("_id"), "name": option.get("name")} for option in options]
