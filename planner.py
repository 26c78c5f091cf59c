"""
Crop planning calendar: month grid, date matching, upcoming events and
reminders for CropEvent rows.
"""
from datetime import date, datetime, time, timedelta

from agri_data import EVENT_TYPES
from models import CropEvent, create_notification, db

WEEKDAYS = ["Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat"]
MAX_EVENTS_PER_CELL = 3
REMINDER_HOUR = 9
# Keeps the grid and its prev/next links inside what datetime.date can hold.
MIN_YEAR = 2
MAX_YEAR = 9998


def event_title(event_type, crop_name):
    return f"{EVENT_TYPES[event_type]['label']} {crop_name}"


def reminder_time(event_date):
    """Reminders fire one day before the event at 9am local time."""
    return datetime.combine(event_date - timedelta(days=1), time(REMINDER_HOUR, 0))


def shift_month(year, month, delta):
    index = year * 12 + (month - 1) + delta
    return index // 12, index % 12 + 1


def parse_month(raw):
    """Parses a YYYY-MM string into (year, month); raises ValueError otherwise."""
    parts = raw.split('-')
    if len(parts) != 2:
        raise ValueError(f"Invalid month: {raw!r}")
    year, month = (int(part) for part in parts)
    if not MIN_YEAR <= year <= MAX_YEAR or not 1 <= month <= 12:
        raise ValueError(f"Month out of range: {raw!r}")
    return year, month


def _month_bounds(year, month):
    first = date(year, month, 1)
    next_year, next_month = shift_month(year, month, 1)
    last = date(next_year, next_month, 1) - timedelta(days=1)
    return first, last


def grid_days(year, month):
    """Every day shown for a month: Sunday on/before the 1st to Saturday on/after the last."""
    first, last = _month_bounds(year, month)
    start = first - timedelta(days=(first.weekday() + 1) % 7)
    end = last + timedelta(days=(5 - last.weekday()) % 7)
    return [start + timedelta(days=i) for i in range((end - start).days + 1)]


def events_for_day(events, day):
    return [e for e in events if e.event_date == day]


def month_grid(year, month, events, today=None):
    """Weeks of cells for the calendar template."""
    today = today or date.today()
    cells = []
    for day in grid_days(year, month):
        day_events = events_for_day(events, day)
        cells.append({
            'date': day,
            'in_month': day.month == month,
            'is_today': day == today,
            'events': day_events[:MAX_EVENTS_PER_CELL],
            'more': max(0, len(day_events) - MAX_EVENTS_PER_CELL),
        })
    return [cells[i:i + 7] for i in range(0, len(cells), 7)]


def upcoming_events(events, today=None, days=7, limit=5):
    today = today or date.today()
    horizon = today + timedelta(days=days)
    upcoming = [e for e in events if today <= e.event_date < horizon]
    upcoming.sort(key=lambda e: e.event_date)
    return upcoming[:limit]


def _text(form, *names):
    """First non-empty value among names, stripped; None when it is not a string."""
    for name in names:
        value = form.get(name)
        if value is None or value == '':
            continue
        return value.strip() if isinstance(value, str) else None
    return ''


def _parse_date(raw):
    try:
        return date.fromisoformat(raw)
    except ValueError:
        # JSON clients may send a full ISO timestamp
        return datetime.fromisoformat(raw).date()


def validate_event_form(form, default_reminder=False):
    """
    Checks a submitted event form or JSON body. Returns (data, errors);
    data is only usable when errors is empty. A missing reminder takes
    default_reminder: HTML forms omit unchecked boxes, JSON clients omit
    fields they want left at the default.
    """
    errors = {}
    data = {}

    crop_name = _text(form, 'crop_name', 'cropName')
    if crop_name is None:
        errors['crop_name'] = "Crop name must be text"
    elif not crop_name:
        errors['crop_name'] = "Crop name is required"
    elif len(crop_name) > 100:
        errors['crop_name'] = "Crop name must be less than 100 characters"
    data['crop_name'] = crop_name or ''

    event_type = _text(form, 'event_type', 'type')
    if event_type == '':
        event_type = 'planting'
    if event_type is None or event_type not in EVENT_TYPES:
        errors['event_type'] = "Invalid event type"
    data['event_type'] = event_type

    raw_date = _text(form, 'event_date', 'date')
    if raw_date is None:
        errors['event_date'] = "Date must be text"
    elif not raw_date:
        errors['event_date'] = "Date is required"
    else:
        try:
            event_date = _parse_date(raw_date)
        except ValueError:
            errors['event_date'] = "Date must be in YYYY-MM-DD format"
        else:
            if not MIN_YEAR <= event_date.year <= MAX_YEAR:
                errors['event_date'] = "Date is out of range"
            data['event_date'] = event_date

    notes = _text(form, 'notes')
    if notes is None:
        errors['notes'] = "Notes must be text"
    elif len(notes) > 500:
        errors['notes'] = "Notes must be less than 500 characters"
    data['notes'] = notes or None

    reminder = form.get('reminder')
    data['reminder'] = default_reminder if reminder is None else _truthy(reminder)
    return data, errors


def _truthy(value):
    if isinstance(value, bool):
        return value
    return str(value).lower() in ('1', 'true', 'on', 'yes')


def apply_event_data(event, data):
    schedule_changed = (event.event_date != data['event_date']
                        or event.reminder != data['reminder'])

    event.crop_name = data['crop_name']
    event.event_type = data['event_type']
    event.event_date = data['event_date']
    event.notes = data['notes']
    event.reminder = data['reminder']
    event.title = event_title(data['event_type'], data['crop_name'])
    event.reminder_at = reminder_time(data['event_date']) if data['reminder'] else None
    if schedule_changed:
        event.reminder_sent = False
    return event


def send_due_reminders(now=None):
    """Creates one reminder notification per event whose reminder time has passed."""
    now = now or datetime.now()
    due = CropEvent.query.filter(
        CropEvent.reminder == True,  # noqa: E712
        CropEvent.reminder_sent == False,  # noqa: E712
        CropEvent.reminder_at <= now,
    ).all()

    for event in due:
        create_notification(
            f"Reminder: {event.title} on {event.event_date:%A, %b} {event.event_date.day}",
            'reminder')
        event.reminder_sent = True

    if due:
        db.session.commit()
    return len(due)


def seed_sample_events(today=None):
    today = today or date.today()
    samples = [
        ("Tomatoes", "planting", 2, "Start with seedlings in the greenhouse"),
        ("Corn", "watering", 3, None),
        ("Wheat", "harvest", 5, "Eastern field section ready for harvest"),
    ]
    for crop_name, event_type, offset, notes in samples:
        event = CropEvent()
        apply_event_data(event, {
            'crop_name': crop_name,
            'event_type': event_type,
            'event_date': today + timedelta(days=offset),
            'notes': notes,
            'reminder': True,
        })
        db.session.add(event)
    db.session.commit()
