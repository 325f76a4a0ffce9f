import math
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone

# Julian Day of 2000-01-01 12:00 UTC
J2000 = 2451545.0
DAYS_PER_CENTURY = 36525.0


@dataclass(frozen=True)
class AstronomicalInstant:
    """
    Birth instant on the two time axes the calculators use.

    Computed once per request.
    """
    julian_day: float
    utc: datetime

    @property
    def year(self) -> int:
        return self.utc.year

    @property
    def day_of_year(self) -> int:
        return self.utc.timetuple().tm_yday

    @property
    def centuries_since_j2000(self) -> float:
        return (self.julian_day - J2000) / DAYS_PER_CENTURY

    def shifted(self, hours: float) -> "AstronomicalInstant":
        """
        Same instant moved by a number of hours.
        """
        return AstronomicalInstant(
            julian_day=self.julian_day + hours / 24.0,
            utc=self.utc + timedelta(hours=hours),
        )


def julian_day_number(year: int, month: int, day: int) -> int:
    """
    Fliegel–Van Flandern day number of a Gregorian date.

    Month and year are shifted so that March is month 1.
    """
    a = (14 - month) // 12
    y = year + 4800 - a
    m = month + 12 * a - 3
    return (
        day
        + (153 * m + 2) // 5
        + 365 * y
        + y // 4
        - y // 100
        + y // 400
        - 32045
    )


def julian_day(utc_dt: datetime) -> float:
    """
    Continuous Julian Day for a UTC datetime.
    """
    day_fraction = (
        utc_dt.hour + utc_dt.minute / 60.0 + utc_dt.second / 3600.0
    ) / 24.0
    return julian_day_number(utc_dt.year, utc_dt.month, utc_dt.day) + day_fraction - 0.5


def to_utc_datetime(birth_date: str, birth_time: str, timezone_offset: float) -> datetime:
    """
    Convert local birth date & time into an aware UTC datetime.
    """
    local_dt = datetime.strptime(f"{birth_date} {birth_time}", "%Y-%m-%d %H:%M")
    utc_dt = local_dt - timedelta(hours=timezone_offset)
    return utc_dt.replace(tzinfo=timezone.utc)


def to_astronomical_instant(
    birth_date: str,
    birth_time: str,
    timezone_offset: float = 0.0,
) -> AstronomicalInstant:
    utc_dt = to_utc_datetime(birth_date, birth_time, timezone_offset)
    return AstronomicalInstant(julian_day=julian_day(utc_dt), utc=utc_dt)


def estimate_timezone_offset(longitude: float) -> int:
    """
    Rough zone offset in hours (15° of longitude per hour).

    Only for callers that have no real zone for the birth place.
    """
    return int(math.floor(longitude / 15.0 + 0.5))
