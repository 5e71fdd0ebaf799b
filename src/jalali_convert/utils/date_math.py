from dataclasses import dataclass

'''
Integer calendar arithmetic for Jalali <-> Gregorian conversion.

Both calendars are mapped onto one day ordinal: the number of days since
1600-01-01 in the proleptic Gregorian calendar. Jalali dates reach it through
the Jalali day count (days since 979-01-01 Jalali) shifted by a fixed offset.

No validation happens here. Out-of-range months and days are absorbed by the
arithmetic (Jalali 1400-01-45 is the same day as 1400-02-14), which callers
rely on. Behaviour for negative years is not defined.
'''

# -----------------------------
# Epoch alignment
# -----------------------------

# Jalali year 979 starts in Gregorian year 1600; both day counts begin there.
JALALI_EPOCH_YEAR = 979
GREGORIAN_EPOCH_YEAR = 1600

# Jalali 979-01-01 is day 79 of Gregorian 1600 (1600-03-20, 1600 being leap).
JALALI_EPOCH_OFFSET_DAYS = 79

# -----------------------------
# Cycle lengths
# -----------------------------

# Jalali 33-year cycle: 33 * 365 days plus 8 leap days.
JALALI_33_YEAR_CYCLE_DAYS = 12053
JALALI_LEAP_DAYS_PER_33_YEARS = 8

# Gregorian 400-year cycle: 97 leap years.
GREGORIAN_400_YEAR_CYCLE_DAYS = 146097
# A century without its leading leap day (X00 not divisible by 400).
GREGORIAN_100_YEAR_CYCLE_DAYS = 36524
# Four years with one leap day; shared by both calendars' sub-cycles.
FOUR_YEAR_CYCLE_DAYS = 1461

DAYS_PER_YEAR = 365
DAYS_PER_LEAP_YEAR = 366

# Esfand is 29 days here; its leap day 30 falls through the month walk.
JALALI_MONTH_DAYS = (31, 31, 31, 31, 31, 31, 30, 30, 30, 30, 30, 29)
GREGORIAN_MONTH_DAYS = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


@dataclass(frozen=True)
class CalendarDate:
    year: int
    month: int
    day: int

    def isoformat(self) -> str:
        return f"{self.year:04d}-{self.month:02d}-{self.day:02d}"


# -----------------------------
# Leap years & month lengths
# -----------------------------

def is_leap_year(year: int) -> bool:
    """Gregorian leap-year rule."""
    return year % 400 == 0 or (year % 100 != 0 and year % 4 == 0)


def gregorian_month_length(year: int, month: int) -> int:
    if month == 2 and is_leap_year(year):
        return 29
    return GREGORIAN_MONTH_DAYS[month - 1]


def is_jalali_leap_year(year: int) -> bool:
    """A Jalali year is leap when the ordinal arithmetic gives it 366 days."""
    start = jalali_to_ordinal(CalendarDate(year, 1, 1))
    end = jalali_to_ordinal(CalendarDate(year + 1, 1, 1))
    return end - start == DAYS_PER_LEAP_YEAR


def jalali_month_length(year: int, month: int) -> int:
    if month == 12 and is_jalali_leap_year(year):
        return 30
    return JALALI_MONTH_DAYS[month - 1]


# -----------------------------
# Jalali <-> ordinal
# -----------------------------

def _jalali_months_before(month: int) -> int:
    # Months 1-6 have 31 days, 7-12 have 30; month 13+ keeps counting 30s.
    days = 0
    for m in range(1, month):
        days += 31 if m <= 6 else 30
    return days


def jalali_to_ordinal(jalali: CalendarDate) -> int:
    jy = jalali.year - JALALI_EPOCH_YEAR
    j_day_no = (
        DAYS_PER_YEAR * jy
        + (jy // 33) * JALALI_LEAP_DAYS_PER_33_YEARS
        + (jy % 33 + 3) // 4
    )
    j_day_no += _jalali_months_before(jalali.month)
    j_day_no += jalali.day - 1
    return j_day_no + JALALI_EPOCH_OFFSET_DAYS


def ordinal_to_jalali(day_no: int) -> CalendarDate:
    j_day_no = day_no - JALALI_EPOCH_OFFSET_DAYS

    cycles, j_day_no = divmod(j_day_no, JALALI_33_YEAR_CYCLE_DAYS)
    jy = JALALI_EPOCH_YEAR + 33 * cycles + 4 * (j_day_no // FOUR_YEAR_CYCLE_DAYS)
    j_day_no %= FOUR_YEAR_CYCLE_DAYS

    # The first year of each four-year block is the leap one.
    if j_day_no >= DAYS_PER_LEAP_YEAR:
        jy += (j_day_no - 1) // DAYS_PER_YEAR
        j_day_no = (j_day_no - 1) % DAYS_PER_YEAR

    month = 1
    while month < 12 and j_day_no >= JALALI_MONTH_DAYS[month - 1]:
        j_day_no -= JALALI_MONTH_DAYS[month - 1]
        month += 1

    return CalendarDate(jy, month, j_day_no + 1)


# -----------------------------
# Gregorian <-> ordinal
# -----------------------------

def gregorian_to_ordinal(gregorian: CalendarDate) -> int:
    gy = gregorian.year - GREGORIAN_EPOCH_YEAR
    g_day_no = DAYS_PER_YEAR * gy + (gy + 3) // 4 - (gy + 99) // 100 + (gy + 399) // 400
    for m in range(1, gregorian.month):
        g_day_no += gregorian_month_length(gregorian.year, m)
    g_day_no += gregorian.day - 1
    return g_day_no


def ordinal_to_gregorian(day_no: int) -> CalendarDate:
    g_day_no = day_no

    gy = GREGORIAN_EPOCH_YEAR + 400 * (g_day_no // GREGORIAN_400_YEAR_CYCLE_DAYS)
    g_day_no %= GREGORIAN_400_YEAR_CYCLE_DAYS

    # Only the first century of a 400-year cycle keeps its X00 leap day.
    if g_day_no >= GREGORIAN_100_YEAR_CYCLE_DAYS + 1:
        g_day_no -= 1
        gy += 100 * (g_day_no // GREGORIAN_100_YEAR_CYCLE_DAYS)
        g_day_no %= GREGORIAN_100_YEAR_CYCLE_DAYS
        # Past the short X00 year, realign with the 1461-day blocks.
        if g_day_no >= DAYS_PER_YEAR:
            g_day_no += 1

    gy += 4 * (g_day_no // FOUR_YEAR_CYCLE_DAYS)
    g_day_no %= FOUR_YEAR_CYCLE_DAYS

    if g_day_no >= DAYS_PER_LEAP_YEAR:
        gy += (g_day_no - 1) // DAYS_PER_YEAR
        g_day_no = (g_day_no - 1) % DAYS_PER_YEAR

    month = 1
    while month < 12 and g_day_no >= gregorian_month_length(gy, month):
        g_day_no -= gregorian_month_length(gy, month)
        month += 1

    return CalendarDate(gy, month, g_day_no + 1)


# -----------------------------
# Date-level pivots
# -----------------------------

def jalali_to_gregorian_date(jalali: CalendarDate) -> CalendarDate:
    return ordinal_to_gregorian(jalali_to_ordinal(jalali))


def gregorian_to_jalali_date(gregorian: CalendarDate) -> CalendarDate:
    return ordinal_to_jalali(gregorian_to_ordinal(gregorian))
