import calendar
from datetime import datetime, timedelta
from functools import total_ordering

from fleming import fleming
import pytz
from dateutil import parser
from dateutil.relativedelta import relativedelta

from rrule_iterator.constants import DEFAULT_TIME_ZONE
from rrule_iterator.time_helpers import convert_to_utc, get_time_zone_object

# Units shorter than a day are added as elapsed time, everything else is added on the wall clock
ABSOLUTE_UNITS = ('seconds', 'minutes', 'hours')


@total_ordering
class TimezoneDate(object):
    """
    An immutable point in time bound to a time zone. Every add and set operation returns a new TimezoneDate,
    so a value can be handed to several advancement steps without being changed underneath them.

    Naive datetimes are treated as wall clock time in the bound time zone. Aware datetimes are converted
    into it.
    """

    def __init__(self, value=None, time_zone=DEFAULT_TIME_ZONE):
        time_zone = get_time_zone_object(time_zone)

        if value is None:
            value = datetime.now(pytz.utc)
        elif isinstance(value, TimezoneDate):
            value = value.date
        elif isinstance(value, str):
            value = parser.parse(value)

        value = fleming.attach_tz_if_none(value, time_zone)

        # dateutil offsets (tzutc, tzoffset) from parsed strings are moved onto pytz before converting
        value = value.astimezone(pytz.utc)

        self._time_zone = time_zone
        self._date = fleming.convert_to_tz(value, time_zone)

    @property
    def date(self):
        """
        The aware datetime in the bound time zone
        """
        return self._date

    @property
    def time_zone(self):
        return self._time_zone

    @property
    def local(self):
        """
        The naive wall clock datetime in the bound time zone
        """
        return fleming.convert_to_tz(self._date, self._time_zone, return_naive=True)

    def _from_local(self, naive):
        """
        Localizes a wall clock datetime. An ambiguous time keeps the offset this date already has, so
        setting a field during the repeated hour of a fall back stays in that hour.
        """
        time_zone = self._time_zone
        try:
            value = time_zone.localize(naive, is_dst=None)
        except pytz.AmbiguousTimeError:
            value = time_zone.localize(naive, is_dst=bool(self._date.dst()))
        except pytz.NonExistentTimeError:
            value = time_zone.normalize(time_zone.localize(naive, is_dst=False))
        return TimezoneDate(value, time_zone)

    def add(self, unit, amount=1):
        """
        Advances by an amount of a relativedelta unit ('seconds' through 'years').
        Days and longer keep the wall clock time across DST changes.
        """
        if unit in ABSOLUTE_UNITS:
            return TimezoneDate(self._date + timedelta(**{unit: amount}), self._time_zone)

        return self._from_local(self.local + relativedelta(**{unit: amount}))

    def add_second(self):
        return self.add('seconds')

    def add_minute(self):
        return self.add('minutes')

    def add_hour(self):
        return self.add('hours')

    def add_day(self):
        return self.add('days')

    def add_week(self):
        return self.add('weeks')

    def add_fortnight(self):
        return self.add('weeks', 2)

    def add_month(self):
        return self.add('months')

    def add_year(self):
        return self.add('years')

    def set_seconds(self, seconds):
        return self._from_local(self.local.replace(second=seconds))

    def set_minutes(self, minutes):
        return self._from_local(self.local.replace(minute=minutes))

    def set_hours(self, hours):
        return self._from_local(self.local.replace(hour=hours))

    def set_date(self, day):
        """
        Sets the day of the month. Raises ValueError when the month has no such day.
        """
        return self._from_local(self.local.replace(day=day))

    def set_day(self, weekday):
        """
        Moves to a weekday (monday is 0) within the current monday based week. This can move backwards.
        """
        local = self.local
        return self._from_local(local + timedelta(days=weekday - local.weekday()))

    def get_seconds(self):
        return self.local.second

    def get_minutes(self):
        return self.local.minute

    def get_hours(self):
        return self.local.hour

    def get_date(self):
        return self.local.day

    def get_day(self):
        return self.local.weekday()

    def days_in_month(self):
        local = self.local
        return calendar.monthrange(local.year, local.month)[1]

    def last_day_of_month(self):
        return self.set_date(self.days_in_month())

    def weeks_until(self, other):
        """
        Whole wall clock weeks from this date to the other date, truncated towards zero
        """
        return int((TimezoneDate(other, self._time_zone).local - self.local) / timedelta(weeks=1))

    def is_before(self, other):
        return self._date < _to_datetime(other)

    def is_after(self, other):
        return self._date > _to_datetime(other)

    def is_same_or_after(self, other):
        return self._date >= _to_datetime(other)

    def to_utc(self):
        """
        Returns a naive utc datetime
        """
        return convert_to_utc(self._date)

    def to_utc_string(self):
        return '{0}Z'.format(self.to_utc().isoformat())

    def isoformat(self):
        return self._date.isoformat()

    def __eq__(self, other):
        if not isinstance(other, (TimezoneDate, datetime)):
            return NotImplemented
        return self._date == _to_datetime(other)

    def __lt__(self, other):
        if not isinstance(other, (TimezoneDate, datetime)):
            return NotImplemented
        return self.is_before(other)

    def __hash__(self):
        return hash(self._date)

    def __repr__(self):
        zone_name = getattr(self._time_zone, 'zone', str(self._time_zone))
        return 'TimezoneDate({0!r}, {1!r})'.format(self.isoformat(), zone_name)

    def __str__(self):
        return self.isoformat()


def _to_datetime(value):
    if isinstance(value, TimezoneDate):
        return value.date
    return value
