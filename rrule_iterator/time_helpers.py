from fleming import fleming
import pytz
from dateutil.rrule import weekday as rrule_weekday

from rrule_iterator.constants import WEEK_DAYS
from rrule_iterator.exceptions import InvalidRuleError


def get_time_zone_object(time_zone=None):
    """
    Returns the time zone object from pytz. Strings are looked up by name and tzinfo objects are passed through.
    """
    if time_zone is None:
        return pytz.utc

    if isinstance(time_zone, str):
        return pytz.timezone(time_zone)

    return time_zone


def convert_to_utc(dt, time_zone=None):
    """
    Treats the datetime object as being in the given time zone when it is naive and then converts it to a
    naive utc datetime.
    :type dt: datetime
    """
    # Add timezone info
    dt = fleming.attach_tz_if_none(dt, get_time_zone_object(time_zone))

    # Convert to utc, going through pytz first for dateutil offsets
    return fleming.convert_to_tz(dt.astimezone(pytz.utc), pytz.utc, return_naive=True)


def get_weekday(value):
    """
    Normalizes a weekday to the python convention (monday is 0). Accepts the two letter rrule names ('MO'),
    integers and dateutil weekday instances.
    :raises InvalidRuleError: when the value is not a weekday
    """
    if isinstance(value, rrule_weekday):
        return value.weekday

    if isinstance(value, str):
        try:
            return WEEK_DAYS[value.upper()]
        except KeyError:
            raise InvalidRuleError(f'Invalid weekday {value}, expected one of {list(WEEK_DAYS)}')

    if isinstance(value, int) and not isinstance(value, bool) and 0 <= value <= 6:
        return value

    raise InvalidRuleError(f'Invalid weekday {value!r}')
