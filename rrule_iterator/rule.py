import copy
import logging

from rrule_iterator.constants import DEFAULT_TIME_ZONE, FREQUENCIES, LEGACY
from rrule_iterator.exceptions import InvalidRuleError
from rrule_iterator.time_helpers import get_time_zone_object, get_weekday
from rrule_iterator.timezone_date import TimezoneDate

LOG = logging.getLogger(__name__)

# Param keys accepted by RecurrenceRule.from_params mapped to the constructor arguments
PARAM_NAMES = {
    'frequency': 'frequency',
    'interval': 'interval',
    'byDay': 'by_day',
    'byMonthDay': 'by_month_day',
    'byHour': 'by_hour',
    'byMinute': 'by_minute',
    'bySecond': 'by_second',
    'count': 'count',
    'dtStart': 'dt_start',
    'tzId': 'tz_id',
}


def normalize_params(params):
    """
    Renames any legacy param names to their current names. A current name always wins over its legacy
    alias. The passed params are not modified.
    :rtype: dict
    """
    # Create a deep copy because we will manipulate
    params = copy.deepcopy(params)

    for legacy_name, name in LEGACY.items():
        if legacy_name not in params:
            continue

        value = params.pop(legacy_name)
        LOG.warning('The {0} recurrence param has been replaced by {1}'.format(legacy_name, name))
        params.setdefault(name, value)

    return params


def get_frequency(value):
    """
    Returns the frequency constant for a frequency name ('WEEKLY') or constant. Note that these constants
    are ranked from SECONDLY up, which is the reverse of the dateutil.rrule constants.
    """
    if isinstance(value, str):
        try:
            return FREQUENCIES[value.upper()]
        except KeyError:
            raise InvalidRuleError('Invalid frequency {0}, expected one of {1}'.format(value, list(FREQUENCIES)))

    if value in FREQUENCIES.values() and not isinstance(value, bool):
        return value

    raise InvalidRuleError('Invalid frequency {0}'.format(value))


def _as_list(value, convert=int):
    if value is None:
        return None

    if not isinstance(value, (list, tuple)):
        value = [value]

    return [convert(item) for item in value]


class RecurrenceRule(object):
    """
    The structured description of a recurrence. Only the first value of each by* list is used when
    computing occurrences. A rule can not be changed once it is built.
    """

    def __init__(
        self,
        frequency=None,
        interval=1,
        by_day=None,
        by_month_day=None,
        by_hour=None,
        by_minute=None,
        by_second=None,
        count=None,
        dt_start=None,
        tz_id=None,
    ):
        """
        :param frequency: A Frequency constant or name. Required.
        :param interval: How many frequency units between occurrences. Defaults to 1.
        :param by_day: Weekdays as names ('MO'), integers (monday is 0) or dateutil weekdays
        :param by_month_day: Days of the month, -1 is the last day of the month
        :param count: The max number of occurrences a sequence of this rule generates
        :param dt_start: The anchor date of the rule. Naive values are treated as being in tz_id.
        :param tz_id: The time zone name all dates are evaluated in. Defaults to UTC.
        :raises InvalidRuleError: when there is no frequency
        """
        if frequency is None:
            raise InvalidRuleError('Invalid rule, no frequency property on rule.')

        tz_id = tz_id or DEFAULT_TIME_ZONE

        values = {
            'frequency': get_frequency(frequency),
            'interval': int(interval) if interval else 1,
            'by_day': _as_list(by_day, get_weekday),
            'by_month_day': _as_list(by_month_day),
            'by_hour': _as_list(by_hour),
            'by_minute': _as_list(by_minute),
            'by_second': _as_list(by_second),
            'count': int(count) if count else None,
            'dt_start': TimezoneDate(dt_start, tz_id) if dt_start is not None else None,
            'tz_id': tz_id,
        }
        for name, value in values.items():
            object.__setattr__(self, name, value)

    @classmethod
    def from_params(cls, params):
        """
        Builds a rule from a dict of params. Keys can be the camel case names (byDay, dtStart, tzId),
        the constructor names (by_day, dt_start, tz_id) or a legacy name.
        :rtype: RecurrenceRule
        """
        if not params:
            raise InvalidRuleError('Invalid rule, no frequency property on rule.')

        params = normalize_params(params)

        kwargs = {}
        for key, value in params.items():
            name = PARAM_NAMES.get(key, key)
            if name not in PARAM_NAMES.values():
                raise InvalidRuleError('Unknown recurrence param {0}'.format(key))
            kwargs[name] = value

        return cls(**kwargs)

    def __setattr__(self, name, value):
        raise AttributeError('RecurrenceRule is immutable, can not set {0}'.format(name))

    def first(self, name):
        """
        Returns the first value of a by* list or None if it is not set
        """
        values = getattr(self, name)
        return values[0] if values else None

    def get_time_zone_object(self):
        """
        Returns the time zone object from pytz
        """
        return get_time_zone_object(self.tz_id)

    def __repr__(self):
        return (
            'RecurrenceRule(frequency={0.frequency}, interval={0.interval}, by_day={0.by_day}, '
            'by_month_day={0.by_month_day}, by_hour={0.by_hour}, by_minute={0.by_minute}, '
            'by_second={0.by_second}, count={0.count}, dt_start={0.dt_start}, tz_id={0.tz_id!r})'
        ).format(self)
