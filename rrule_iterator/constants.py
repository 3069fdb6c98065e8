class Frequency(object):
    """
    Frequencies ordered by rank. Every field finer than a rule's own frequency is a lower interval.
    """
    SECONDLY = 0
    MINUTELY = 1
    HOURLY = 2
    DAILY = 3
    WEEKLY = 4
    MONTHLY = 5
    YEARLY = 6


FREQUENCIES = {
    'SECONDLY': Frequency.SECONDLY,
    'MINUTELY': Frequency.MINUTELY,
    'HOURLY': Frequency.HOURLY,
    'DAILY': Frequency.DAILY,
    'WEEKLY': Frequency.WEEKLY,
    'MONTHLY': Frequency.MONTHLY,
    'YEARLY': Frequency.YEARLY,
}

# Python weekday convention, monday is 0
WEEK_DAYS = {
    'MO': 0,
    'TU': 1,
    'WE': 2,
    'TH': 3,
    'FR': 4,
    'SA': 5,
    'SU': 6,
}

# The relativedelta unit used to step a rule by one interval of its frequency
ADD_FREQUENCY = {
    Frequency.SECONDLY: 'seconds',
    Frequency.MINUTELY: 'minutes',
    Frequency.HOURLY: 'hours',
    Frequency.DAILY: 'days',
    Frequency.WEEKLY: 'weeks',
    Frequency.MONTHLY: 'months',
    Frequency.YEARLY: 'years',
}

# Old param names that are still accepted and renamed before a rule is built
LEGACY = {
    'dayOfWeek': 'byDay',
    'startdate': 'dtStart',
    'byhour': 'byHour',
    'byminute': 'byMinute',
    'bysecond': 'bySecond',
}

DEFAULT_COUNT = 52
DEFAULT_TIME_ZONE = 'UTC'

# byMonthDay sentinel for the last day of any month
LAST_DAY_OF_MONTH = -1

# A weekly rule with this interval is phase locked to its dtStart
FORTNIGHT_INTERVAL = 2
