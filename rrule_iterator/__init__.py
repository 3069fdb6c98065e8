# flake8: noqa
from .version import __version__

from .constants import Frequency
from .exceptions import InvalidRuleError
from .iterator import RRuleIterator, get_dates_from_params
from .rule import RecurrenceRule
from .timezone_date import TimezoneDate
