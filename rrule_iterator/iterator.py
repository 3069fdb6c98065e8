import itertools
import logging
from datetime import datetime
from typing import List

from rrule_iterator import handlers
from rrule_iterator.constants import DEFAULT_COUNT
from rrule_iterator.rule import RecurrenceRule
from rrule_iterator.timezone_date import TimezoneDate

LOG = logging.getLogger(__name__)


class RRuleIterator(object):
    """
    Lazily generates the occurrences of a recurrence rule. Every occurrence is computed from the one
    before it, starting after the start date, and the sequence stops after count occurrences.

    An iterator can only be consumed once. Build a new one to replay the sequence from the start.

        rule = RecurrenceRule(frequency='WEEKLY', by_day=['MO'], by_hour=[9])
        for occurrence in RRuleIterator(rule, start=datetime(2017, 1, 4), count=3):
            ...
    """

    def __init__(self, rule=None, start=None, count=None):
        """
        :param rule: A RecurrenceRule or a dict of rule params
        :param start: The date to generate occurrences after. Defaults to now.
        :param count: Overrides the rule's count. Without either, 52 occurrences are generated.
        :raises InvalidRuleError: when the rule has no frequency
        """
        if not isinstance(rule, RecurrenceRule):
            rule = RecurrenceRule.from_params(rule)

        self.rule = rule

        if count:
            self.count = count
        elif rule.count:
            self.count = rule.count
        else:
            self.count = DEFAULT_COUNT

        self.remaining = self.count
        self.start = TimezoneDate(start, rule.tz_id)

        LOG.debug('Generating {0} occurrences of {1} after {2}'.format(self.count, rule, self.start))

    def __iter__(self):
        while self.remaining > 0:
            value = self.get_next(self.start)
            self.start = value
            self.remaining -= 1
            LOG.debug(f'Generated occurrence {value}, {self.remaining} remaining')
            yield value.date

    def get_next(self, from_date):
        """
        Returns the next occurrence strictly after the from date without moving the iterator
        :rtype: TimezoneDate
        """
        return handlers.get_next(self.rule, from_date)

    def get_dates(self, num_dates=None) -> List[datetime]:
        """
        Return a list of the datetimes the iterator has yet to generate
        :param num_dates: The maximum number of dates to return. Defaults to all remaining dates.
        :return: A list of aware datetime objects in the rule's time zone
        """
        if num_dates is not None:
            assert num_dates > 0

        return list(itertools.islice(self, num_dates))


def get_dates_from_params(params, start=None, num_dates=None) -> List[datetime]:
    """
    Builds a rule from params and returns its occurrences after the start date
    :param num_dates: Overrides the count of the rule params
    """
    return RRuleIterator(params, start=start, count=num_dates).get_dates()
