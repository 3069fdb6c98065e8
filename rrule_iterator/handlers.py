"""
Advancement strategies. Each strategy is a pure function taking a rule and the date to advance from and
returning the next occurrence strictly after it as a new TimezoneDate.
"""
from rrule_iterator.constants import ADD_FREQUENCY, FORTNIGHT_INTERVAL, Frequency, LAST_DAY_OF_MONTH
from rrule_iterator.timezone_date import TimezoneDate


class Strategy(object):
    GENERIC = 'generic'
    WEEKLY = 'weekly'
    FORTNIGHTLY = 'fortnightly'
    MONTHLY = 'monthly'


def set_lower_intervals(rule, interval_time, intervals):
    """
    Pins every field finer than the rule's frequency to the rule's by* value, or to the field of the
    intervals reference date when the rule has none.
    :type interval_time: TimezoneDate
    :type intervals: TimezoneDate
    :rtype: TimezoneDate
    """
    if rule.frequency > Frequency.SECONDLY:
        seconds = rule.first('by_second')
        interval_time = interval_time.set_seconds(intervals.get_seconds() if seconds is None else seconds)

    if rule.frequency > Frequency.MINUTELY:
        minutes = rule.first('by_minute')
        interval_time = interval_time.set_minutes(intervals.get_minutes() if minutes is None else minutes)

    if rule.frequency > Frequency.HOURLY:
        hours = rule.first('by_hour')
        interval_time = interval_time.set_hours(intervals.get_hours() if hours is None else hours)

    return interval_time


def get_lower_intervals(rule, from_date):
    """
    Returns the from date in the rule's time zone with its lower fields pinned
    """
    interval_time = TimezoneDate(from_date, rule.tz_id)
    return set_lower_intervals(rule, interval_time, interval_time)


def _step(rule, from_date, interval_time):
    # The snapped date is already the next occurrence
    if from_date.is_before(interval_time):
        return interval_time

    intervals = get_lower_intervals(rule, interval_time)
    interval_time = interval_time.add(ADD_FREQUENCY[rule.frequency], rule.interval)
    return set_lower_intervals(rule, interval_time, intervals)


def advance_generic(rule, from_date):
    """
    Secondly, minutely, hourly, daily, monthly without a month day and yearly rules
    """
    return _step(rule, from_date, get_lower_intervals(rule, from_date))


def advance_weekly(rule, from_date):
    """
    Weekly rules other than fortnightly ones. The first by_day value picks the weekday.
    """
    interval_time = get_lower_intervals(rule, from_date)

    weekday = rule.first('by_day')
    if weekday is not None:
        interval_time = interval_time.set_day(weekday)

    return _step(rule, from_date, interval_time)


def advance_fortnightly(rule, from_date):
    """
    Weekly rules with an interval of two stay in phase with the rule's dt_start no matter which date the
    sequence is advanced from. Without a dt_start the from date is the anchor.

    A from date before dt_start returns dt_start itself (lower fields pinned) rather than the from date plus
    fourteen days, so the first occurrence is always on the anchor's cadence.
    """
    interval_time = get_lower_intervals(rule, from_date)

    if rule.dt_start is None:
        return set_lower_intervals(rule, from_date.add_fortnight(), interval_time)

    anchor = set_lower_intervals(rule, rule.dt_start, rule.dt_start)

    # Nothing occurs before the anchor
    if from_date.is_before(anchor):
        return anchor

    # Only advance by an even number of weeks so the last run keeps the anchor's parity
    weeks = anchor.weeks_until(from_date)
    last_run = anchor.add('weeks', weeks - weeks % 2)

    return set_lower_intervals(rule, last_run.add_fortnight(), anchor)


def _set_month_day(interval_time, day):
    """
    Sets the day of the month, moving on to the next month that has the day when this one is too short
    """
    if 1 <= day <= 31:
        while interval_time.days_in_month() < day:
            interval_time = interval_time.set_date(1).add_month()

    return interval_time.set_date(day)


def _advance_last_month_day(rule, from_date, interval_time):
    last_month_day = interval_time.last_day_of_month()
    if from_date.is_before(last_month_day):
        return last_month_day

    # This month's occurrence has passed, use the last day of next month
    last_month_day = interval_time.set_date(1).add_month().last_day_of_month()
    return set_lower_intervals(rule, last_month_day, interval_time)


def advance_monthly(rule, from_date):
    """
    Monthly rules with a month day. A month day of -1 is the last day of each month.
    """
    interval_time = get_lower_intervals(rule, from_date)
    day = rule.first('by_month_day')

    if day == LAST_DAY_OF_MONTH:
        return _advance_last_month_day(rule, from_date, interval_time)

    intervals = interval_time
    from_day = from_date.get_date()

    if from_day < day:
        interval_time = _set_month_day(interval_time, day)
    elif from_day > day:
        interval_time = _set_month_day(interval_time.set_date(1).add_month(), day)
    elif from_date.is_same_or_after(interval_time):
        # Same day but the time has already passed, skip ahead to the day next month
        interval_time = _set_month_day(interval_time.set_date(1).add_month(), day)

    return set_lower_intervals(rule, interval_time, intervals)


STRATEGIES = {
    Strategy.GENERIC: advance_generic,
    Strategy.WEEKLY: advance_weekly,
    Strategy.FORTNIGHTLY: advance_fortnightly,
    Strategy.MONTHLY: advance_monthly,
}


def get_strategy(rule):
    """
    Selects the advancement strategy for the shape of a rule. The first match wins.
    """
    if rule.frequency == Frequency.MONTHLY and rule.by_month_day:
        return Strategy.MONTHLY

    if rule.frequency == Frequency.WEEKLY and rule.interval == FORTNIGHT_INTERVAL:
        return Strategy.FORTNIGHTLY

    if rule.frequency == Frequency.WEEKLY:
        return Strategy.WEEKLY

    return Strategy.GENERIC


def get_next(rule, from_date):
    """
    Returns the next occurrence of the rule strictly after the from date
    :type rule: rrule_iterator.rule.RecurrenceRule
    :param from_date: A datetime, date string or TimezoneDate. Naive values are treated as being in the
        rule's time zone.
    :rtype: TimezoneDate
    """
    from_date = TimezoneDate(from_date, rule.tz_id)
    return STRATEGIES[get_strategy(rule)](rule, from_date)
