import datetime
from unittest import TestCase

import pytz

from rrule_iterator.timezone_date import TimezoneDate


class TimezoneDateTest(TestCase):

    def test_naive_is_wall_time(self):
        """
        Naive datetimes are treated as wall clock time in the bound time zone
        """
        date = TimezoneDate(datetime.datetime(2017, 1, 1, 9), 'US/Eastern')

        self.assertEqual(date.get_hours(), 9)
        self.assertEqual(date.to_utc(), datetime.datetime(2017, 1, 1, 14))
        self.assertEqual(date.date.tzinfo.zone, 'US/Eastern')

    def test_aware_is_converted(self):
        date = TimezoneDate(pytz.utc.localize(datetime.datetime(2017, 1, 1, 14)), 'US/Eastern')

        self.assertEqual(date.get_hours(), 9)
        self.assertEqual(date.local, datetime.datetime(2017, 1, 1, 9))

    def test_string(self):
        date = TimezoneDate('2017-01-01T14:00:00Z', 'US/Eastern')

        self.assertEqual(date.get_hours(), 9)
        self.assertEqual(date.to_utc_string(), '2017-01-01T14:00:00Z')

    def test_copy(self):
        date = TimezoneDate(datetime.datetime(2017, 1, 1, 9), 'US/Eastern')
        copy = TimezoneDate(date, 'UTC')

        self.assertEqual(date, copy)
        self.assertEqual(copy.get_hours(), 14)

    def test_default_time_zone(self):
        date = TimezoneDate(datetime.datetime(2017, 1, 1))

        self.assertEqual(date.time_zone, pytz.utc)

    def test_immutable(self):
        """
        Add and set operations return new values and leave the date they are called on alone
        """
        date = TimezoneDate(datetime.datetime(2017, 1, 1, 9))

        later = date.add_day().set_hours(10).set_minutes(15).set_seconds(30)

        self.assertEqual(date.local, datetime.datetime(2017, 1, 1, 9))
        self.assertEqual(later.local, datetime.datetime(2017, 1, 2, 10, 15, 30))

    def test_add_units(self):
        date = TimezoneDate(datetime.datetime(2017, 1, 31, 9))

        self.assertEqual(date.add_second().local, datetime.datetime(2017, 1, 31, 9, 0, 1))
        self.assertEqual(date.add_minute().local, datetime.datetime(2017, 1, 31, 9, 1))
        self.assertEqual(date.add_hour().local, datetime.datetime(2017, 1, 31, 10))
        self.assertEqual(date.add_day().local, datetime.datetime(2017, 2, 1, 9))
        self.assertEqual(date.add_week().local, datetime.datetime(2017, 2, 7, 9))
        self.assertEqual(date.add_fortnight().local, datetime.datetime(2017, 2, 14, 9))
        self.assertEqual(date.add_year().local, datetime.datetime(2018, 1, 31, 9))
        self.assertEqual(date.add('hours', 30).local, datetime.datetime(2017, 2, 1, 15))

    def test_add_month_clamps_day(self):
        date = TimezoneDate(datetime.datetime(2017, 1, 31, 9))

        self.assertEqual(date.add_month().local, datetime.datetime(2017, 2, 28, 9))

    def test_add_day_across_dst(self):
        """
        Adding a day keeps the wall clock time when the offset changes
        """
        date = TimezoneDate(datetime.datetime(2017, 3, 11, 9), 'US/Eastern')

        next_day = date.add_day()

        self.assertEqual(next_day.local, datetime.datetime(2017, 3, 12, 9))
        self.assertEqual(date.to_utc(), datetime.datetime(2017, 3, 11, 14))
        self.assertEqual(next_day.to_utc(), datetime.datetime(2017, 3, 12, 13))

    def test_add_hour_across_dst(self):
        """
        Adding an hour adds elapsed time, so the wall clock skips the missing hour
        """
        date = TimezoneDate(datetime.datetime(2017, 3, 12, 1, 30), 'US/Eastern')

        self.assertEqual(date.add_hour().local, datetime.datetime(2017, 3, 12, 3, 30))

    def test_set_date(self):
        date = TimezoneDate(datetime.datetime(2017, 4, 10, 9))

        self.assertEqual(date.set_date(30).local, datetime.datetime(2017, 4, 30, 9))
        with self.assertRaises(ValueError):
            date.set_date(31)

    def test_set_day(self):
        """
        Weekdays are set within the monday based week of the date
        """
        # A wednesday
        date = TimezoneDate(datetime.datetime(2017, 1, 4, 9))

        self.assertEqual(date.get_day(), 2)
        self.assertEqual(date.set_day(0).local, datetime.datetime(2017, 1, 2, 9))
        self.assertEqual(date.set_day(2).local, datetime.datetime(2017, 1, 4, 9))
        self.assertEqual(date.set_day(6).local, datetime.datetime(2017, 1, 8, 9))

    def test_days_in_month(self):
        self.assertEqual(TimezoneDate(datetime.datetime(2016, 2, 10)).days_in_month(), 29)
        self.assertEqual(TimezoneDate(datetime.datetime(2017, 2, 10)).days_in_month(), 28)
        self.assertEqual(TimezoneDate(datetime.datetime(2017, 4, 10)).days_in_month(), 30)
        self.assertEqual(TimezoneDate(datetime.datetime(2017, 12, 10)).days_in_month(), 31)

    def test_last_day_of_month(self):
        date = TimezoneDate(datetime.datetime(2016, 2, 10, 9))

        self.assertEqual(date.last_day_of_month().local, datetime.datetime(2016, 2, 29, 9))

    def test_weeks_until(self):
        start = TimezoneDate(datetime.datetime(2017, 1, 2, 9))

        self.assertEqual(start.weeks_until(datetime.datetime(2017, 1, 2, 9)), 0)
        self.assertEqual(start.weeks_until(datetime.datetime(2017, 1, 8, 23)), 0)
        self.assertEqual(start.weeks_until(datetime.datetime(2017, 1, 9, 9)), 1)
        self.assertEqual(start.weeks_until(datetime.datetime(2017, 1, 29, 9)), 3)
        self.assertEqual(start.weeks_until(datetime.datetime(2016, 12, 6, 9)), -3)

    def test_comparisons(self):
        earlier = TimezoneDate(datetime.datetime(2017, 1, 1, 9), 'US/Eastern')
        later = TimezoneDate(datetime.datetime(2017, 1, 1, 15))

        self.assertTrue(earlier.is_before(later))
        self.assertFalse(later.is_before(earlier))
        self.assertTrue(later.is_after(earlier))
        self.assertTrue(later.is_same_or_after(earlier))
        self.assertTrue(later.is_same_or_after(later))
        self.assertTrue(earlier < later)
        self.assertTrue(later >= earlier)
        self.assertEqual(earlier, pytz.utc.localize(datetime.datetime(2017, 1, 1, 14)))
        self.assertNotEqual(earlier, later)
        self.assertNotEqual(earlier, 'not a date')

    def test_isoformat(self):
        date = TimezoneDate(datetime.datetime(2017, 1, 1, 9), 'US/Eastern')

        self.assertEqual(date.isoformat(), '2017-01-01T09:00:00-05:00')
        self.assertEqual(str(date), '2017-01-01T09:00:00-05:00')
        self.assertEqual(repr(date), "TimezoneDate('2017-01-01T09:00:00-05:00', 'US/Eastern')")

    def test_offset_string(self):
        """
        Strings with a numeric offset are converted into the bound zone
        """
        date = TimezoneDate('2017-01-04T09:30:00+05:00', 'US/Eastern')

        self.assertEqual(date.to_utc(), datetime.datetime(2017, 1, 4, 4, 30))
        self.assertEqual(date.local, datetime.datetime(2017, 1, 3, 23, 30))
        self.assertEqual(date.date.tzinfo.zone, 'US/Eastern')

    def test_zulu_string_in_utc(self):
        date = TimezoneDate('2017-06-01T12:00:00Z')

        self.assertEqual(date.local, datetime.datetime(2017, 6, 1, 12))
        self.assertEqual(date.to_utc_string(), '2017-06-01T12:00:00Z')

    def test_set_minutes_in_repeated_hour(self):
        """
        Setting a field during the repeated hour of a fall back keeps the offset the date already has
        """
        first = TimezoneDate(pytz.utc.localize(datetime.datetime(2017, 11, 5, 5, 15)), 'US/Eastern')
        second = TimezoneDate(pytz.utc.localize(datetime.datetime(2017, 11, 5, 6, 15)), 'US/Eastern')

        self.assertEqual(first.set_minutes(45).to_utc(), datetime.datetime(2017, 11, 5, 5, 45))
        self.assertEqual(second.set_minutes(45).to_utc(), datetime.datetime(2017, 11, 5, 6, 45))
        self.assertEqual(second.set_minutes(45).local, datetime.datetime(2017, 11, 5, 1, 45))

    def test_set_hours_into_missing_hour(self):
        """
        A wall clock time skipped by a spring forward moves past the gap
        """
        date = TimezoneDate(datetime.datetime(2017, 3, 12, 1, 30), 'US/Eastern')

        self.assertEqual(date.set_hours(2).local, datetime.datetime(2017, 3, 12, 3, 30))
