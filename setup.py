# import multiprocessing to avoid this bug (http://bugs.python.org/issue15881#msg170215)
import multiprocessing
assert multiprocessing
import re
from setuptools import setup, find_packages


def get_version():
    """
    Extracts the version number from the version.py file.
    """
    VERSION_FILE = 'rrule_iterator/version.py'
    mo = re.search(r'^__version__ = [\'"]([^\'"]*)[\'"]', open(VERSION_FILE, 'rt').read(), re.M)
    if mo:
        return mo.group(1)
    else:
        raise RuntimeError('Unable to find version string in {0}.'.format(VERSION_FILE))


install_requires = [
    'python-dateutil>=2.4.2',
    'fleming>=0.4.6',
    'pytz>=2015.6',
]

tests_require = [
    'freezegun',
    'mock',
    'pytest',
    'coverage',
]


setup(
    name='rrule-iterator',
    version=get_version(),
    description='Lazily expands structured recurrence rules into time zone aware occurrences.',
    long_description=open('README.rst').read(),
    keywords='rrule, recurrence, calendar, schedule, timezone',
    packages=find_packages(),
    classifiers=[
        'Programming Language :: Python',
        'Programming Language :: Python :: 3',
        'Intended Audience :: Developers',
        'License :: OSI Approved :: MIT License',
        'Operating System :: OS Independent',
    ],
    license='MIT',
    install_requires=install_requires,
    tests_require=tests_require,
    extras_require={'dev': tests_require, 'test': tests_require},
    test_suite='run_tests.run_tests',
    include_package_data=True,
)
