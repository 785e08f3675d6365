import os
import re

from setuptools import find_packages, setup


def get_version():
    """
    read the version from the package without importing it (the dependencies may not be installed yet)
    """
    with open(os.path.join(os.path.dirname(__file__), 'chimannot', '__init__.py')) as fh:
        match = re.search(r"^__version__ = '([^']+)'", fh.read(), re.MULTILINE)
    return match.group(1)


VERSION = get_version()


TEST_REQS = [
    'coverage>=4.2',
    'pycodestyle>=2.3.1',
    'pytest',
    'pytest-cov',
]


INSTALL_REQS = [
    'braceexpand>=0.1.2',
    'intervaltree>=3.0.2',
    'numpy>=1.13.1',
    'pandas>=1.1.2',
]


setup(
    name='chimannot',
    version='{}'.format(VERSION),
    packages=find_packages(exclude=['tests', 'tests.*']),
    description='Maps chimeric transcript alignments onto reference gene annotations to call candidate gene fusions',
    install_requires=INSTALL_REQS,
    extras_require={
        'test': TEST_REQS,
        'dev': ['black', 'flake8'] + TEST_REQS,
    },
    tests_require=TEST_REQS,
    python_requires='>=3.6',
    test_suite='tests',
    entry_points={
        'console_scripts': [
            'chimannot = chimannot.main:main',
        ]
    },
)
