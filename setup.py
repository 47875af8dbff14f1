import os
import re

from setuptools import find_packages, setup


def get_version():
    with open(os.path.join(os.path.dirname(__file__), 'ideogram', '__init__.py')) as fh:
        return re.search(r"^__version__ = '([^']+)'", fh.read(), re.MULTILINE).group(1)


def parse_md_readme():
    try:
        with open(os.path.join(os.path.dirname(__file__), 'README.md')) as fh:
            return fh.read()
    except OSError:
        return ''


TEST_REQS = [
    'coverage>=4.2',
    'pycodestyle>=2.3.1',
    'pytest',
    'pytest-cov',
]


INSTALL_REQS = [
    'colour',
    'svgwrite',
]


setup(
    name='ideogram',
    version=get_version(),
    packages=find_packages(exclude=['tests', 'tests.*']),
    description='Chromosome ideogram (region bands and variant markers) svg renderer',
    long_description=parse_md_readme(),
    long_description_content_type='text/markdown',
    install_requires=INSTALL_REQS,
    extras_require={
        'test': TEST_REQS,
        'dev': ['black', 'flake8'] + TEST_REQS,
    },
    tests_require=TEST_REQS,
    python_requires='>=3.6',
    test_suite='tests',
)
