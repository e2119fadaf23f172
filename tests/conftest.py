import os

import pytest


@pytest.fixture
def gps_file():
    return _data_file('fixtures/gps.txt')


@pytest.fixture
def gps_lines(gps_file):
    with open(gps_file, encoding='utf-8') as fp:
        return fp.readlines()


@pytest.fixture
def linestring_line():
    return '1|{running}|LINESTRING(0 0, 1113194.9079327357 0)\n'


def _data_file(name):
    cur_dir = os.path.dirname(os.path.realpath(__file__))
    return os.path.join(cur_dir, name)
