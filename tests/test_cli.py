import json
import os

from click.testing import CliRunner
from lxml import etree
import pytest

from wktgpx.cli import main


@pytest.fixture
def runner():
    return CliRunner()


def test_convert_writes_output_file(runner, gps_file, tmp_path):
    out = str(tmp_path / 'gps_out.txt')
    res = runner.invoke(main, ['convert', gps_file, out])
    assert res.exit_code == 0
    assert 'Converted 2 records (1 empty, 3 failed)' in res.output
    with open(out, encoding='utf-8') as fp:
        lines = fp.read().splitlines()
    assert len(lines) == 2
    assert lines[0].startswith('running|<?xml version="1.0"')


def test_convert_uses_default_file_names(runner, gps_file):
    with runner.isolated_filesystem():
        with open(gps_file, encoding='utf-8') as src, \
                open('gps.txt', 'w', encoding='utf-8') as dest:
            dest.write(src.read())
        res = runner.invoke(main, ['convert'])
        assert res.exit_code == 0
        assert os.path.isfile('gps_out.txt')


def test_convert_reads_crs_from_environment(runner, tmp_path):
    src = tmp_path / 'gps.txt'
    src.write_text('1|{a}|LINESTRING(10 45, 11 46)\n', encoding='utf-8')
    out = tmp_path / 'gps_out.txt'
    res = runner.invoke(main, ['convert', str(src), str(out)],
                        env={'WKTGPX_SOURCE_CRS': 'EPSG:4326'})
    assert res.exit_code == 0
    doc = out.read_text(encoding='utf-8').split('|', 1)[1]
    point = etree.fromstring(doc.encode('utf-8')).find('trk/trkseg/trkpt')
    assert float(point.get('lon')) == pytest.approx(10.0)
    assert float(point.get('lat')) == pytest.approx(45.0)


def test_convert_uses_separator_option(runner, tmp_path):
    src = tmp_path / 'gps.txt'
    src.write_text('1;{a};LINESTRING(0 0, 1 1)\n', encoding='utf-8')
    out = tmp_path / 'gps_out.txt'
    res = runner.invoke(main, ['convert', '--separator', ';', str(src),
                               str(out)])
    assert res.exit_code == 0
    assert out.read_text(encoding='utf-8').startswith('a;<?xml')


def test_convert_fails_on_missing_input(runner, tmp_path):
    res = runner.invoke(main, ['convert', str(tmp_path / 'missing.txt'),
                               str(tmp_path / 'out.txt')])
    assert res.exit_code != 0


def test_parse_prints_coordinates(runner):
    res = runner.invoke(main, ['parse', 'LINESTRING Z (0 0 0, 1 1 1)'])
    assert res.exit_code == 0
    header, body = res.output.splitlines()
    assert header == 'LINESTRING XYZ'
    assert json.loads(body) == [[0, 0, 0], [1, 1, 1]]


def test_parse_reports_errors(runner):
    res = runner.invoke(main, ['parse', 'POINT(1 1)'])
    assert res.exit_code == 1
    assert 'Not handled: POINT' in res.output


def test_log_level_option_is_accepted(runner):
    res = runner.invoke(main, ['--log-level', 'debug', 'parse',
                               'LINESTRING EMPTY'])
    assert res.exit_code == 0
    assert json.loads(res.output.splitlines()[1]) == []
