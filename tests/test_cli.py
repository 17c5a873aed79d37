import sys

import pytest

from bitfloat.tools import cli


def run(capsys, *argv):
    status = cli.main(list(argv))
    captured = capsys.readouterr()
    return status, captured.out, captured.err


@pytest.mark.parametrize('binary, expected', [
    ('0000000', '0000000 => 0'),
    ('1000000', '1000000 => -0'),
    ('0111000', '0111000 => Infinity'),
    ('1111000', '1111000 => -Infinity'),
    ('0111001', '0111001 => NaN'),
    ('0000100', '0000100 => 0.125 (denorm)'),
    ('0 011 000', '0011000 => 1'),
    ('1010100', '1010100 => -0.75'),
])
def test_evaluate_small(capsys, binary, expected):
    status, out, err = run(capsys, 'evaluate', binary)
    assert status == 0
    assert out == expected + '\n'
    assert err == ''


def test_eval_alias(capsys):
    status, out, err = run(capsys, 'eval', '0110111')
    assert status == 0
    assert out == '0110111 => 15\n'


def test_evaluate_raw(capsys):
    status, out, err = run(capsys, 'evaluate', '--raw', '0111000')
    assert status == 0
    assert out == '0111000 => 16\n'

    status, out, err = run(capsys, 'evaluate', '-r', '0000100')
    assert out == '0000100 => 0.1875\n'


def test_evaluate_other_formats(capsys):
    status, out, err = run(capsys, '-f', 'single', 'evaluate', '0 01111111 ' + '0' * 23)
    assert status == 0
    assert out == '0' + '01111111' + '0' * 23 + ' => 1\n'

    status, out, err = run(capsys, '--format', 'double', 'evaluate', '1 10000000000 ' + '0' * 52)
    assert out.endswith(' => -2\n')

    status, out, err = run(capsys, '-f', '4,3', 'evaluate', '0 0111 100')
    assert out == '00111100 => 1.5\n'


def test_evaluate_very_wide_custom_formats(capsys):
    status, out, err = run(capsys, '-f', '3,1100', 'eval', '0001' + '1' * 1100)
    assert status == 0
    assert out.endswith(' => 0.5\n')

    status, out, err = run(capsys, '-f', '1100,3', 'eval', '0' + '1' * 1099 + '0111')
    assert status == 0
    assert out.endswith(' => inf\n')
    assert err == ''


def test_evaluate_exact(capsys):
    status, out, err = run(capsys, '-f', 'double', 'evaluate', '--exact', '0 11111111110 ' + '1' * 52)
    assert status == 0
    bits, number = out.strip().split(' => ')
    assert float(number) == sys.float_info.max

    status, out, err = run(capsys, 'evaluate', '--exact', '0000100')
    assert out == '0000100 => 0.125 (denorm)\n'

    status, out, err = run(capsys, 'evaluate', '--exact', '0111000')
    assert out == '0111000 => Infinity\n'


def test_evaluate_wrong_length(capsys):
    status, out, err = run(capsys, 'evaluate', '00100')
    assert status == 1
    assert out == ''
    assert err == 'Error: Number must have 7 digits but has 5\n'


def test_evaluate_empty(capsys):
    status, out, err = run(capsys, 'evaluate', '   ')
    assert status == 1
    assert err == 'Error: Empty string cannot be parsed\n'


def test_evaluate_invalid_digit(capsys):
    status, out, err = run(capsys, 'evaluate', '0002100')
    assert status == 1
    assert err == "Error: Neither 0 nor 1: '2'\n"


def test_unknown_format(capsys):
    status, out, err = run(capsys, '-f', 'decimal32', 'evaluate', '0000000')
    assert status == 1
    assert err.startswith('Error: unsupported float format')


def test_all_lists_every_pattern(capsys):
    status, out, err = run(capsys, 'all')
    assert status == 0
    lines = out.splitlines()
    assert len(lines) == 128
    assert lines[0] == '0000000 => 0'
    assert lines[1] == '0000001 => 0.03125 (denorm)'
    assert lines[8] == '0001000 => 0.25'
    assert lines[56] == '0111000 => Infinity'
    assert lines[64] == '1000000 => -0'
    assert lines[-1] == '1111111 => NaN'


def test_all_rejects_wide_formats(capsys):
    status, out, err = run(capsys, '-f', 'single', 'all')
    assert status == 1
    assert out == ''
    assert err == 'Format Single not supported for subcommand `all`\n'


def test_all_plot(capsys, tmp_path):
    path = tmp_path / 'small.png'
    status, out, err = run(capsys, 'all', '--plot', str(path))
    assert status == 0
    assert out == ''
    with open(path, 'rb') as f:
        assert f.read(8) == b'\x89PNG\r\n\x1a\n'


def test_missing_command():
    with pytest.raises(SystemExit) as excinfo:
        cli.main([])
    assert excinfo.value.code == 2
