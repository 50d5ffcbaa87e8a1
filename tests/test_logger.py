"""Tests for the console and null loggers."""

from __future__ import annotations

import pytest

from contract_metadata import DataMember, native_model_available
from contract_metadata.logger import ConsoleLogger
from contract_metadata.protocols import NullLogger


def test_quiet_console_logger_hides_debug_and_info(capsys: pytest.CaptureFixture[str]) -> None:
    logger = ConsoleLogger(verbose=False)

    logger.debug('hidden debug')
    logger.info('hidden info')
    logger.warning('shown warning')
    logger.error('shown error')

    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 2
    assert lines[0].endswith('[WARNING] shown warning')
    assert lines[1].endswith('[ERROR] shown error')


def test_verbose_console_logger_shows_everything(capsys: pytest.CaptureFixture[str]) -> None:
    logger = ConsoleLogger(verbose=True)

    logger.debug('d')
    logger.info('i')

    lines = capsys.readouterr().out.splitlines()
    assert [line.split('] ', 1)[1] for line in lines] == ['[DEBUG] d', '[INFO] i']


@pytest.mark.skipif(not native_model_available(), reason='native model adapters disabled')
def test_null_logger_accepted_by_conversion(capsys: pytest.CaptureFixture[str]) -> None:
    class Native:
        name = 'm'
        is_required = False
        emit_default_value = True
        order = 3

    member = DataMember.from_native(Native(), logger=NullLogger())

    assert member.name == 'm'
    assert capsys.readouterr().out == ''
