import logging

import pytest

from arcmesh.errors import (ChopError, CurveDomainError, Degenerate,
                            GeometryContractError, isdegenerate, resolve)


def test_contract_errors_are_value_errors():
    assert issubclass(GeometryContractError, ValueError)
    assert issubclass(CurveDomainError, GeometryContractError)
    assert issubclass(ChopError, GeometryContractError)


def test_degenerate_is_falsy():
    d = Degenerate('flat', 42)
    assert not d
    assert isdegenerate(d)
    assert not isdegenerate(42)


def test_resolve_logs_and_falls_back(caplog):
    log = logging.getLogger('arcmesh.test')
    with caplog.at_level(logging.WARNING):
        assert resolve(Degenerate('zero area', 'X'), log) == 'X'
    assert 'zero area' in caplog.text


def test_resolve_passes_values_through(caplog):
    with caplog.at_level(logging.WARNING):
        assert resolve(3.5) == 3.5
    assert caplog.text == ''
