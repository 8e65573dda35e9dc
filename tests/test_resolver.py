# tests/test_resolver.py
import pytest
from nubevdc.vcloud.documents import ResourceDescriptor
from nubevdc.vcloud.errors import ObjectNotFoundError
from nubevdc.vcloud.resolver import (
    MatchKind,
    exists_by_name,
    match_by_name,
    resolve_all_by_name,
    resolve_by_name,
)

DISKS = [
    ResourceDescriptor('data', 'https://vcd/api/disk/1'),
    ResourceDescriptor('logs', 'https://vcd/api/disk/2'),
    ResourceDescriptor('data', 'https://vcd/api/disk/3'),
]


def test_resolve_by_name_returns_unique_match():
    ref = resolve_by_name(DISKS, 'logs', 'Disk')
    assert ref.href == 'https://vcd/api/disk/2'


def test_resolve_by_name_missing_raises_not_found():
    """Ausência vira ObjectNotFoundError com tipo e nome."""
    with pytest.raises(ObjectNotFoundError) as excinfo:
        resolve_by_name(DISKS, 'xxx', 'Disk')

    assert str(excinfo.value) == "Disk 'xxx' is not found"
    assert excinfo.value.kind == 'Disk'
    assert excinfo.value.name == 'xxx'


def test_resolve_by_name_is_case_sensitive():
    with pytest.raises(ObjectNotFoundError):
        resolve_by_name(DISKS, 'LOGS', 'Disk')


def test_resolve_by_name_with_duplicates_returns_first(caplog):
    ref = resolve_by_name(DISKS, 'data', 'Disk')

    assert ref.href == 'https://vcd/api/disk/1'
    assert "2 recursos do tipo Disk" in caplog.text


def test_resolve_all_by_name():
    assert [r.href for r in resolve_all_by_name(DISKS, 'data')] == [
        'https://vcd/api/disk/1', 'https://vcd/api/disk/3'
    ]
    assert resolve_all_by_name(DISKS, 'nope') == []


def test_exists_by_name_never_raises():
    assert exists_by_name(DISKS, 'logs') is True
    assert exists_by_name(DISKS, 'nope') is False
    assert exists_by_name([], 'nope') is False


def test_match_by_name_tags():
    assert match_by_name(DISKS, 'nope').kind is MatchKind.EMPTY
    assert match_by_name(DISKS, 'logs').kind is MatchKind.UNIQUE

    multiple = match_by_name(DISKS, 'data')
    assert multiple.kind is MatchKind.MULTIPLE
    assert multiple.count == 2
    assert multiple.first.href == 'https://vcd/api/disk/1'
