# encoding: utf8
import pytest
import yaml

from pokelegality import catalog
from pokelegality.encounters import SlotEncounter
from pokelegality.main import main
from pokelegality.match import hypothesize
from pokelegality.record import CreatureRecord
from pokelegality.tests import pack_evolutions4, pack_learnsets8

CATALOG = u"""\
version: SW
encounters:
  - kind: slot8
    species: 25
    level_min: 10
    level_max: 15
    location: 130
    symbol: true
  - kind: slot8
    species: 25
    level_min: 10
    level_max: 15
    location: 130
    weather: Shaking_Trees
"""


def run(*argv):
    main('pokelegality', *argv)


def test_no_arguments(capsys):
    with pytest.raises(SystemExit):
        run()
    assert 'usage' in capsys.readouterr().out


def test_evolutions(tmp_path, capsys):
    path = tmp_path / 'evos.bin'
    path.write_bytes(pack_evolutions4({1: [(4, 16, 2)]}, count=3))
    run('evolutions', str(path), '--layout', 'g4')
    out = yaml.safe_load(capsys.readouterr().out)
    assert out == {1: [dict(method='level_up', species=2, argument=16, level=16)]}


def test_learnsets(tmp_path, capsys):
    path = tmp_path / 'learnsets.bin'
    path.write_bytes(pack_learnsets8([[], [(1, 33), (7, 45)], []]))
    run('learnsets', str(path), '--layout', '8', '--max-species', '2')
    out = yaml.safe_load(capsys.readouterr().out)
    assert out == {1: [[33, 1], [45, 7]]}


def test_eggmoves(capsys):
    run('eggmoves', '-g', '5', '--moves', '33', '10', '0',
        '--base', '33', '--egg', '10')
    out = capsys.readouterr().out
    assert out.splitlines() == [
        u"  33: Base egg move.",
        u"  10: Inherited egg move.",
    ]


def test_eggmoves_invalid(capsys):
    run('eggmoves', '-g', '4', '--moves', '10', '33', '--base', '33',
        '--egg', '10')
    out = capsys.readouterr().out
    assert out.splitlines()[-1] == u"No breeding order explains this moveset."


def test_eggmoves_without_breeding(capsys):
    with pytest.raises(SystemExit) as excinfo:
        run('eggmoves', '-g', '1', '--moves', '33')
    assert excinfo.value.code == 2


@pytest.fixture
def match_files(tmp_path):
    slot = SlotEncounter(25, level_min=10, level_max=15, location=130,
                         symbol=True)
    record = hypothesize(slot, CreatureRecord(tid=1, sid=2), 0x3141)
    record_path = tmp_path / 'record.yaml'
    with record_path.open('w') as f:
        catalog.dump(record.as_dict(), f)
    catalog_path = tmp_path / 'catalog.yaml'
    catalog_path.write_text(CATALOG)
    return str(record_path), str(catalog_path)


def test_match(match_files, capsys):
    run('match', *match_files)
    out = capsys.readouterr().out
    assert out.splitlines() == [
        u"Match",
        u"  Wild Encounter [SymbolMain] - Normal",
    ]


def test_match_all(match_files, capsys):
    run('match', '-a', *match_files)
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == u"Match"
    assert lines[1].split()[0] == u"Match"
    assert lines[2].startswith(u"  Deferred, with errors")
    assert lines[2].endswith(u"ShakingTrees")


def test_match_bad_catalog(tmp_path, match_files, capsys):
    record_path, catalog_path = match_files
    with open(catalog_path, 'w') as f:
        f.write(u"version: SW\nencounters:\n  - kind: raid\n    species: 25\n")
    with pytest.raises(SystemExit) as excinfo:
        run('match', record_path, catalog_path)
    assert excinfo.value.code == 1
    assert 'unknown kind' in capsys.readouterr().err
