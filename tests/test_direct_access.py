import io

import pytest

from dsalgos.direct_access import (
    DirectAccessFile,
    HashTableFullError,
    StudentRecord,
    main,
)


@pytest.fixture
def db(tmp_path):
    daf = DirectAccessFile(tmp_path / "students.dat")
    daf.create()
    return daf


def _student(roll_no, name="alice"):
    return StudentRecord(roll_no, name, "A", "street")


def test_new_database_is_empty(db):
    assert db.records() == []


def test_file_size_stays_fixed(db):
    size = db.path.stat().st_size
    db.add(_student(4))
    db.add(_student(14))
    assert db.path.stat().st_size == size
    assert size > 0


def test_add_and_search_round_trip(db):
    db.add(_student(7, "bob"))
    found = db.search(7)
    assert (found.roll_no, found.name, found.division, found.address) == (
        7,
        "bob",
        "A",
        "street",
    )


@pytest.mark.parametrize("with_replacement", [False, True])
def test_colliding_keys_are_all_found(db, with_replacement):
    rolls = (1, 11, 21, 31)
    for roll in rolls:
        db.add(_student(roll), with_replacement)
    for roll in rolls:
        assert db.search(roll).roll_no == roll
    assert sorted(r.roll_no for r in db.records()) == sorted(rolls)


def test_search_missing_returns_none(db):
    db.add(_student(3))
    assert db.search(13) is None
    assert db.search(-1) is None


def test_without_replacement_keeps_first_comer(db):
    for roll in (1, 11, 2):
        db.add(_student(roll), False)
    assert [r.roll_no for r in db.records()] == [1, 11, 2]
    assert db.search(2).roll_no == 2


def test_with_replacement_moves_displaced_record(db):
    for roll in (1, 11, 2):
        db.add(_student(roll), True)
    assert [r.roll_no for r in db.records()] == [1, 2, 11]
    for roll in (1, 11, 2):
        assert db.search(roll).roll_no == roll


def test_chain_links_home_to_overflow(db):
    db.add(_student(5))
    db.add(_student(15))
    assert db.search(5).chain == 6
    assert db.search(15).chain == -1


def test_full_table_raises(tmp_path):
    daf = DirectAccessFile(tmp_path / "small.dat", table_size=3)
    daf.create()
    for roll in (0, 1, 2):
        daf.add(_student(roll))
    with pytest.raises(HashTableFullError):
        daf.add(_student(3))
    assert sorted(r.roll_no for r in daf.records()) == [0, 1, 2]


def test_full_table_with_replacement_loses_nothing(tmp_path):
    daf = DirectAccessFile(tmp_path / "small.dat", table_size=3)
    daf.create()
    for roll in (0, 3, 1):
        daf.add(_student(roll), True)
    with pytest.raises(HashTableFullError):
        daf.add(_student(4), True)
    for roll in (0, 3, 1):
        assert daf.search(roll).roll_no == roll


def test_modify_updates_fields(db):
    db.add(_student(7))
    updated = db.modify(7, "carol", "B", "avenue")
    assert db.search(7) == updated
    assert (updated.name, updated.division, updated.address) == ("carol", "B", "avenue")


def test_modify_keeps_chain(db):
    db.add(_student(5))
    db.add(_student(15))
    before = db.search(5).chain
    db.modify(5, "dave", "C", "road")
    assert db.search(5).chain == before
    assert db.search(15).roll_no == 15


def test_modify_missing_raises(db):
    with pytest.raises(KeyError):
        db.modify(99, "x", "y", "z")


def test_negative_roll_rejected(db):
    with pytest.raises(ValueError):
        db.add(_student(-5))


def test_overlong_name_rejected(db):
    with pytest.raises(ValueError):
        db.add(_student(2, "x" * 100))
    assert db.records() == []


def test_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        DirectAccessFile(tmp_path / "absent.dat").search(1)


def test_create_resets(db):
    db.add(_student(8))
    db.create()
    assert db.records() == []


def test_record_pack_round_trip():
    record = StudentRecord(12, "eve", "D", "lane", 3)
    assert StudentRecord.unpack(record.pack()) == record


def test_main_session(tmp_path, monkeypatch, capsys):
    path = tmp_path / "session.dat"
    monkeypatch.setattr("sys.stdin", io.StringIO("1\n1\n3\n4 dave A town\n4\n4\n6\n"))
    assert main(["--file", str(path)]) == 0
    out = capsys.readouterr().out
    assert "Record found:" in out
    assert "Name: dave" in out
    assert "Exiting..." in out