"""Student records kept in a fixed-size hashed file with linear probing."""

from __future__ import annotations

import argparse
import struct
import sys
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass, replace
from os import PathLike
from pathlib import Path
from typing import BinaryIO, TextIO

DEFAULT_TABLE_SIZE = 10
EMPTY = -1

_NAME_WIDTH = 32
_DIVISION_WIDTH = 8
_ADDRESS_WIDTH = 64
_LAYOUT = struct.Struct(f"<i{_NAME_WIDTH}s{_DIVISION_WIDTH}s{_ADDRESS_WIDTH}si")


class HashTableFullError(Exception):
    """Raised when no free slot is left for a new record."""


def _encode(text: str, width: int, field: str) -> bytes:
    data = text.encode("utf-8")
    if len(data) > width:
        raise ValueError(f"{field} is longer than {width} bytes: {text!r}")
    return data


def _decode(data: bytes) -> str:
    return data.rstrip(b"\0").decode("utf-8")


@dataclass(frozen=True)
class StudentRecord:
    """One student; ``chain`` is the slot of the next record in its chain."""

    roll_no: int
    name: str = ""
    division: str = ""
    address: str = ""
    chain: int = EMPTY

    @property
    def is_empty(self) -> bool:
        return self.roll_no == EMPTY

    def pack(self) -> bytes:
        """Serialise to the fixed-size on-disk layout."""
        return _LAYOUT.pack(
            self.roll_no,
            _encode(self.name, _NAME_WIDTH, "name"),
            _encode(self.division, _DIVISION_WIDTH, "division"),
            _encode(self.address, _ADDRESS_WIDTH, "address"),
            self.chain,
        )

    @classmethod
    def unpack(cls, data: bytes) -> StudentRecord:
        """Read a record from its fixed-size on-disk layout."""
        roll_no, name, division, address, chain = _LAYOUT.unpack(data)
        return cls(roll_no, _decode(name), _decode(division), _decode(address), chain)


_EMPTY_RECORD = StudentRecord(EMPTY)


class _Table:
    """Slot-addressed view of an open record file."""

    def __init__(self, handle: BinaryIO, size: int) -> None:
        self._handle = handle
        self.size = size

    def __getitem__(self, slot: int) -> StudentRecord:
        self._handle.seek(slot * _LAYOUT.size)
        data = self._handle.read(_LAYOUT.size)
        if len(data) != _LAYOUT.size:
            raise ValueError(f"record file is truncated at slot {slot}")
        return StudentRecord.unpack(data)

    def __setitem__(self, slot: int, record: StudentRecord) -> None:
        self._handle.seek(slot * _LAYOUT.size)
        self._handle.write(record.pack())

    def __iter__(self) -> Iterator[StudentRecord]:
        return (self[slot] for slot in range(self.size))


class DirectAccessFile:
    """A hash table of student records stored directly in a binary file."""

    def __init__(
        self, path: str | PathLike[str], table_size: int = DEFAULT_TABLE_SIZE
    ) -> None:
        if table_size < 1:
            raise ValueError("table size must be positive")
        self.path = Path(path)
        self.table_size = table_size

    def _home(self, roll_no: int) -> int:
        return roll_no % self.table_size

    @contextmanager
    def _open(self, mode: str) -> Iterator[_Table]:
        with open(self.path, mode) as handle:
            yield _Table(handle, self.table_size)

    def create(self) -> None:
        """Create (or truncate) the file with every slot empty."""
        with open(self.path, "wb") as handle:
            handle.write(_EMPTY_RECORD.pack() * self.table_size)

    def records(self) -> list[StudentRecord]:
        """Return the occupied slots in slot order."""
        with self._open("rb") as table:
            return [record for record in table if not record.is_empty]

    def add(self, record: StudentRecord, with_replacement: bool = False) -> None:
        """Store a record at its home slot or the next free slot.

        With replacement, a record sitting in another record's home slot
        is moved out to make room for the owner.
        """
        if record.roll_no < 0:
            raise ValueError("roll number must not be negative")
        record = replace(record, chain=EMPTY)
        record.pack()
        with self._open("r+b") as table:
            if not any(slot.is_empty for slot in table):
                raise HashTableFullError("hash table is full")
            self._insert(table, record, with_replacement)

    def _insert(
        self, table: _Table, record: StudentRecord, with_replacement: bool
    ) -> None:
        home = self._home(record.roll_no)
        current = table[home]
        if current.is_empty:
            table[home] = record
            return
        if with_replacement and self._home(current.roll_no) != home:
            self._unlink(table, current, home)
            table[home] = record
            self._insert(table, replace(current, chain=EMPTY), True)
            return
        self._probe(table, home, record)

    def _unlink(self, table: _Table, displaced: StudentRecord, slot: int) -> None:
        position = self._home(displaced.roll_no)
        seen: set[int] = set()
        while position not in seen:
            seen.add(position)
            current = table[position]
            if current.chain == slot:
                table[position] = replace(current, chain=displaced.chain)
                return
            if current.chain == EMPTY:
                return
            position = current.chain

    def _probe(self, table: _Table, start: int, record: StudentRecord) -> None:
        for offset in range(1, self.table_size):
            slot = (start + offset) % self.table_size
            if table[slot].is_empty:
                table[slot] = record
                self._append_to_chain(table, start, slot)
                return
        raise HashTableFullError("hash table is full")

    @staticmethod
    def _append_to_chain(table: _Table, start: int, slot: int) -> None:
        position = start
        seen: set[int] = set()
        while position not in seen:
            seen.add(position)
            current = table[position]
            if current.chain == EMPTY:
                table[position] = replace(current, chain=slot)
                return
            position = current.chain

    def _locate(
        self, table: _Table, roll_no: int
    ) -> tuple[int, StudentRecord] | None:
        if roll_no < 0:
            return None
        position = self._home(roll_no)
        seen: set[int] = set()
        while position not in seen:
            seen.add(position)
            current = table[position]
            if current.roll_no == roll_no:
                return position, current
            if current.chain == EMPTY:
                return None
            position = current.chain
        return None

    def search(self, roll_no: int) -> StudentRecord | None:
        """Follow the chain from the home slot; None if the record is absent."""
        with self._open("rb") as table:
            located = self._locate(table, roll_no)
        return None if located is None else located[1]

    def modify(
        self, roll_no: int, name: str, division: str, address: str
    ) -> StudentRecord:
        """Replace a record's details in place and return the new record."""
        with self._open("r+b") as table:
            located = self._locate(table, roll_no)
            if located is None:
                raise KeyError(roll_no)
            slot, current = located
            updated = replace(current, name=name, division=division, address=address)
            updated.pack()
            table[slot] = updated
        return updated


_MENU = """
--- Direct Access File Operations ---
1. Create Database
2. Display Database
3. Add a Record
4. Search a Record
5. Modify a Record
6. Exit
Enter your choice: """


def _tokens(stream: TextIO) -> Iterator[str]:
    for line in stream:
        yield from line.split()


def _ask(tokens: Iterator[str], prompt: str = "") -> str:
    print(prompt, end="", flush=True)
    try:
        return next(tokens)
    except StopIteration:
        raise EOFError from None


def _show_found(record: StudentRecord) -> None:
    print("Record found:")
    print(
        f"Roll No: {record.roll_no}, Name: {record.name}, "
        f"Division: {record.division}, Address: {record.address}"
    )


def _run_choice(daf: DirectAccessFile, choice: str, tokens: Iterator[str],
                with_replacement: bool) -> None:
    if choice == "1":
        daf.create()
        print("Database created successfully.")
    elif choice == "2":
        print("Roll No\tName\tDivision\tAddress\tChain")
        for r in daf.records():
            print(f"{r.roll_no}\t{r.name}\t{r.division}\t{r.address}\t{r.chain}")
    elif choice == "3":
        roll_no = int(_ask(tokens, "Enter Roll No: "))
        name = _ask(tokens, "Enter Name: ")
        division = _ask(tokens, "Enter Division: ")
        address = _ask(tokens, "Enter Address: ")
        try:
            daf.add(StudentRecord(roll_no, name, division, address), with_replacement)
        except HashTableFullError:
            print("Hash table is full. Cannot add record.")
    elif choice == "4":
        roll_no = int(_ask(tokens, "Enter Roll No to search: "))
        record = daf.search(roll_no)
        if record is None:
            print("Record not found.")
        else:
            _show_found(record)
    elif choice == "5":
        roll_no = int(_ask(tokens, "Enter Roll No to modify: "))
        record = daf.search(roll_no)
        if record is None:
            print("Record not found.")
            return
        _show_found(record)
        print("Enter new details:")
        name = _ask(tokens, "Name: ")
        division = _ask(tokens, "Division: ")
        address = _ask(tokens, "Address: ")
        daf.modify(roll_no, name, division, address)
        print("Record modified successfully.")
    else:
        print("Invalid choice. Please try again.")


def main(argv: list[str] | None = None) -> int:
    """Run the interactive record-file menu."""
    parser = argparse.ArgumentParser(description="Manage a hashed student record file.")
    parser.add_argument("--file", default="student_data.dat", help="record file path")
    args = parser.parse_args(argv)
    daf = DirectAccessFile(args.file)
    tokens = _tokens(sys.stdin)
    try:
        print("Choose hashing method:")
        print("1. Linear Probing without Replacement")
        print("2. Linear Probing with Replacement")
        with_replacement = _ask(tokens) == "2"
        while True:
            choice = _ask(tokens, _MENU)
            if choice == "6":
                print("Exiting...")
                return 0
            try:
                _run_choice(daf, choice, tokens, with_replacement)
            except OSError:
                print("Error opening file!", file=sys.stderr)
            except ValueError as exc:
                print(f"Error: {exc}", file=sys.stderr)
    except EOFError:
        return 0


if __name__ == "__main__":
    raise SystemExit(main())