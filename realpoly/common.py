"""Utility functions and classes not found in the standard libraries.

Important functions and classes:
 - InvalidArgument: raised when a value violates an operation's precondition
 - is_close: tolerance-based float comparison
 - round_half_away: integer rounding with ties away from zero
 - FrozenDict: a hashable immutable dictionary

File helpers:
 - open_maybe_stdin / open_maybe_stdout: treat "-" as the standard streams
 - AtomicWriteableFile: a file that only appears once fully written
"""

# builtins
from contextlib import contextmanager
from functools import total_ordering
import sys
import os
import math
import tempfile
import shutil

# 3rd party
from dictionaries import FrozenDict as _FrozenDict

class InvalidArgument(ValueError):
    """An argument is outside the domain of the operation it was given to."""
    pass

def is_close(value, reference, tolerance):
    """Is `value` strictly within `tolerance` of `reference`?"""
    return abs(value - reference) < tolerance

def round_half_away(x):
    """Round x to the nearest integer; ties go away from zero."""
    r = math.floor(abs(x) + 0.5)
    return -r if x < 0 else r

@total_ordering
class FrozenDict(_FrozenDict):
    """
    Immutable dictionary that is hashable (suitable for use in sets/maps)
    and orderable (supports <, >, etc).
    """

    def __lt__(self, other):
        return tuple(sorted(self.items())) < tuple(sorted(other.items()))

    def __repr__(self):
        return "FrozenDict({!r})".format(list(self.items()))

@contextmanager
def AtomicWriteableFile(dst, mode="w"):
    """A writeable file handle that does not overwrite until it is closed.

    Usage:

        with AtomicWriteableFile(path) as f:
            ... f.write(...) ...

    If this object is closed due to an exception, it does not write any
    output to the destination path.
    """
    tmp_fd, tmp_path = tempfile.mkstemp(text=True)
    with os.fdopen(tmp_fd, mode) as f:
        yield f
        f.flush()
        os.fsync(tmp_fd)
    shutil.move(src=tmp_path, dst=dst)

def open_maybe_stdin(f : str, mode="r"):
    """Open file f, or open standard input if f is "-".

    In any case, the caller is responsible for closing the returned handle.
    The safest usage of this function is

        with open_maybe_stdin(path) as f:
            ...
    """
    if f == "-":
        return os.fdopen(os.dup(sys.stdin.fileno()), mode)
    return open(f, mode)

def open_maybe_stdout(f : str, mode="w"):
    """Open file f, or open standard output if f is "-".

    If this function would open a regular file for writing, it returns an
    AtomicWriteableFile for safety.
    """
    if f == "-":
        return os.fdopen(os.dup(sys.stdout.fileno()), mode)
    return AtomicWriteableFile(f, mode)
