import argparse
import io
import os
import tempfile
import unittest
from contextlib import redirect_stdout

from realpoly import opts
from realpoly import logging
from realpoly import roots # registers the root-finder options
from realpoly.common import (
    is_close, round_half_away, FrozenDict, AtomicWriteableFile)

class TestCommonUtils(unittest.TestCase):

    def test_is_close(self):
        assert is_close(1.0, 1.0 + 1e-12, 1e-10)
        assert not is_close(1.0, 1.1, 1e-10)
        assert not is_close(0.0, 1e-10, 1e-10)

    def test_round_half_away(self):
        self.assertEqual(round_half_away(2.5), 3)
        self.assertEqual(round_half_away(-2.5), -3)
        self.assertEqual(round_half_away(2.4), 2)
        self.assertEqual(round_half_away(-0.4), 0)

    def test_frozendict(self):
        d1 = FrozenDict([(2, 1.0), (0, 3.0)])
        d2 = FrozenDict([(0, 3.0), (2, 1.0)])
        assert hash(d1) == hash(d2)
        assert d1 == d2
        self.assertEqual(d1[2], 1.0)

    def test_atomic_file(self):
        with tempfile.TemporaryDirectory() as d:
            path = os.path.join(d, "out.txt")
            with AtomicWriteableFile(path) as f:
                f.write("hello")
                assert not os.path.exists(path)
            with open(path) as f:
                self.assertEqual(f.read(), "hello")

class TestOpts(unittest.TestCase):

    def setUp(self):
        self.snap = opts.snapshot()

    def tearDown(self):
        opts.restore(self.snap)

    def test_option_is_not_a_boolean(self):
        with self.assertRaises(Exception):
            bool(logging.verbose)

    def test_setup_and_read(self):
        o = opts.find("max-iter")
        parser = argparse.ArgumentParser()
        opts.setup(parser)
        opts.read(parser.parse_args(["--max-iter", "17", "--epsilon", "1e-6", "--verbose"]))
        self.assertEqual(o.value, 17)
        self.assertEqual(opts.find("epsilon").value, 1e-6)
        self.assertIs(logging.verbose.value, True)

    def test_snapshot_restore(self):
        snap = opts.snapshot()
        opts.find("max-iter").value = 3
        opts.restore(snap)
        self.assertEqual(opts.find("max-iter").value, snap["max-iter"])

class TestLogging(unittest.TestCase):

    def setUp(self):
        self.snap = opts.snapshot()

    def tearDown(self):
        opts.restore(self.snap)

    def test_silent_by_default(self):
        out = io.StringIO()
        with redirect_stdout(out):
            with logging.task("quiet"):
                logging.event("nothing")
        self.assertEqual(out.getvalue(), "")

    def test_indented_output(self):
        logging.verbose.value = True
        out = io.StringIO()
        with redirect_stdout(out):
            with logging.task("outer", degree=3):
                logging.event("inside")
        lines = out.getvalue().splitlines()
        self.assertEqual(lines[0], "outer [degree=3]...")
        self.assertEqual(lines[1], "  inside")
        assert lines[2].startswith("Finished outer")
        assert ("outer",) in logging.timings()

    def test_dump_profile(self):
        with logging.task("profiled"):
            pass
        with tempfile.TemporaryDirectory() as d:
            path = os.path.join(d, "profile.txt")
            logging.dump_profile(path)
            with open(path) as f:
                text = f.read()
        assert text.startswith("Total duration")
        assert "profiled" in text
