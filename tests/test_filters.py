"""Unit tests for the primitive file filters.

Covers each filter against real files in a temporary directory, the
None / missing-entry contract, and both entry points (accept and
accept_path).
"""

import os
import shutil
import tempfile
import time
import unittest
from datetime import datetime, timedelta
from pathlib import Path
from unittest import mock

from dazzleio.entry import FileEntry
from dazzleio.iocase import IOCase
from dazzleio.visit import VisitResult
from dazzleio.filters import (
    AgeFileFilter,
    CAN_READ,
    CAN_WRITE,
    CANNOT_WRITE,
    DIRECTORY,
    EMPTY,
    FILE,
    HIDDEN,
    INSTANCE,
    NOT_EMPTY,
    NameFileFilter,
    PrefixFileFilter,
    READ_ONLY,
    SizeFileFilter,
    SuffixFileFilter,
    VISIBLE,
    WildcardFileFilter,
    suffixes,
)


class FilterTestCase(unittest.TestCase):
    """Creates a small tree shared by the filter tests.

    test_root/
    ├── subdir/
    ├── empty_dir/
    ├── small.txt   (10 bytes)
    ├── large.log   (1000 bytes)
    ├── empty.txt   (0 bytes)
    └── .hidden
    """

    def setUp(self):
        self.test_dir = tempfile.mkdtemp()
        self.root = Path(self.test_dir)
        self.subdir = self.root / "subdir"
        self.subdir.mkdir()
        (self.subdir / "child.txt").write_text("child")
        self.empty_dir = self.root / "empty_dir"
        self.empty_dir.mkdir()
        self.small = self.root / "small.txt"
        self.small.write_bytes(b"0123456789")
        self.large = self.root / "large.log"
        self.large.write_bytes(b"x" * 1000)
        self.empty = self.root / "empty.txt"
        self.empty.write_bytes(b"")
        self.hidden = self.root / ".hidden"
        self.hidden.write_text("secret")
        self.missing = self.root / "missing.txt"

    def tearDown(self):
        shutil.rmtree(self.test_dir, ignore_errors=True)


class TestTypeFilters(FilterTestCase):

    def test_directory_filter(self):
        self.assertTrue(DIRECTORY.accept(self.subdir))
        self.assertFalse(DIRECTORY.accept(self.small))
        self.assertFalse(DIRECTORY.accept(self.missing))
        self.assertFalse(DIRECTORY.accept(None))
        self.assertIs(INSTANCE, DIRECTORY)

    def test_file_filter(self):
        self.assertTrue(FILE.accept(self.small))
        self.assertFalse(FILE.accept(self.subdir))
        self.assertFalse(FILE.accept(self.missing))
        self.assertFalse(FILE.accept(None))

    def test_filters_are_callable(self):
        found = sorted(p.name for p in filter(FILE, self.root.iterdir()))
        self.assertEqual(found, [".hidden", "empty.txt", "large.log", "small.txt"])


class TestDualEntryPoints(FilterTestCase):
    """accept and accept_path must agree, and supplied attributes win."""

    def test_accept_path_matches_accept(self):
        for path in (self.subdir, self.small, self.missing):
            expected = VisitResult.CONTINUE if DIRECTORY.accept(path) else VisitResult.TERMINATE
            self.assertEqual(DIRECTORY.accept_path(path), expected)

    def test_accept_path_none(self):
        self.assertEqual(DIRECTORY.accept_path(None), VisitResult.TERMINATE)

    def test_supplied_attributes_are_used(self):
        dir_attributes = os.stat(self.subdir)
        # Claim the file is a directory; the filter must trust the caller
        self.assertEqual(DIRECTORY.accept_path(self.small, dir_attributes),
                         VisitResult.CONTINUE)

    def test_no_stat_when_attributes_supplied(self):
        attributes = os.stat(self.large)
        with mock.patch("dazzleio.entry.os.stat") as stat_mock:
            result = SizeFileFilter(100).accept_path(self.large, attributes)
            stat_mock.assert_not_called()
        self.assertEqual(result, VisitResult.CONTINUE)

    def test_exclusion_flips_signal_only(self):
        exclude_dirs = DIRECTORY.as_exclusion()
        self.assertTrue(exclude_dirs.accept(self.subdir))
        self.assertEqual(exclude_dirs.accept_path(self.subdir), VisitResult.TERMINATE)
        self.assertEqual(exclude_dirs.accept_path(self.small), VisitResult.CONTINUE)
        # The shared singleton is untouched
        self.assertEqual(DIRECTORY.accept_path(self.subdir), VisitResult.CONTINUE)


class TestNameFilters(FilterTestCase):

    def test_name_filter(self):
        flt = NameFileFilter("small.txt", "other.txt")
        self.assertTrue(flt.accept(self.small))
        self.assertFalse(flt.accept(self.large))
        # Names never touch the filesystem
        self.assertTrue(NameFileFilter("missing.txt").accept(self.missing))

    def test_name_filter_case(self):
        self.assertFalse(NameFileFilter("SMALL.TXT").accept(self.small))
        self.assertTrue(NameFileFilter("SMALL.TXT", case=IOCase.INSENSITIVE).accept(self.small))

    def test_name_filter_accepts_list(self):
        self.assertTrue(NameFileFilter(["a", "small.txt"]).accept(self.small))

    def test_prefix_and_suffix(self):
        self.assertTrue(PrefixFileFilter("sm").accept(self.small))
        self.assertFalse(PrefixFileFilter("la").accept(self.small))
        self.assertTrue(SuffixFileFilter(".log").accept(self.large))
        self.assertTrue(SuffixFileFilter(".LOG", case=IOCase.INSENSITIVE).accept(self.large))
        self.assertTrue(suffixes("txt", "log").accept(self.large))

    def test_wildcard(self):
        self.assertTrue(WildcardFileFilter("*.txt").accept(self.small))
        self.assertTrue(WildcardFileFilter("sm?ll.*").accept(self.small))
        self.assertFalse(WildcardFileFilter("*.txt").accept(self.large))
        self.assertTrue(WildcardFileFilter("*.TXT", case=IOCase.INSENSITIVE).accept(self.small))

    def test_invalid_construction(self):
        with self.assertRaises(ValueError):
            NameFileFilter()
        with self.assertRaises(ValueError):
            NameFileFilter(None)
        with self.assertRaises(ValueError):
            SuffixFileFilter(".txt", None)
        with self.assertRaises(ValueError):
            WildcardFileFilter([])

    def test_none_is_rejected(self):
        for flt in (NameFileFilter("x"), PrefixFileFilter("x"),
                    SuffixFileFilter("x"), WildcardFileFilter("*")):
            self.assertFalse(flt.accept(None))


class TestMetadataFilters(FilterTestCase):

    def test_size_filter(self):
        self.assertTrue(SizeFileFilter(10).accept(self.small))
        self.assertFalse(SizeFileFilter(11).accept(self.small))
        self.assertTrue(SizeFileFilter(11, accept_larger=False).accept(self.small))
        self.assertFalse(SizeFileFilter(10, accept_larger=False).accept(self.small))

    def test_size_filter_missing_never_matches(self):
        self.assertFalse(SizeFileFilter(0).accept(self.missing))
        self.assertFalse(SizeFileFilter(0, accept_larger=False).accept(self.missing))

    def test_size_filter_rejects_negative(self):
        with self.assertRaises(ValueError):
            SizeFileFilter(-1)

    def test_age_filter(self):
        old_time = time.time() - 3600
        os.utime(self.small, (old_time, old_time))
        cutoff = datetime.now() - timedelta(minutes=30)

        self.assertTrue(AgeFileFilter(cutoff).accept(self.small))
        self.assertFalse(AgeFileFilter(cutoff).accept(self.large))
        self.assertTrue(AgeFileFilter(cutoff, accept_older=False).accept(self.large))
        self.assertFalse(AgeFileFilter(cutoff).accept(self.missing))
        self.assertFalse(AgeFileFilter(cutoff, accept_older=False).accept(self.missing))

    def test_age_filter_reference_file(self):
        old_time = time.time() - 3600
        os.utime(self.small, (old_time, old_time))
        newer_than_small = AgeFileFilter(self.small, accept_older=False)
        self.assertTrue(newer_than_small.accept(self.large))
        self.assertFalse(newer_than_small.accept(self.small))

    def test_age_filter_bad_cutoff(self):
        with self.assertRaises(ValueError):
            AgeFileFilter(self.missing)
        with self.assertRaises(ValueError):
            AgeFileFilter(None)

    def test_hidden_and_visible(self):
        self.assertTrue(HIDDEN.accept(self.hidden))
        self.assertFalse(HIDDEN.accept(self.small))
        self.assertTrue(VISIBLE.accept(self.small))
        self.assertFalse(VISIBLE.accept(self.hidden))
        self.assertFalse(VISIBLE.accept(self.missing))

    def test_empty(self):
        self.assertTrue(EMPTY.accept(self.empty))
        self.assertTrue(EMPTY.accept(self.empty_dir))
        self.assertFalse(EMPTY.accept(self.small))
        self.assertFalse(EMPTY.accept(self.subdir))
        self.assertTrue(NOT_EMPTY.accept(self.subdir))
        self.assertFalse(EMPTY.accept(self.missing))
        self.assertFalse(NOT_EMPTY.accept(self.missing))

    def test_permissions(self):
        self.assertTrue(CAN_READ.accept(self.small))
        self.assertTrue(CAN_WRITE.accept(self.small))
        self.assertFalse(CAN_READ.accept(self.missing))
        self.assertFalse(CANNOT_WRITE.accept(self.missing))

    @unittest.skipIf(os.name == 'nt' or getattr(os, "geteuid", lambda: 0)() == 0,
                     "root ignores permission bits")
    def test_read_only(self):
        os.chmod(self.small, 0o444)
        try:
            self.assertTrue(READ_ONLY.accept(self.small))
            self.assertFalse(READ_ONLY.accept(self.large))
        finally:
            os.chmod(self.small, 0o644)

    def test_unreadable_metadata_is_non_match(self):
        entry = FileEntry(self.small)
        with mock.patch("dazzleio.entry.os.stat", side_effect=PermissionError("denied")):
            self.assertFalse(FILE.accept(entry))
            self.assertFalse(SizeFileFilter(0).accept(entry))


if __name__ == '__main__':
    unittest.main()
