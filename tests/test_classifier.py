"""Tests for the diff classifier."""

import pytest

from branchdiff.gitlab.models import DiffEntry
from branchdiff.output import json_report
from branchdiff.report.classifier import classify, extension


class TestExtension:
    @pytest.mark.parametrize(
        "path, expected",
        [
            ("a.txt", ".txt"),
            ("dir/archive.tar.gz", ".gz"),
            ("Makefile", ""),
            ("", ""),
            (".bashrc", ".bashrc"),
            ("conf.d/nginx", ""),
            ("src/pkg.v2/module.py", ".py"),
            ("trailing.", "."),
        ],
    )
    def test_extension(self, path, expected):
        assert extension(path) == expected


class TestScenarios:
    def test_single_changed_file(self):
        report = classify([DiffEntry("a.txt", "a.txt")])
        assert report.changed_files == ("a.txt",)
        assert report.added_and_changed_files == ("a.txt",)
        assert report.any_changed is True
        assert report.only_changed is True
        assert not (report.only_added or report.only_deleted or report.only_renamed)
        assert report.type_changed_files == ()

    def test_single_added_file(self):
        report = classify([DiffEntry("", "b.py", is_new=True)])
        assert report.added_files == ("b.py",)
        assert report.added_and_changed_files == ("b.py",)
        assert report.any_added is True
        assert report.only_added is True
        assert report.changed_files == ()

    def test_empty_input(self):
        report = classify([])
        assert report.all_files == ()
        assert report.added_and_changed_files == ()
        assert report.type_changed_files == ()
        assert not any(
            (report.any_added, report.any_changed, report.any_deleted, report.any_renamed)
        )
        assert all(
            (report.only_added, report.only_changed, report.only_deleted, report.only_renamed)
        )

    def test_rename_with_type_change(self):
        report = classify([DiffEntry("x.txt", "x.md", is_renamed=True)])
        assert report.renamed_files == ("x.md",)
        assert report.type_changed_files == ("x.md",)
        assert report.only_renamed is True
        assert report.changed_files == ()
        assert report.added_and_changed_files == ()

    def test_deleted_and_changed(self):
        report = classify([
            DiffEntry("gone.py", "gone.py", is_deleted=True),
            DiffEntry("kept.py", "kept.py"),
        ])
        assert report.any_deleted is True
        assert report.any_changed is True
        assert report.only_deleted is False
        assert report.only_changed is False
        assert report.deleted_files == ("gone.py",)
        assert report.changed_files == ("kept.py",)


class TestProperties:
    def test_all_files_preserves_order_and_duplicates(self, sample_entries):
        entries = sample_entries + [DiffEntry("src/app.py", "src/app.py")]
        report = classify(entries)
        assert report.all_files == tuple(e.new_path for e in entries)
        assert report.changed_files == ("src/app.py", "src/app.py")

    def test_added_and_changed_is_ordered_union(self, sample_entries):
        report = classify(sample_entries)
        assert report.added_and_changed_files == ("src/app.py", "src/new_module.py")
        assert set(report.added_and_changed_files) == set(report.added_files) | set(
            report.changed_files
        )

    def test_exclusive_flags_partition_paths(self, sample_entries):
        report = classify(sample_entries)
        exclusive = [e for e in sample_entries if not e.is_renamed]
        for entry in exclusive:
            buckets = [
                entry.new_path in report.added_files,
                entry.new_path in report.changed_files,
                entry.new_path in report.deleted_files,
            ]
            assert buckets.count(True) == 1
        assert report.renamed_files == ("README.md",)

    def test_renamed_is_independent_of_other_flags(self):
        report = classify([DiffEntry("a.py", "b.py", is_new=True, is_renamed=True)])
        assert report.added_files == ("b.py",)
        assert report.renamed_files == ("b.py",)
        assert report.changed_files == ()

    def test_type_change_ignores_category_flags(self):
        report = classify([
            DiffEntry("data.csv", "data.json", is_deleted=True),
            DiffEntry("", "new.py", is_new=True),
            DiffEntry("same.py", "other.py", is_renamed=True),
        ])
        assert report.type_changed_files == ("data.json", "new.py")

    def test_missing_paths_are_empty_strings(self):
        report = classify([DiffEntry()])
        assert report.all_files == ("",)
        assert report.changed_files == ("",)
        assert report.type_changed_files == ()

    def test_accepts_any_iterable(self, sample_entries):
        assert classify(iter(sample_entries)) == classify(sample_entries)

    def test_idempotent(self, sample_entries):
        first = json_report.render(classify(sample_entries))
        second = json_report.render(classify(sample_entries))
        assert first == second
