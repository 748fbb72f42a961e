"""Tests for building commit records from GitHub payloads."""

from __future__ import annotations

from pr_refs.git.models import CommitRecord


def test_from_api_copies_fields(api_commit):
    record = CommitRecord.from_api(api_commit("abc123", ["def456"]))

    assert record.sha == "abc123"
    assert record.parent_sha == "def456"
    assert record.message == "message abc123"
    assert record.tree == "tree-abc123"
    assert record.author == {"name": "Ann", "email": "ann@example.com", "date": "2024-01-01T00:00:00Z"}
    assert record.committer["name"] == "Bob"


def test_from_api_without_parents(api_commit):
    assert CommitRecord.from_api(api_commit("root", [])).parent_sha is None


def test_from_api_uses_first_parent_only(api_commit):
    record = CommitRecord.from_api(api_commit("merge", ["first", "second"]))

    assert record.parent_sha == "first"


def test_to_dict_is_json_friendly(api_commit):
    data = CommitRecord.from_api(api_commit("abc123", ["def456"])).to_dict()

    assert data == {
        "sha": "abc123",
        "parent_sha": "def456",
        "message": "message abc123",
        "tree": "tree-abc123",
        "author": {"name": "Ann", "email": "ann@example.com", "date": "2024-01-01T00:00:00Z"},
        "committer": {"name": "Bob", "email": "bob@example.com", "date": "2024-01-02T00:00:00Z"},
    }
