"""Tests for the ordered change extraction."""

import unittest
from unittest.mock import Mock

from genie_fun.changes.change_set import ChangeSet
from genie_fun.changes.extractor import ChangeSource, extract_changes
from genie_fun.vcs.git_client import GitError


def make_client(staged="", unstaged="", untracked=None):
    client = Mock()
    client.get_staged_diff.return_value = staged
    client.get_unstaged_diff.return_value = unstaged
    client.get_untracked_files.return_value = untracked or []
    return client


class TestExtractChanges(unittest.TestCase):
    """Tests for extract_changes."""

    def test_empty_tree_returns_none(self):
        client = make_client(staged="\n  \n", unstaged="")
        self.assertIsNone(extract_changes(client))

    def test_staged_preferred_over_everything(self):
        client = make_client(
            staged="diff --git a/x b/x\n+staged\n",
            unstaged="diff --git a/y b/y\n+unstaged\n",
            untracked=["new.txt"],
        )
        result = extract_changes(client)
        self.assertEqual(result, ChangeSet(source="staged", text="diff --git a/x b/x\n+staged"))
        client.get_unstaged_diff.assert_not_called()
        client.get_untracked_files.assert_not_called()

    def test_unstaged_preferred_over_untracked(self):
        client = make_client(unstaged="\n+unstaged change\n", untracked=["new.txt"])
        result = extract_changes(client)
        self.assertEqual(result.source, "unstaged")
        self.assertEqual(result.text, "+unstaged change")
        client.get_untracked_files.assert_not_called()

    def test_untracked_listing(self):
        client = make_client(untracked=["a.txt", "b.txt"])
        result = extract_changes(client)
        self.assertEqual(result.source, "untracked")
        self.assertEqual(result.text, "New untracked files:\n+ a.txt\n+ b.txt\n")

    def test_untracked_listing_keeps_git_order(self):
        client = make_client(untracked=["z.py", "a.py"])
        lines = extract_changes(client).text.splitlines()
        self.assertEqual(lines[1:], ["+ z.py", "+ a.py"])

    def test_git_error_propagates(self):
        client = make_client()
        client.get_unstaged_diff.side_effect = GitError("fatal: index corrupt")
        with self.assertRaises(GitError):
            extract_changes(client)
        client.get_untracked_files.assert_not_called()

    def test_custom_sources_tried_in_order(self):
        seen = []

        def first(client):
            seen.append("first")
            return None

        def second(client):
            seen.append("second")
            return "from second"

        def third(client):
            seen.append("third")
            return "from third"

        result = extract_changes(
            Mock(),
            [ChangeSource("first", first), ChangeSource("second", second), ChangeSource("third", third)],
        )
        self.assertEqual(result, ChangeSet(source="second", text="from second"))
        self.assertEqual(seen, ["first", "second"])


if __name__ == "__main__":
    unittest.main()
