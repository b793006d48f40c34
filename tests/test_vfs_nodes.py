"""
Tests for the filesystem tree nodes.

Tests cover:
- Recursive size computation
- Path rendering at every depth
- Child management (add, get, remove, copies, filters)
- Tree snapshots
- The seeded sample hierarchy
"""

import pytest

from memfs.vfs.base import DirectoryNode, FileNode, NodeType, TreeSnapshot
from memfs.vfs.seed import build_sample_tree


@pytest.fixture
def small_tree():
    """Create a small tree for testing.

    Structure:
        /
        ├── a/
        │   ├── b/
        │   │   └── deep.bin (300)
        │   └── one.txt (100)
        ├── empty/
        └── top.txt (50)
    """
    root = DirectoryNode("root")
    a = DirectoryNode("a")
    b = DirectoryNode("b")
    empty = DirectoryNode("empty")
    root.add_child(a)
    root.add_child(empty)
    root.add_child(FileNode("top.txt", 50))
    a.add_child(b)
    a.add_child(FileNode("one.txt", 100))
    b.add_child(FileNode("deep.bin", 300))
    return root


def _sum_children(directory: DirectoryNode) -> int:
    return sum(
        _sum_children(child) if isinstance(child, DirectoryNode) else child.calculate_size()
        for child in directory.get_children()
    )


class TestSize:
    """Test size computation."""

    def test_file_returns_declared_size(self):
        assert FileNode("x", 42).calculate_size() == 42

    def test_empty_directory_is_zero(self):
        assert DirectoryNode("empty").calculate_size() == 0

    def test_directory_sums_recursively(self, small_tree):
        assert small_tree.calculate_size() == 450
        assert small_tree.get_child("a").calculate_size() == 400

    def test_size_equals_sum_over_children_everywhere(self):
        root = build_sample_tree()
        stack = [root]
        while stack:
            directory = stack.pop()
            assert directory.calculate_size() == _sum_children(directory)
            stack.extend(directory.get_directories())

    def test_size_not_cached(self, small_tree):
        """
        Given: A directory whose size was already computed
        When: A file is added below it
        Then: The next computation reflects the new file
        """
        a = small_tree.get_child("a")
        assert a.calculate_size() == 400

        a.get_child("b").add_child(FileNode("more.bin", 24))

        assert a.calculate_size() == 424
        assert small_tree.calculate_size() == 474

    def test_negative_file_size_rejected(self):
        with pytest.raises(ValueError):
            FileNode("bad", -1)


class TestTypeAndPath:
    """Test type tags and path rendering."""

    def test_type_tags(self):
        assert DirectoryNode("d").get_type() is NodeType.DIRECTORY
        assert FileNode("f", 1).get_type() is NodeType.FILE
        assert NodeType.DIRECTORY.value == "DIRECTORY"
        assert NodeType.FILE.value == "FILE"

    def test_root_renders_as_slash(self, small_tree):
        assert small_tree.parent is None
        assert small_tree.get_path() == "/"

    def test_child_of_root_has_single_separator(self, small_tree):
        assert small_tree.get_child("a").get_path() == "/a"
        assert small_tree.get_child("top.txt").get_path() == "/top.txt"

    def test_deep_paths(self, small_tree):
        b = small_tree.get_child("a").get_child("b")
        assert b.get_path() == "/a/b"
        assert b.get_child("deep.bin").get_path() == "/a/b/deep.bin"

    def test_detached_node_path(self):
        assert DirectoryNode("loose").get_path() == "/loose"

    def test_empty_name_rejected(self):
        with pytest.raises(ValueError):
            DirectoryNode("")

    def test_get_info(self, small_tree):
        info = small_tree.get_child("a").get_info()
        assert info["name"] == "a"
        assert info["type"] == "DIRECTORY"
        assert info["size"] == 400
        assert info["path"] == "/a"
        assert set(info) == {"name", "type", "size", "path"}


class TestChildren:
    """Test child management on directories."""

    def test_add_child_sets_parent_and_keeps_order(self):
        root = DirectoryNode("root")
        names = ["zeta", "alpha", "mid"]
        for name in names:
            root.add_child(DirectoryNode(name))

        assert [c.name for c in root.get_children()] == names
        assert all(c.parent is root for c in root.get_children())

    def test_add_child_does_not_check_duplicates(self):
        root = DirectoryNode("root")
        root.add_child(DirectoryNode("dup"))
        root.add_child(FileNode("dup", 5))

        assert len(root.get_children()) == 2
        # First match wins
        assert isinstance(root.get_child("dup"), DirectoryNode)

    def test_get_child_is_case_sensitive(self, small_tree):
        assert small_tree.get_child("A") is None
        assert small_tree.get_child("a") is not None

    def test_remove_child(self, small_tree):
        a = small_tree.get_child("a")

        assert small_tree.remove_child("a") is True
        assert small_tree.get_child("a") is None
        assert a.parent is None
        assert small_tree.calculate_size() == 50

    def test_remove_missing_child(self, small_tree):
        assert small_tree.remove_child("nope") is False
        assert len(small_tree.get_children()) == 3

    def test_remove_only_first_match(self):
        root = DirectoryNode("root")
        root.add_child(FileNode("dup", 1))
        root.add_child(FileNode("dup", 2))

        assert root.remove_child("dup") is True
        assert root.get_child("dup").calculate_size() == 2

    def test_get_children_is_a_copy(self, small_tree):
        children = small_tree.get_children()
        children.clear()

        assert len(small_tree.get_children()) == 3

    def test_directories_and_files_filters(self, small_tree):
        assert [d.name for d in small_tree.get_directories()] == ["a", "empty"]
        assert [f.name for f in small_tree.get_files()] == ["top.txt"]


class TestTreeRepresentation:
    """Test tree snapshots."""

    def test_file_snapshot_has_no_children(self):
        snapshot = FileNode("f.txt", 7).get_tree_representation()
        assert snapshot == TreeSnapshot(name="f.txt", type=NodeType.FILE, size=7)
        assert snapshot.children == ()

    def test_directory_snapshot_mirrors_children(self, small_tree):
        snapshot = small_tree.get_tree_representation()

        assert snapshot.name == "root"
        assert snapshot.type is NodeType.DIRECTORY
        assert snapshot.size == 450
        assert [c.name for c in snapshot.children] == ["a", "empty", "top.txt"]
        assert snapshot.children[0].size == 400
        assert snapshot.children[0].children[0].children[0].name == "deep.bin"

    def test_snapshot_is_detached_from_tree(self, small_tree):
        snapshot = small_tree.get_tree_representation()
        small_tree.add_child(FileNode("late.txt", 1000))

        assert snapshot.size == 450
        assert len(snapshot.children) == 3

    def test_to_dict(self, small_tree):
        data = small_tree.get_child("a").get_tree_representation().to_dict()

        assert data == {
            "name": "a",
            "type": "DIRECTORY",
            "size": 400,
            "children": [
                {
                    "name": "b",
                    "type": "DIRECTORY",
                    "size": 300,
                    "children": [
                        {"name": "deep.bin", "type": "FILE", "size": 300, "children": []},
                    ],
                },
                {"name": "one.txt", "type": "FILE", "size": 100, "children": []},
            ],
        }


class TestSampleTree:
    """Test the seeded hierarchy."""

    def test_root_sentinel(self):
        root = build_sample_tree()
        assert root.name == "root"
        assert root.parent is None
        assert root.get_path() == "/"

    def test_top_level_order(self):
        root = build_sample_tree()
        assert [c.name for c in root.get_children()] == ["documents", "projects", "downloads"]

    def test_documents_order(self):
        documents = build_sample_tree().get_child("documents")
        assert [c.name for c in documents.get_children()] == ["work", "personal", "readme.txt"]

    def test_sizes(self):
        root = build_sample_tree()
        assert root.get_child("documents").calculate_size() == 12800
        assert root.get_child("projects").calculate_size() == 3584
        assert root.get_child("downloads").calculate_size() == 9728
        assert root.calculate_size() == 26112

    def test_each_call_builds_a_fresh_tree(self):
        first = build_sample_tree()
        second = build_sample_tree()
        first.remove_child("documents")

        assert second.get_child("documents") is not None

    def test_sibling_names_unique(self):
        stack = [build_sample_tree()]
        while stack:
            directory = stack.pop()
            names = [c.name for c in directory.get_children()]
            assert len(names) == len(set(names))
            stack.extend(directory.get_directories())
