"""
Tests for the inspect_trees command-line entry point.
"""

import inspect_trees
from immutable_trees.models import RedRootError


class TestInspectTrees:
    """Tests for inspect_trees.main."""

    def test_scenario_output(self, capsys):
        """Test the summary printed for the seven-key scenario."""
        status = inspect_trees.main(list("dbfaceg"))
        out = capsys.readouterr().out

        assert status == 0
        assert "AVLTree:" in out
        assert "RedBlackTree:" in out
        assert "black-height: 2" in out
        assert "red/black nodes: 3/4" in out
        assert out.count("keys:   a b c d e f g") == 2

    def test_no_arguments(self, capsys):
        """Test that missing keys prints usage and fails."""
        assert inspect_trees.main([]) == 2
        assert "usage" in capsys.readouterr().err

    def test_validation_failure(self, monkeypatch, capsys):
        """Test the exit status when a tree fails validation."""
        def failing_validate(tree):
            raise RedRootError("x")

        monkeypatch.setattr(inspect_trees, "validate", failing_validate)

        assert inspect_trees.main(["a"]) == 1
        assert "AVLTree:" not in capsys.readouterr().out
