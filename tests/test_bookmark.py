"""Tests for jjnamer.vcs.bookmark module."""

import pytest

from jjnamer.vcs import BookmarkExists, PushRejected, VcsInvocationError, publish_bookmark


class TestPublishBookmark:
    """Tests for publish_bookmark function."""

    def test_creates_then_pushes(self, make_vcs):
        """Test that create happens before push."""
        vcs = make_vcs()

        result = publish_bookmark(vcs, "fix-login-retry")

        assert vcs.calls == [
            ("create", "fix-login-retry"),
            ("push", "fix-login-retry", None, True),
        ]
        assert result.pushed is True
        assert result.dry_run is False
        assert "Created 1 bookmarks" in result.create_output
        assert "Add bookmark fix-login-retry" in result.push_output

    def test_dry_run_runs_nothing(self, make_vcs):
        """Test that a dry run never touches jj."""
        vcs = make_vcs()

        result = publish_bookmark(vcs, "fix-login-retry", dry_run=True)

        assert vcs.calls == []
        assert result.name == "fix-login-retry"
        assert result.dry_run is True
        assert result.pushed is False

    def test_dry_run_reports_planned_commands(self, make_vcs):
        """Test the commands shown for a dry run."""
        result = publish_bookmark(make_vcs(), "me/fix-it", dry_run=True, remote="origin")

        assert result.commands == (
            "jj bookmark create me/fix-it -r @",
            "jj git push --bookmark me/fix-it --remote origin --allow-new",
        )

    def test_allow_new_can_be_turned_off(self, make_vcs):
        """Test pushing without --allow-new."""
        vcs = make_vcs()

        result = publish_bookmark(vcs, "fix-it", allow_new=False)

        assert vcs.calls[-1] == ("push", "fix-it", None, False)
        assert result.commands[-1] == "jj git push --bookmark fix-it"

    def test_remote_and_allow_new_are_forwarded(self, make_vcs):
        """Test push options."""
        vcs = make_vcs()

        publish_bookmark(vcs, "fix-it", remote="upstream", allow_new=True)

        assert vcs.calls[-1] == ("push", "fix-it", "upstream", True)

    def test_collision_skips_push(self, make_vcs):
        """Test that BookmarkExists is raised and nothing is pushed."""
        vcs = make_vcs(existing_bookmarks=("fix-login-retry",))

        with pytest.raises(BookmarkExists):
            publish_bookmark(vcs, "fix-login-retry")

        assert vcs.operations == ["create"]

    def test_push_failure_keeps_bookmark(self, make_vcs):
        """Test that a rejected push is reported without rollback."""
        vcs = make_vcs(push_error="Error: remote rejected")

        with pytest.raises(PushRejected) as exc_info:
            publish_bookmark(vcs, "fix-login-retry")

        assert str(exc_info.value) == "Error: remote rejected"
        assert vcs.operations == ["create", "push"]
        assert "fix-login-retry" in vcs.bookmarks

    def test_create_invocation_error_propagates(self, make_vcs, mocker):
        """Test that other create failures surface unchanged."""
        vcs = make_vcs()
        error = VcsInvocationError("'jj' is not installed or not in PATH.")
        mocker.patch.object(vcs, "create_bookmark", side_effect=error)
        push = mocker.patch.object(vcs, "push_bookmark")

        with pytest.raises(VcsInvocationError) as exc_info:
            publish_bookmark(vcs, "fix-login-retry")

        assert exc_info.value is error
        push.assert_not_called()
