"""Unit tests for the command-line entry point.

create_activity_service is patched to return a service over FakeFetcher,
so these run the real parser and output formatting without HTTP.
"""

from __future__ import annotations

from unittest.mock import patch

import pytest

from gh_activity.main import build_parser, run
from gh_activity.services.activity import ActivityService
from gh_activity.services.github.exceptions import GitHubNotFoundError, GitHubRateLimitError

from tests.helpers.factories import make_event, push_payload
from tests.helpers.fakes import FakeFetcher

SERVICE_PATH = "gh_activity.main.create_activity_service"


def _service(events=None, error=None) -> ActivityService:
    return ActivityService(FakeFetcher(events, error))


def _feed():
    return [
        make_event(
            type="PushEvent",
            repo="user/repo",
            payload=push_payload(
                size=1,
                ref="refs/heads/develop",
                commits=[{"sha": "abc123def456", "message": "Fix bug", "author": {"name": "J"}}],
            ),
        ),
        make_event(type="WatchEvent", repo="facebook/react"),
        make_event(
            type="IssuesEvent",
            repo="user/repo",
            payload={"action": "opened", "issue": {"number": 42, "title": "Broken"}},
        ),
    ]


class TestParser:
    def test_defaults(self):
        args = build_parser().parse_args(["octocat"])

        assert args.username == "octocat"
        assert args.type == ""
        assert args.limit == 30
        assert args.detailed is False
        assert args.list_types is False

    def test_flags(self):
        args = build_parser().parse_args(
            ["--type", "PushEvent", "--limit", "5", "--detailed", "torvalds"]
        )

        assert (args.type, args.limit, args.detailed, args.username) == (
            "PushEvent",
            5,
            True,
            "torvalds",
        )


class TestListTypes:
    def test_lists_every_type_sorted(self, capsys):
        assert run(["--list-types"]) == 0

        out = capsys.readouterr().out.splitlines()
        assert out[0] == "Available event types:"
        names = [line.split()[0] for line in out[1:]]
        assert names == sorted(names)
        assert len(names) == 11
        assert "  PushEvent           - Git push" in out

    def test_needs_no_username(self, capsys):
        with patch(SERVICE_PATH) as factory:
            assert run(["--list-types"]) == 0
        factory.assert_not_called()


class TestValidation:
    def test_missing_username_prints_help(self, capsys):
        assert run([]) == 1
        assert "usage: gh-activity" in capsys.readouterr().out

    def test_unknown_type(self, capsys):
        assert run(["--type", "InvalidEvent", "octocat"]) == 1
        assert "Error: invalid event type: InvalidEvent" in capsys.readouterr().err

    def test_negative_limit(self, capsys):
        assert run(["--limit", "-1", "octocat"]) == 1
        assert "Error: limit cannot be negative" in capsys.readouterr().err

    def test_blank_username(self, capsys):
        with patch(SERVICE_PATH, return_value=_service(_feed())):
            assert run(["   "]) == 1
        assert "Error: username cannot be empty" in capsys.readouterr().err


class TestActivityOutput:
    def test_summary_listing(self, capsys):
        with patch(SERVICE_PATH, return_value=_service(_feed())):
            assert run(["octocat"]) == 0

        out = capsys.readouterr().out
        assert out.startswith("Fetching GitHub activity for user: octocat\n\n")
        assert "- Pushed 1 commit to user/repo (branch: develop)\n" in out
        assert "- Starred facebook/react\n" in out
        assert "- Opened issue #42 in user/repo: Broken\n" in out

    def test_type_and_limit(self, capsys):
        with patch(SERVICE_PATH, return_value=_service(_feed())):
            assert run(["--type", "watchevent", "--limit", "1", "octocat"]) == 0

        lines = [line for line in capsys.readouterr().out.splitlines() if line.startswith("- ")]
        assert lines == ["- Starred facebook/react"]

    def test_detailed(self, capsys):
        with patch(SERVICE_PATH, return_value=_service(_feed()[:1])):
            assert run(["--detailed", "octocat"]) == 0

        out = capsys.readouterr().out
        assert "- Pushed 1 commit to user/repo (branch: develop)\n" in out
        assert "  Time: 2024-01-15 10:30:00\n" in out
        assert "  Type: PushEvent\n" in out
        assert "  Commits:\n    - abc123d: Fix bug\n" in out
        assert "  Branch: develop\n" in out

    def test_no_activity(self, capsys):
        with patch(SERVICE_PATH, return_value=_service([])):
            assert run(["octocat"]) == 0
        assert "No recent activity found." in capsys.readouterr().out

    def test_no_events_of_type(self, capsys):
        with patch(SERVICE_PATH, return_value=_service(_feed())):
            assert run(["--type", "ForkEvent", "octocat"]) == 0
        assert "No 'ForkEvent' events found." in capsys.readouterr().out

    def test_stats(self, capsys):
        feed = _feed() + [make_event(type="WatchEvent", repo="a/b")]
        with patch(SERVICE_PATH, return_value=_service(feed)):
            assert run(["--stats", "octocat"]) == 0

        lines = capsys.readouterr().out.splitlines()
        start = lines.index("Event statistics:")
        assert lines[start + 1].split() == ["WatchEvent", "2"]
        assert len(lines[start + 1 :]) == 3

    def test_repos(self, capsys):
        with patch(SERVICE_PATH, return_value=_service(_feed())):
            assert run(["--repos", "--limit", "5", "octocat"]) == 0

        out = capsys.readouterr().out
        assert "Recently active repositories:\n- user/repo\n- facebook/react\n" in out


class TestFetchErrors:
    @pytest.mark.parametrize(
        ("error", "message"),
        [
            (
                GitHubNotFoundError("User 'ghost' not found", 404),
                "Error: failed to fetch events: User 'ghost' not found",
            ),
            (
                GitHubRateLimitError("GitHub API rate limit exceeded", 403),
                "Error: failed to fetch events: GitHub API rate limit exceeded",
            ),
        ],
    )
    def test_reports_and_exits_nonzero(self, capsys, error, message):
        with patch(SERVICE_PATH, return_value=_service(error=error)):
            assert run(["ghost"]) == 1

        assert message in capsys.readouterr().err
