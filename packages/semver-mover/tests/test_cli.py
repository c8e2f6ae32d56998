# SPDX-License-Identifier: MIT
"""Tests for the mover command."""

from __future__ import annotations

import json

from click.testing import CliRunner

from semver_mover.cli import cli


class TestValidateCommand:
    """Tests for mover validate."""

    def test_valid_version(self, cli_runner: CliRunner) -> None:
        """Test that a valid version prints its fields."""
        result = cli_runner.invoke(cli, ["validate", "3.2.56-rc.1+34892948-2f-1.1.10"])

        assert result.exit_code == 0
        assert "major: 3" in result.output
        assert "prerelease: rc.1" in result.output
        assert "build: 34892948-2f-1.1.10" in result.output

    def test_invalid_version(self, cli_runner: CliRunner) -> None:
        """Test that an invalid version exits 1 with the reason."""
        result = cli_runner.invoke(cli, ["validate", "3.2.56.81-whatever"])

        assert result.exit_code == 1
        assert "InvalidSuffixStart" in result.output

    def test_debug_logs_rejection(self, cli_runner: CliRunner) -> None:
        """Test that --debug emits the rejection event as JSON."""
        result = cli_runner.invoke(cli, ["--debug", "--json-logs", "validate", "3.2.56-"])

        assert result.exit_code == 1
        events = [json.loads(line) for line in result.output.splitlines() if line.startswith("{")]
        assert any(
            e["event"] == "version_rejected" and e["reason"] == "TrailingSeparator" for e in events
        )

    def test_no_debug_output_by_default(self, cli_runner: CliRunner) -> None:
        """Test that debug events stay hidden without --debug."""
        result = cli_runner.invoke(cli, ["validate", "3.2.56-"])

        assert "version_rejected" not in result.output


class TestCompareCommand:
    """Tests for mover compare."""

    def test_less(self, cli_runner: CliRunner) -> None:
        """Test that a lower version prints -1."""
        result = cli_runner.invoke(cli, ["compare", "4.1.75-rc.111", "4.1.75-rc.beta"])
        assert result.exit_code == 0
        assert result.output.strip() == "-1"

    def test_equal_ignoring_build(self, cli_runner: CliRunner) -> None:
        """Test that build metadata does not affect the result."""
        result = cli_runner.invoke(cli, ["compare", "4.1.77", "4.1.77+metadata"])
        assert result.output.strip() == "0"

    def test_greater(self, cli_runner: CliRunner) -> None:
        """Test that a higher version prints 1."""
        result = cli_runner.invoke(cli, ["compare", "11.11.11", "11.11.11-rc"])
        assert result.output.strip() == "1"

    def test_invalid_input(self, cli_runner: CliRunner) -> None:
        """Test that an invalid argument exits 1."""
        result = cli_runner.invoke(cli, ["compare", "1.0", "1.0.0"])
        assert result.exit_code == 1
        assert "Error" in result.output


class TestSortCommand:
    """Tests for mover sort."""

    def test_sorts_ascending(self, cli_runner: CliRunner) -> None:
        """Test that versions print in precedence order."""
        result = cli_runner.invoke(cli, ["sort", "1.0.0", "1.0.0-rc.1", "0.9.0", "1.0.0-alpha"])
        assert result.exit_code == 0
        assert result.output.splitlines() == ["0.9.0", "1.0.0-alpha", "1.0.0-rc.1", "1.0.0"]


class TestBumpCommand:
    """Tests for mover bump."""

    def test_bump_minor(self, cli_runner: CliRunner) -> None:
        """Test bumping the minor number."""
        result = cli_runner.invoke(cli, ["bump", "minor", "1.4.2"])
        assert result.exit_code == 0
        assert result.output.strip() == "1.5.0"

    def test_bump_prerelease_by(self, cli_runner: CliRunner) -> None:
        """Test bumping a prerelease by an explicit amount."""
        result = cli_runner.invoke(cli, ["bump", "prerelease", "4.1.1-alpha.2", "--by", "173"])
        assert result.output.strip() == "4.1.1-alpha.175"

    def test_bump_prerelease_without_one(self, cli_runner: CliRunner) -> None:
        """Test that bumping a missing prerelease exits 1."""
        result = cli_runner.invoke(cli, ["bump", "prerelease", "4.1.1"])
        assert result.exit_code == 1
        assert "prerelease" in result.output

    def test_bump_build(self, cli_runner: CliRunner) -> None:
        """Test bumping the build number after raw metadata."""
        result = cli_runner.invoke(cli, ["bump", "build", "3.1.7+debug"])
        assert result.output.strip() == "3.1.7+debug.1"


class TestTagCommand:
    """Tests for mover tag."""

    def test_tag_everything(self, cli_runner: CliRunner) -> None:
        """Test applying every tag option at once."""
        result = cli_runner.invoke(
            cli,
            ["tag", "4.1.1", "--prerelease", "rc", "--meta", "sha", "--flavor", "debug", "--build-number", "12"],
        )
        assert result.exit_code == 0
        assert result.output.strip() == "4.1.1-rc+sha-debug.12"

    def test_tag_timestamp(self, cli_runner: CliRunner) -> None:
        """Test that --timestamp stamps the current time."""
        result = cli_runner.invoke(cli, ["tag", "4.1.1", "--timestamp"])
        assert result.exit_code == 0
        assert result.output.strip().split("+")[1].isdigit()

    def test_invalid_flavor(self, cli_runner: CliRunner) -> None:
        """Test that a bad flavor exits 1."""
        result = cli_runner.invoke(cli, ["tag", "4.1.1", "--flavor", "dev1"])
        assert result.exit_code == 1
        assert "Invalid flavor" in result.output


class TestUntagCommand:
    """Tests for mover untag."""

    def test_untag(self, cli_runner: CliRunner) -> None:
        """Test removing all tags."""
        result = cli_runner.invoke(cli, ["untag", "7.2.33-rc.7+dev.715"])
        assert result.output.strip() == "7.2.33"

    def test_untag_build_only(self, cli_runner: CliRunner) -> None:
        """Test that --build-only keeps the prerelease."""
        result = cli_runner.invoke(cli, ["untag", "7.2.33-rc.7+dev.715", "--build-only"])
        assert result.output.strip() == "7.2.33-rc.7"
