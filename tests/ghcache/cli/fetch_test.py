"""Tests for the ghcache.cli.fetch module."""

import io
from pathlib import Path
from unittest.mock import MagicMock, patch

from click.testing import CliRunner

from ghcache.cli import cli
from ghcache.errors import TransportError


def _transport_serving(payloads: dict[str, bytes]) -> MagicMock:
    """Create a transport mock serving payloads keyed by URI suffix."""

    def get_stream(uri):
        for suffix, content in payloads.items():
            if uri.endswith(suffix):
                return io.BytesIO(content)
        raise TransportError(f"GET {uri}: connection refused")

    transport = MagicMock()
    transport.get_stream.side_effect = get_stream
    return transport


class TestFetch:
    """Tests for the fetch command."""

    @patch("ghcache.cli.options.RequestsTransport")
    def test_fetch_one_kind(self, mock_transport_cls: MagicMock, tmp_path: Path, issues_payload):
        transport = _transport_serving({"/issues": issues_payload})
        mock_transport_cls.return_value = transport

        runner = CliRunner()
        result = runner.invoke(cli, ["fetch", "o/r", "issues", "-d", str(tmp_path)])

        assert result.exit_code == 0
        cache_file = tmp_path / "o" / "r" / "issues.json"
        assert str(cache_file) in result.output
        assert cache_file.read_bytes() == issues_payload
        transport.get_stream.assert_called_once_with("https://api.github.com/repos/o/r/issues")

    @patch("ghcache.cli.options.RequestsTransport")
    def test_fetch_all_kinds(
        self,
        mock_transport_cls: MagicMock,
        tmp_path: Path,
        issues_payload,
        milestones_payload,
    ):
        mock_transport_cls.return_value = _transport_serving(
            {"/issues": issues_payload, "/milestones": milestones_payload}
        )

        runner = CliRunner()
        result = runner.invoke(cli, ["fetch", "o/r", "-d", str(tmp_path)])

        assert result.exit_code == 0
        assert (tmp_path / "o" / "r" / "issues.json").exists()
        assert (tmp_path / "o" / "r" / "milestones.json").exists()

    @patch("ghcache.cli.options.RequestsTransport")
    def test_fetch_uses_api_base_and_timeout(
        self, mock_transport_cls: MagicMock, tmp_path: Path, issues_payload
    ):
        transport = _transport_serving({"/issues": issues_payload})
        mock_transport_cls.return_value = transport

        runner = CliRunner()
        result = runner.invoke(
            cli,
            ["fetch", "o/r", "issues", "-d", str(tmp_path), "--timeout", "2.5"],
            env={"GHCACHE_API_BASE": "http://localhost:9999"},
        )

        assert result.exit_code == 0
        mock_transport_cls.assert_called_once_with(timeout=2.5)
        transport.get_stream.assert_called_once_with("http://localhost:9999/repos/o/r/issues")

    @patch("ghcache.cli.options.RequestsTransport")
    def test_failure_exits_with_one(
        self, mock_transport_cls: MagicMock, tmp_path: Path, issues_payload
    ):
        mock_transport_cls.return_value = _transport_serving({"/issues": issues_payload})

        runner = CliRunner()
        result = runner.invoke(cli, ["fetch", "o/r", "-d", str(tmp_path)])

        assert result.exit_code == 1
        assert (tmp_path / "o" / "r" / "issues.json").exists()
        assert not (tmp_path / "o" / "r" / "milestones.json").exists()

    def test_invalid_repo_is_usage_error(self, tmp_path: Path):
        runner = CliRunner()
        result = runner.invoke(cli, ["fetch", "../etc", "-d", str(tmp_path)])
        assert result.exit_code == 2
        assert "Invalid repository identifier" in result.output

    def test_unknown_kind_is_usage_error(self, tmp_path: Path):
        runner = CliRunner()
        result = runner.invoke(cli, ["fetch", "o/r", "pulls", "-d", str(tmp_path)])
        assert result.exit_code == 2


class TestPath:
    """Tests for the path command."""

    def test_prints_path_without_fetching(self, tmp_path: Path):
        runner = CliRunner()
        result = runner.invoke(cli, ["path", "o/r", "milestones", "-d", str(tmp_path)])

        assert result.exit_code == 0
        assert result.output.strip() == str(tmp_path / "o" / "r" / "milestones.json")
        assert list(tmp_path.iterdir()) == []

    def test_dir_from_environment(self, tmp_path: Path):
        runner = CliRunner()
        result = runner.invoke(
            cli, ["path", "o/r", "issues"], env={"GHCACHE_DIR": str(tmp_path)}
        )

        assert result.exit_code == 0
        assert result.output.strip() == str(tmp_path / "o" / "r" / "issues.json")
