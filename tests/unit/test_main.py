"""
Tests for the command line entry point.
"""

import json
from unittest.mock import MagicMock, patch

import pytest
from dependency_injector import providers

from fdown import main as cli
from fdown.container import Container
from fdown.core.config import AppConfig
from fdown.core.exceptions import UsageError
from tests.fixtures.test_data import SUBSCRIPTIONS_RESPONSE, TUMBLR_URL, entry


@pytest.fixture(autouse=True)
def no_log_files():
    """Keep run() from writing log files."""
    with patch.object(cli, 'setup_logging'):
        yield


@pytest.fixture
def recorded_container(transport):
    """Route create_container() through the recording transport."""
    def factory(app_config, use_dropbox=False):
        container = Container()
        container.app_config.override(providers.Object(app_config))
        container.transport.override(providers.Object(transport))
        return container

    with patch('fdown.container.create_container', side_effect=factory) as mock:
        yield mock


class TestParseArgs:
    """Tests for parse_args()."""

    def test_defaults(self):
        args = cli.parse_args([])

        assert args.config == '~/.fdown'
        assert args.subs is False
        assert args.category is None
        assert args.unsave is False
        assert args.unsave_partial is None
        assert args.count == 20
        assert args.dropbox is False

    def test_all_flags(self):
        args = cli.parse_args([
            '--config', '/tmp/fd', '-C', 'Art', '--unsave', '--unsave-partial',
            '-n', '5', '--target-dir', '/tmp/out', '--dropbox', '--debug',
        ])

        assert args.config == '/tmp/fd'
        assert args.category == 'Art'
        assert args.unsave is True
        assert args.unsave_partial is True
        assert args.count == 5
        assert args.target_dir == '/tmp/out'
        assert args.dropbox is True
        assert args.debug is True

    def test_unsave_requires_category(self):
        with pytest.raises(UsageError) as exc_info:
            cli.parse_args(['--unsave'])

        assert '--category' in exc_info.value.message

    @pytest.mark.parametrize('count', ['0', '-3', 'many'])
    def test_invalid_count(self, count):
        with pytest.raises(UsageError):
            cli.parse_args(['-n', count])

    def test_unknown_flag(self):
        with pytest.raises(UsageError):
            cli.parse_args(['--bogus'])


class TestBuildOptions:
    """Tests for build_options()."""

    def _config(self, **overrides):
        return AppConfig(userid='u', token='t', **overrides)

    def test_maps_flags(self):
        args = cli.parse_args(['-C', 'Art', '--unsave', '-n', '7'])

        options = cli.build_options(args, self._config())

        assert options.category == 'Art'
        assert options.unsave is True
        assert options.count == 7
        assert options.list_subscriptions is False
        assert options.unsave_partial is False

    def test_unsave_partial_from_config(self):
        args = cli.parse_args([])

        options = cli.build_options(args, self._config(unsave_partial=True))

        assert options.unsave_partial is True

    def test_unsave_partial_flag_wins(self):
        args = cli.parse_args(['--unsave-partial'])

        options = cli.build_options(args, self._config())

        assert options.unsave_partial is True


class TestLoadConfig:
    """Tests for load_config()."""

    def test_target_dir_override(self, config_file, tmp_path):
        args = cli.parse_args([
            '--config', str(config_file), '--target-dir', str(tmp_path / 'out')
        ])

        config = cli.load_config(args)

        assert config.target_dir == str(tmp_path / 'out')
        assert config.userid == 'test_userid'


class TestRun:
    """Tests for run()."""

    def test_usage_error_exit_code(self, capsys):
        assert cli.run(['--unsave']) == cli.EXIT_USAGE
        assert '--unsave requires --category' in capsys.readouterr().err

    def test_missing_config_file(self, tmp_path):
        assert cli.run(['--config', str(tmp_path / 'missing')]) == cli.EXIT_FAILURE

    def test_missing_token(self, tmp_path):
        path = tmp_path / 'fdown.conf'
        path.write_text('userid = u\n', encoding='utf-8')

        assert cli.run(['--config', str(path)]) == cli.EXIT_FAILURE

    def test_dropbox_without_token(self, config_file):
        assert cli.run(['--config', str(config_file), '--dropbox']) == cli.EXIT_FAILURE

    def test_list_subscriptions(self, config_file, transport, recorded_container, capsys):
        transport.add_response(SUBSCRIPTIONS_RESPONSE)

        status = cli.run(['--config', str(config_file), '--subs'])

        assert status == cli.EXIT_OK
        assert 'Art: Daily Art' in capsys.readouterr().out

    def test_archive_run(self, config_file, target_dir, transport, recorded_container):
        transport.add_response('{"ids":["id1"]}')
        transport.add_response(json.dumps([entry('id1', url=TUMBLR_URL)]))
        transport.add_response(b'jpeg')

        status = cli.run(['--config', str(config_file)])

        assert status == cli.EXIT_OK
        assert (target_dir / 'tumblr_p1q2r3_1280.jpg').read_bytes() == b'jpeg'

    def test_entry_failure_exit_code(self, config_file, transport, recorded_container):
        transport.add_response('{"ids":["id2"]}')
        transport.add_response(json.dumps([entry('id2')]))

        assert cli.run(['--config', str(config_file)]) == cli.EXIT_FAILURE

    def test_closes_image_store(self, config_file, transport, recorded_container):
        store = MagicMock()
        build = recorded_container.side_effect

        def factory(app_config, use_dropbox=False):
            container = build(app_config, use_dropbox)
            container.image_store.override(providers.Object(store))
            return container

        recorded_container.side_effect = factory
        transport.add_response('{"ids":[]}')
        transport.add_response('[]')

        assert cli.run(['--config', str(config_file)]) == cli.EXIT_OK
        store.close.assert_called_once_with()
