"""Tests for the command line interface."""

import logging

from typer.testing import CliRunner

from dumpswitch import __version__
from dumpswitch.cli import app, migrated_path, setup_logging

runner = CliRunner()

NEW = 'https://new.example.org'


def test_migrated_path(tmp_path):
    assert migrated_path(tmp_path / 'dump.sql') == tmp_path / 'dump-migrated.sql'


def test_setup_logging_debug():
    setup_logging(debug=True)
    root = logging.getLogger()
    assert root.level == logging.DEBUG
    assert len(root.handlers) == 1


def test_version():
    result = runner.invoke(app, ['--version'])
    assert result.exit_code == 0
    assert __version__ in result.output


def test_migrate_guesses_old_url(dump_file):
    result = runner.invoke(app, ['migrate', str(dump_file), NEW])

    assert result.exit_code == 0, result.output
    assert 'SUCCESS!' in result.output
    assert 'Old URL: http://old.example.com' in result.output
    assert 'Serialized count: 1' in result.output
    assert 'Replaced count: 1' in result.output

    migrated = (dump_file.parent / 'db-migrated.sql').read_text(encoding='utf-8')
    assert 'old.example.com' not in migrated
    assert r's:36:\"https://new.example.org/img/logo.png\";' in migrated


def test_migrate_with_old_url_and_output(dump_file, tmp_path):
    output = tmp_path / 'live.sql'
    result = runner.invoke(app, [
        'migrate', str(dump_file), NEW,
        '--old-url', 'http://old.example.com/img',
        '--output', str(output),
    ])

    assert result.exit_code == 0, result.output
    assert 'Old URL: http://old.example.com/img' in result.output
    assert r's:32:\"https://new.example.org/logo.png\";' in output.read_text(encoding='utf-8')
    assert not (tmp_path / 'db-migrated.sql').exists()


def test_migrate_chars_length_unit(tmp_path):
    dump = tmp_path / 'db.sql'
    dump.write_text('s:27:"http://old.example.com/é";', encoding='utf-8')

    result = runner.invoke(app, [
        'migrate', str(dump), NEW, '--old-url', 'http://old.example.com', '--length-unit', 'chars',
    ])

    assert result.exit_code == 0, result.output
    assert (tmp_path / 'db-migrated.sql').read_text(encoding='utf-8') == 's:25:"https://new.example.org/é";'


def test_migrate_invalid_url(dump_file):
    result = runner.invoke(app, ['migrate', str(dump_file), 'not a url'])

    assert result.exit_code == 1
    assert 'ERROR: <NEW_URL> is invalid: not a url' in result.output
    assert 'Usage:' in result.output
    assert not (dump_file.parent / 'db-migrated.sql').exists()


def test_migrate_missing_file(tmp_path):
    result = runner.invoke(app, ['migrate', str(tmp_path / 'nope.sql'), NEW])

    assert result.exit_code == 1
    assert 'ERROR:' in result.output


def test_migrate_without_siteurl(tmp_path):
    dump = tmp_path / 'db.sql'
    dump.write_text("INSERT INTO `wp_posts` VALUES (1,'hello');\n", encoding='utf-8')

    result = runner.invoke(app, ['migrate', str(dump), NEW])

    assert result.exit_code == 1
    assert "Couldn't find the old URL" in result.output


def test_migrate_unknown_length_unit(dump_file):
    result = runner.invoke(app, ['migrate', str(dump_file), NEW, '--length-unit', 'words'])

    assert result.exit_code == 1
    assert 'Unknown length unit' in result.output


def test_guess(dump_file):
    result = runner.invoke(app, ['guess', str(dump_file)])
    assert result.exit_code == 0
    assert result.output.strip() == 'http://old.example.com'


def test_guess_nothing_found(tmp_path):
    dump = tmp_path / 'db.sql'
    dump.write_text('nothing here', encoding='utf-8')

    result = runner.invoke(app, ['guess', str(dump)])

    assert result.exit_code == 1
    assert 'No siteurl found' in result.output


def test_sites(dump_file, tmp_path):
    config = tmp_path / 'sites.ini'
    config.write_text(
        "[blog]\n"
        "old_domain = http://old.example.com\n"
        "new_domain = https://new.example.org\n"
        "database_file = db.sql\n"
        "\n"
        "[staging]\n"
        "old_domain = staging.example.com\n"
        "new_domain = staging.example.com\n"
        "database_file = db.sql\n",
        encoding='utf-8',
    )

    result = runner.invoke(app, ['sites', str(config)])

    assert result.exit_code == 0, result.output
    assert 'blog: 1 serialized, 1 replaced' in result.output
    assert 'staging: skipped' in result.output
    assert (tmp_path / 'db.sql_modified.sql').exists()


def test_sites_bad_config(tmp_path):
    result = runner.invoke(app, ['sites', str(tmp_path / 'missing.ini')])

    assert result.exit_code == 1
    assert "ERROR: Can't read sites config" in result.output
