"""Unit tests for production implementations of the core protocols."""

import io
import logging
import sys

import pytest

from ui5_deployer.core import (
    VERBOSE,
    ConsoleLogger,
    RealFileSystemService,
    SystemEnvironmentProvider,
    SystemTimeProvider,
    YamlConfigLoader,
    configure_logging,
)
from ui5_deployer.utils.timing import format_elapsed


class TestConsoleLogger:
    """Test namespacing and levels."""

    def test_namespace(self):
        logger = ConsoleLogger("deployer:deployer")
        assert logger._logger.name == "ui5_deployer.deployer:deployer"

    def test_child_namespace(self):
        child = ConsoleLogger("deployer:deployer").get_child("type:abap")
        assert child._logger.name == "ui5_deployer.deployer:deployer.type:abap"

    def test_root_child(self):
        assert ConsoleLogger().get_child("x")._logger.name == "ui5_deployer.x"

    def test_verbose_level(self, caplog):
        caplog.set_level(logging.DEBUG, logger="ui5_deployer")

        ConsoleLogger("test").verbose("details")

        assert caplog.records[-1].levelno == VERBOSE
        assert caplog.records[-1].levelname == "VERBOSE"

    def test_levels(self, caplog):
        caplog.set_level(logging.DEBUG, logger="ui5_deployer")
        logger = ConsoleLogger("test")

        logger.debug("d")
        logger.info("i")
        logger.warning("w")
        logger.error("e")

        assert [r.levelno for r in caplog.records] == [
            logging.DEBUG, logging.INFO, logging.WARNING, logging.ERROR
        ]


class TestConfigureLogging:
    """Test handler setup."""

    @pytest.mark.parametrize("verbose,debug,level", [
        (False, False, logging.INFO),
        (True, False, VERBOSE),
        (False, True, logging.DEBUG),
    ])
    def test_levels(self, verbose, debug, level):
        configure_logging(verbose=verbose, debug=debug)
        assert logging.getLogger("ui5_deployer").level == level

    def test_single_handler(self):
        configure_logging()
        configure_logging(verbose=True)

        handlers = [h for h in logging.getLogger("ui5_deployer").handlers
                    if getattr(h, "_ui5_deployer", False)]
        assert len(handlers) == 1

    def test_reconfigure_after_stderr_closed(self, monkeypatch):
        first = io.StringIO()
        monkeypatch.setattr(sys, "stderr", first)
        configure_logging()
        first.close()

        second = io.StringIO()
        monkeypatch.setattr(sys, "stderr", second)
        configure_logging(verbose=True)
        configure_logging(debug=True)

        handlers = [h for h in logging.getLogger("ui5_deployer").handlers
                    if getattr(h, "_ui5_deployer", False)]
        assert len(handlers) == 1
        assert handlers[0].stream is second


class TestRealServices:
    """Test real filesystem, time and environment services."""

    def test_filesystem_roundtrip(self, tmp_path):
        fs = RealFileSystemService()
        target = tmp_path / "a" / "b" / "file.bin"

        fs.mkdir(target.parent)
        fs.write_bytes(target, b"\x00\x01")

        assert fs.exists(target)
        assert fs.is_file(target)
        assert fs.is_dir(target.parent)
        assert fs.read_bytes(target) == b"\x00\x01"
        assert fs.file_size(target) == 2
        assert fs.list_files(tmp_path) == [target]

    def test_time_is_monotonic(self):
        time = SystemTimeProvider()
        assert time.current_time() <= time.current_time()

    def test_environment(self, monkeypatch):
        monkeypatch.setenv("UI5_DEPLOYER_TEST", "value")
        env = SystemEnvironmentProvider()

        assert env.get("UI5_DEPLOYER_TEST") == "value"
        assert env.get_environ()["UI5_DEPLOYER_TEST"] == "value"
        assert env.get("UI5_DEPLOYER_MISSING", "fallback") == "fallback"

    def test_yaml_documents(self, tmp_path):
        path = tmp_path / "ui5.yaml"
        path.write_text("specVersion: '3.0'\nmetadata:\n  name: a\n---\nkind: extension\n---\n")

        loader = YamlConfigLoader(RealFileSystemService())

        assert loader.load_yaml_documents(str(path)) == [
            {"specVersion": "3.0", "metadata": {"name": "a"}},
            {"kind": "extension"},
        ]


class TestFormatElapsed:
    """Test elapsed time rendering."""

    @pytest.mark.parametrize("seconds,expected", [
        (0.000012, "12 μs"),
        (0.4567, "457 ms"),
        (1.234, "1.23 s"),
        (59.5, "59.50 s"),
        (125.0, "2 m 5 s"),
        (-1.0, "0 μs"),
    ])
    def test_format(self, seconds, expected):
        assert format_elapsed(seconds) == expected
