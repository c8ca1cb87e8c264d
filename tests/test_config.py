"""Tests for ContextVar-based format configuration.

Validates thread isolation and context manager behavior.
"""

from threading import Thread

import pytest

from pipefmt import (
    FormatConfig,
    format_config_context,
    format_with_diagnostics,
    get_format_config,
    reset_format_config,
    set_format_config,
)

BROKEN = "|a|b|\n|---|---|\n|1|\n"


class TestFormatConfigDataclass:
    def test_default_values(self) -> None:
        config = FormatConfig()
        assert config.strict is False
        assert config.newline is None

    def test_immutability(self) -> None:
        config = FormatConfig()
        with pytest.raises(AttributeError):
            config.strict = True  # type: ignore[misc]

    def test_from_dict_ignores_unknown_keys(self) -> None:
        config = FormatConfig.from_dict({"strict": True, "unknown_key": 1})
        assert config == FormatConfig(strict=True)

    def test_from_dict_empty(self) -> None:
        assert FormatConfig.from_dict({}) == FormatConfig()


class TestContextVarFunctions:
    def teardown_method(self) -> None:
        reset_format_config()

    def test_default(self) -> None:
        assert get_format_config() == FormatConfig()

    def test_set_and_reset(self) -> None:
        set_format_config(FormatConfig(strict=True))
        assert get_format_config().strict is True

        reset_format_config()
        assert get_format_config().strict is False

    def test_context_manager_restores_previous(self) -> None:
        set_format_config(FormatConfig(newline="\n"))
        with format_config_context(FormatConfig(strict=True)):
            assert get_format_config() == FormatConfig(strict=True)
        assert get_format_config() == FormatConfig(newline="\n")

    def test_context_manager_restores_on_error(self) -> None:
        with pytest.raises(RuntimeError):
            with format_config_context(FormatConfig(strict=True)):
                raise RuntimeError("boom")
        assert get_format_config().strict is False


class TestThreadIsolation:
    def test_config_does_not_leak_between_threads(self) -> None:
        results: dict[str, int] = {}

        def strict_worker() -> None:
            with format_config_context(FormatConfig(strict=True)):
                results["strict"] = len(format_with_diagnostics(BROKEN).diagnostics)

        def default_worker() -> None:
            results["default"] = len(format_with_diagnostics(BROKEN).diagnostics)

        threads = [Thread(target=strict_worker), Thread(target=default_worker)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert results == {"strict": 1, "default": 0}
