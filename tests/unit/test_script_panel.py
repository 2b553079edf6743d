"""Tests for the static script panel and its copied indicator."""

from pathlib import Path

from app.script_panel.panel import (
    COPY_INDICATOR_SECONDS,
    CopyIndicator,
    ScriptPanel,
    load_script_text,
)


class FakeClock:
    def __init__(self) -> None:
        self.now = 100.0

    def __call__(self) -> float:
        return self.now


class TestLoadScriptText:
    def test_loads_bundled_script(self) -> None:
        text = load_script_text()
        assert text.startswith("import asyncio")
        assert 'OUTPUT_FILE = "procore_contractors_detailed.csv"' in text
        assert text.endswith("asyncio.run(scrape_procore_deep())")

    def test_keeps_escaped_newline_literal(self) -> None:
        assert ".replace('\\n', ', ')" in load_script_text()

    def test_loads_custom_file(self, tmp_path: Path) -> None:
        script = tmp_path / "script.txt"
        script.write_text("\nprint('hi')\n\n")
        assert load_script_text(script) == "print('hi')"


class TestCopyIndicator:
    def test_default_delay(self) -> None:
        assert COPY_INDICATOR_SECONDS == 2.0
        assert CopyIndicator().delay_seconds == 2.0

    def test_inactive_before_trigger(self) -> None:
        assert CopyIndicator(clock=FakeClock()).is_active() is False

    def test_active_until_delay_elapses(self) -> None:
        clock = FakeClock()
        indicator = CopyIndicator(delay_seconds=2.0, clock=clock)

        indicator.trigger()
        clock.now += 1.99
        assert indicator.is_active() is True

        clock.now += 0.01
        assert indicator.is_active() is False

    def test_each_trigger_restarts_delay(self) -> None:
        clock = FakeClock()
        indicator = CopyIndicator(delay_seconds=2.0, clock=clock)

        indicator.trigger()
        clock.now += 1.5
        indicator.trigger()
        clock.now += 1.5
        assert indicator.is_active() is True

        clock.now += 0.5
        assert indicator.is_active() is False

    def test_reverts_regardless_of_trigger_count(self) -> None:
        clock = FakeClock()
        indicator = CopyIndicator(delay_seconds=2.0, clock=clock)
        for _ in range(5):
            indicator.trigger()
            clock.now += 0.1

        clock.now += 2.0

        assert indicator.is_active() is False


class TestScriptPanel:
    def test_copy_returns_exact_text(self) -> None:
        panel = ScriptPanel("  opaque {text}\n")
        assert panel.copy() == "  opaque {text}\n"

    def test_copy_arms_indicator(self) -> None:
        clock = FakeClock()
        panel = ScriptPanel("text", CopyIndicator(clock=clock))

        panel.copy()

        assert panel.indicator.is_active() is True
        clock.now += 2.0
        assert panel.indicator.is_active() is False

    def test_script_text_is_read_only_view(self) -> None:
        panel = ScriptPanel("text")
        assert panel.script_text == "text"
        assert panel.indicator.is_active() is False
