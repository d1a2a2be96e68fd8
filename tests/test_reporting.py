import io
import json
import logging

import pytest
from rich.console import Console

from respack.api import BuildOptions, build_pack
from respack.logging import configure_logging, get_logger, step
from respack.logging import section as log_section
from respack.model import PackFormat, PackMeta, ResourcePack
from respack.reporting import (
    JsonLinesReporter,
    PlainReporter,
    RichReporter,
    SilentReporter,
    TaskStatus,
    section,
    make_reporter,
    set_reporter,
    set_verbosity,
    task,
)


@pytest.fixture
def reporter_logging():
    configure_logging(0)
    yield
    logger = get_logger()
    for h in list(logger.handlers):
        logger.removeHandler(h)
    logger.propagate = True
    logger.setLevel(logging.NOTSET)


def _pack() -> ResourcePack:
    return ResourcePack(meta=PackMeta(PackFormat.of(15), "x"))


class TestPlainReporter:
    def test_status_and_task(self):
        buf = io.StringIO()
        rep = PlainReporter(buf, use_color=False)
        rep.status("hello")
        rep.start_task("t", "Textures", total=2)
        rep.advance("t")
        rep.advance("t")
        rep.end_task("t", entries=2)
        lines = buf.getvalue().splitlines()
        assert lines[0] == "INFO: hello"
        assert lines[1].startswith(" ✔ Textures 2/2 (")
        assert lines[1].endswith("[entries=2]")

    def test_advance_lines_need_verbosity(self):
        buf = io.StringIO()
        rep = PlainReporter(buf, use_color=False)
        rep.start_task("t", "Models", total=1)
        rep.advance("t", current_item="custom:/a")
        assert buf.getvalue() == ""
        set_verbosity(1)
        rep.advance("t", current_item="custom:/b")
        assert "custom:/b" in buf.getvalue()

    def test_failed_task(self):
        buf = io.StringIO()
        set_reporter(PlainReporter(buf, use_color=False))
        with pytest.raises(RuntimeError):
            with task("t", "Fonts"):
                raise RuntimeError("x")
        assert buf.getvalue().startswith(" ✖ Fonts")


def test_jsonl_build_summary(tmp_path):
    buf = io.StringIO()
    set_reporter(JsonLinesReporter(buf))
    build_pack(_pack(), BuildOptions(output_path=tmp_path / "pack.zip"))
    events = [json.loads(line) for line in buf.getvalue().splitlines()]
    ends = [e for e in events if e["event"] == "task_end"]
    assert ends[0]["id"] == "write.meta"
    assert ends[0]["status"] == "success"
    summary = [e for e in events if e["event"] == "summary"]
    assert summary[-1]["summary_type"] == "build"
    assert summary[-1]["entries"] == "1"


def test_rich_reporter_renders_to_console():
    buf = io.StringIO()
    rep = RichReporter(Console(file=buf, width=100, force_terminal=False))
    rep.status("built [entries=1]")
    rep.start_task("t", "Textures", total=1)
    rep.advance("t")
    rep.end_task("t", entries=1)
    text = buf.getvalue()
    assert "INFO: built [entries=1]" in text
    assert "✔ Textures 1/1" in text
    assert "[entries=1]" in text


def test_silent_reporter_accepts_everything():
    rep = SilentReporter()
    rep.status("x")
    rep.warning("x")
    rep.error("x")
    rep.section("x")
    rep.start_task("t", "T", total=1)
    rep.advance("t")
    rep.end_task("t", TaskStatus.SKIPPED)


def test_make_reporter():
    assert isinstance(make_reporter("json"), JsonLinesReporter)
    assert isinstance(make_reporter("silent"), SilentReporter)
    assert isinstance(make_reporter("plain"), PlainReporter)
    with pytest.raises(ValueError):
        make_reporter("xml")


def test_log_records_reach_reporter(reporter_logging):
    buf = io.StringIO()
    set_reporter(PlainReporter(buf, use_color=False))
    get_logger().warning("careful: %s", "x")
    get_logger().info("note")
    step("writing")
    assert buf.getvalue().splitlines() == [
        "WARN: careful: x",
        "INFO: note",
        "INFO:   -> writing",
    ]


def test_section_helpers():
    buf = io.StringIO()
    set_reporter(PlainReporter(buf, use_color=False))
    with section("Textures"):
        pass
    with log_section("Models") as logger:
        assert logger is get_logger()
    assert buf.getvalue() == "\n[Textures]\n\n[Models]\n"
