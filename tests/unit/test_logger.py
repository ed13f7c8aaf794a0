import io

from logger import Logger


def test_logger_filters_below_level() -> None:
    out = io.StringIO()
    log = Logger(level="WARN", stream=out, error_stream=out)

    log.debug("debug")
    log.info("info")
    log.warn("warn")
    log.error("error")

    assert out.getvalue().splitlines() == ["warn", "error"]


def test_logger_routes_errors_to_stderr(capsys) -> None:
    log = Logger()

    log.info("progress")
    log.error("broken")

    captured = capsys.readouterr()
    assert captured.out == "progress\n"
    assert captured.err == "broken\n"


def test_logger_unknown_level_defaults_to_info() -> None:
    log = Logger(level="chatty")
    assert log.level == "INFO"
    log.set_level("debug")
    assert log.level == "DEBUG"
