import logging

from ProfileBridge.log_utils import ColoredFormatter, Logger, LogCategory, LogSource


def _record(msg: str, **extra) -> logging.LogRecord:
    record = logging.LogRecord("ProfileBridge", logging.INFO, __file__, 1, msg, None, None)
    for key, value in extra.items():
        setattr(record, key, value)
    return record

# ===== FORMATTER =====

def test_formatter_plain_tags():
    """
    Test that source and category tags prefix the message without color codes.
    """
    formatter = ColoredFormatter("%(levelname)s %(message)s", use_color=False)
    line = formatter.format(_record("Fetched", source=LogSource.ORCID, category=LogCategory.FETCH))

    assert line == "INFO [ORCID] [FETCH] Fetched"

def test_formatter_color_restores_record():
    """
    Test that colored formatting does not leak into the record itself.
    """
    formatter = ColoredFormatter("%(levelname)s %(message)s", use_color=True)
    record = _record("Fetched", source=LogSource.ORCID)
    line = formatter.format(record)

    assert "\033[" in line
    assert record.msg == "Fetched"
    assert record.levelname == "INFO"

def _constants(cls) -> set:
    return {value for key, value in vars(cls).items() if key.isupper()}

def test_tag_vocabulary_has_colors():
    """
    Test that every source and category tag has a color and the vocabulary holds only tags in use.
    """
    assert _constants(LogSource) == set(ColoredFormatter.SOURCE_COLORS) == {"ORCID"}
    assert _constants(LogCategory) == set(ColoredFormatter.CATEGORY_COLORS)
    assert _constants(LogCategory) == {"PROFILE", "WORK", "FUNDING", "FETCH", "SAVE", "ERROR"}
    assert not hasattr(Logger, "warn")

# ===== FILE MIRROR =====

def test_log_file_mirror(tmp_path):
    """
    Test that messages are mirrored into the log file until close().
    """
    log = Logger(name="ProfileBridge.test")
    path = tmp_path / "logs" / "run.log"

    log.set_log_file(str(path))
    assert log.log_file_path == str(path)
    log.step("Fetching researcher", source=LogSource.ORCID, category=LogCategory.PROFILE)
    log.success("Done", source=LogSource.ORCID)
    log.debug("details")
    log.close()
    log.info("after close")

    content = path.read_text(encoding="utf-8")
    assert "[STEP    ] [ORCID] [PROFILE] Fetching researcher" in content
    assert "SUCCESS" in content and "Done" in content
    assert "details" in content
    assert "after close" not in content
    assert log.log_file_path is None
