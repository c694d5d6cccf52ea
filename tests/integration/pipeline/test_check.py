"""Integration tests for the batch check driver (core/pipeline.py)

The posts_dir fixture holds three posts plus a non-post file:

    a-good.md       complete post          -> ok, no warnings
    b-bad.md        header without title   -> MissingRequiredField
    c-unclosed.md   unterminated highlight -> parses, warns
    notes.txt       ignored
"""

import logging

from postmatter.config import Settings
from postmatter.core.errors import MissingRequiredField, UnreadableDocument
from postmatter.core.models import WarningCode
from postmatter.core.pipeline import check_file, run_check


def test_run_check_covers_every_post(posts_dir):
    """run_check returns one result per post file, in path order."""
    results = run_check(posts_dir, Settings())
    assert [r.path.name for r in results] == ["a-good.md", "b-bad.md", "c-unclosed.md"]


def test_run_check_failure_does_not_stop_batch(posts_dir):
    """A post that fails to parse is recorded while later posts are still checked."""
    good, bad, unclosed = run_check(posts_dir, Settings())

    assert good.ok and good.error is None and good.warnings == []
    assert good.document.title == "Creational Design Patterns"

    assert not bad.ok
    assert isinstance(bad.error, MissingRequiredField)
    assert bad.error.path == str(bad.path)
    assert bad.document is None

    assert unclosed.document is not None
    assert WarningCode.unclosed_fence in [w.code for w in unclosed.warnings]


def test_run_check_strict_fails_on_warnings(posts_dir):
    results = run_check(posts_dir, Settings(strict=True))
    assert [r.ok for r in results] == [True, False, False]


def test_run_check_single_file(post_file):
    results = run_check(str(post_file), Settings())
    assert len(results) == 1
    assert results[0].ok


def test_run_check_empty_dir(tmp_path):
    assert run_check(tmp_path, Settings()) == []


def test_check_file_logs_parse_failure(posts_dir, caplog):
    """Parse failures are logged at WARNING with the file path."""
    caplog.set_level(logging.WARNING, logger="postmatter.core.pipeline")
    check_file(posts_dir / "b-bad.md", Settings())
    assert "Failed to parse" in caplog.text
    assert "b-bad.md" in caplog.text


def test_run_check_undecodable_post_does_not_stop_batch(posts_dir):
    """A post that is not UTF-8 fails on its own; the other posts are still checked."""
    (posts_dir / "d-latin1.md").write_bytes("---\nlayout: post\ntitle: caf\xe9\n---\nBody\n".encode("latin-1"))
    results = run_check(posts_dir, Settings())

    assert [r.path.name for r in results] == ["a-good.md", "b-bad.md", "c-unclosed.md", "d-latin1.md"]
    assert [r.ok for r in results] == [True, False, True, False]
    latin1 = results[-1]
    assert isinstance(latin1.error, UnreadableDocument)
    assert latin1.error.path == str(latin1.path)
    assert latin1.error.line == 3
