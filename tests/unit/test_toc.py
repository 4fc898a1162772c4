"""Unit tests for the TOC reader and the sidebar walker."""

import pytest

from wikigen.toc.reader import TocEntry, read_toc
from wikigen.toc.sidebar import SIDEBAR_FILE, generate_topics, sidebar_line

TOC = """<?xml version="1.0" encoding="utf-8"?>
<topics>
  <topic id="1" file="Intro">
    <topic file="Child">
      <topic file="Grandchild" />
    </topic>
  </topic>
  <topic file="" />
  <topic file="Other" />
</topics>
"""


@pytest.fixture
def toc_file(tmp_path):
    path = tmp_path / "toc.xml"
    path.write_text(TOC, encoding="utf-8")
    return path


def test_read_toc_orders_and_nests(toc_file):
    assert list(read_toc(toc_file)) == [
        TocEntry("Intro", 1),
        TocEntry("Child", 2),
        TocEntry("Grandchild", 3),
        TocEntry("Other", 1),
    ]


def test_read_toc_missing_file_raises(tmp_path):
    with pytest.raises(OSError):
        list(read_toc(tmp_path / "nope.xml"))


class TestSidebarLine:
    def test_top_level(self):
        assert sidebar_line(TocEntry("Intro", 1), "Introduction") == "- [Introduction](Intro)\n"

    def test_indent_per_level(self):
        line = sidebar_line(TocEntry("Deep", 3), "Deep Topic", append_extension=True)
        assert line == "    - [Deep Topic](Deep.md)\n"


def _write_topics(folder):
    (folder / "Intro.md").write_text(
        '<document># Introduction\n<span id="PageHeader"/>Welcome</document>', encoding="utf-8"
    )
    (folder / "Child.md").write_text("## Child Page\n\nPlain text.\n", encoding="utf-8")
    (folder / "Grandchild.md").write_text("<p>never closed", encoding="utf-8")
    (folder / "Other.md").write_text("<document><p>no heading</p></document>", encoding="utf-8")


def test_generate_topics_writes_sidebar_and_topics(tmp_path, toc_file):
    working = tmp_path / "work"
    working.mkdir()
    _write_topics(working)

    count = generate_topics(working, toc_file, append_extension=False)

    sidebar = (working / SIDEBAR_FILE).read_text(encoding="utf-8")
    assert sidebar == (
        "- [Introduction](Intro)\n"
        "  - [Child Page](Child)\n"
        "- [Other](Other)\n"
    )
    # The unparseable topic is neither counted nor rewritten
    assert count == 3 == len(sidebar.splitlines())
    assert (working / "Grandchild.md").read_text(encoding="utf-8") == "<p>never closed"
    assert (working / "Intro.md").read_text(encoding="utf-8") == "# Introduction\nWelcome"


def test_generate_topics_logs_progress(tmp_path, toc_file, caplog):
    working = tmp_path / "work"
    working.mkdir()
    _write_topics(working)

    with caplog.at_level("INFO"):
        generate_topics(working, toc_file, progress_interval=2)

    messages = [r.getMessage() for r in caplog.records]
    assert "2 topics generated" in messages
    assert "Finished generating 3 topics" in messages
