"""Integration test -- full wiki build over a temporary presentation-style layout."""

import sys

import pytest

from wikigen.build import build_wiki

API_TOPIC = """<document><file>T_Demo</file>
# Demo Class
<span id="PageHeader" /><span id="@pageHeader_intro" />
Represents a <span class="code">demo</span> type for <span class="languageSpecificText"><span class="cs">C#</span><span class="nu">neutral</span></span> callers<p>See <a href="#remarks">Remarks</a> or <a href="#intro">the top</a> or <a href="#missing">nothing</a>.</p>
## Remarks
<span id="remarks" />
Use it&#160;
## Example
</document>"""

TOC = """<?xml version="1.0" encoding="utf-8"?>
<topics>
  <topic file="T_Demo">
    <topic file="UserTopic" />
    <topic file="Broken" />
  </topic>
  <topic file="Untitled" />
</topics>
"""


@pytest.fixture
def layout(tmp_path):
    """Topics in <root>/Output/Markdown/Working with toc.xml two levels up."""
    working = tmp_path / "Output" / "Markdown" / "Working"
    (working / "media").mkdir(parents=True)
    (working / ".git").mkdir()
    (tmp_path / "Output" / "toc.xml").write_text(TOC, encoding="utf-8")

    (working / "T_Demo.md").write_text(API_TOPIC, encoding="utf-8")
    (working / "UserTopic.md").write_text(
        "# User Guide\n\nPlain *markdown* text.\n", encoding="utf-8"
    )
    (working / "Broken.md").write_text("<p>oops", encoding="utf-8")
    (working / "Untitled.md").write_text(
        "<document><p>No heading here</p></document>", encoding="utf-8"
    )
    (working / "media" / "img.png").write_bytes(b"\x89PNG")
    (working / ".git" / "HEAD").write_text("ref", encoding="utf-8")
    return working, tmp_path / "wiki"


@pytest.mark.integration
def test_full_build(layout):
    working, output = layout

    result = build_wiki(working, output, default_topic="T_Demo", append_md_extension=True)

    assert result.topic_count == 3
    assert result.home_topic == working / "Home.md"

    sidebar = (output / "_Sidebar.md").read_text(encoding="utf-8")
    assert sidebar == (
        "- [Demo Class](T_Demo.md)\n"
        "  - [User Guide](UserTopic.md)\n"
        "- [Untitled](Untitled.md)\n"
    )

    demo = (output / "T_Demo.md").read_text(encoding="utf-8")
    assert demo.startswith("# Demo Class\n")
    assert "T_Demo</file>" not in demo
    assert "<span" not in demo
    assert "C#" not in demo
    assert "type for neutral callers\n\n<p>" in demo
    assert '<a href="#remarks">Remarks</a>' in demo
    assert '<a href="#demo-class">the top</a>' in demo
    assert '<a href="#">nothing</a>' in demo
    assert demo.endswith("Use it\n\n## Example\n")

    assert (output / "Home.md").read_text(encoding="utf-8") == demo
    assert (output / "Broken.md").read_text(encoding="utf-8") == "<p>oops"
    assert (output / "media" / "img.png").exists()
    assert not (output / ".git").exists()
    # Four topics, the sidebar, Home.md and the image
    assert result.file_count == 7


@pytest.mark.integration
def test_cli_reports_missing_toc(tmp_path, monkeypatch):
    import main

    working = tmp_path / "Working"
    working.mkdir()
    monkeypatch.setattr(
        sys, "argv",
        ["wikigen", "--working-folder", str(working), "--output-folder", str(tmp_path / "out"),
         "--toc", str(tmp_path / "missing.xml")],
    )

    with pytest.raises(SystemExit) as exc:
        main.main()
    assert exc.value.code == 1


@pytest.mark.integration
def test_cli_requires_folders(monkeypatch):
    import main

    monkeypatch.setattr(sys, "argv", ["wikigen", "--working-folder", "", "--output-folder", ""])
    with pytest.raises(SystemExit) as exc:
        main.main()
    assert exc.value.code == 1
