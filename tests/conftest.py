"""Test configuration and fixtures."""

import io

import pytest

from rssreport.config.settings import Settings
from rssreport.models.xml_tree import XMLTree
from rssreport.output.stream import OutputStream


class RecordingStream(OutputStream):
    """OutputStream over an in-memory buffer that survives close."""

    def __init__(self, name: str = "memory"):
        self.buffer = io.StringIO()
        super().__init__(self.buffer, name)

    def close(self) -> None:
        self.close_calls = getattr(self, "close_calls", 0) + 1
        self._open = False

    @property
    def lines(self) -> list[str]:
        return self.buffer.getvalue().splitlines()


@pytest.fixture
def out():
    return RecordingStream()


@pytest.fixture
def tag():
    """Shorthand for XMLTree.tag."""
    return XMLTree.tag


@pytest.fixture
def test_settings(tmp_path):
    return Settings(output_dir=tmp_path / "output", _env_file=None)


@pytest.fixture
def sample_rss_content():
    """Sample RSS 2.0 document with three items of varying completeness."""
    return b"""<?xml version="1.0" encoding="UTF-8"?>
<rss version="2.0">
  <channel>
    <title>Tech News</title>
    <link>http://x.com</link>
    <description>Daily tech</description>
    <item>
      <title>Breaking</title>
      <link>http://x.com/breaking</link>
      <pubDate>Mon</pubDate>
      <source url="http://bbc.com">BBC</source>
    </item>
    <item>
      <title></title>
      <description>Only a description</description>
    </item>
    <item>
      <title> </title>
      <description></description>
      <link>http://x.com/blank</link>
    </item>
  </channel>
</rss>"""


@pytest.fixture
def rss_file(tmp_path, sample_rss_content):
    path = tmp_path / "feed.xml"
    path.write_bytes(sample_rss_content)
    return path


@pytest.fixture
def atom_file(tmp_path):
    path = tmp_path / "atom.xml"
    path.write_text(
        '<feed xmlns="http://www.w3.org/2005/Atom"><title>Atom</title></feed>',
        encoding="utf-8",
    )
    return path
