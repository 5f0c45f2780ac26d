"""
conftest.py
-----------
Shared pytest fixtures for journal2md tests.

Provides fixtures for:
- Sample index and entry documents in the exporter's markup
- In-memory and on-disk export sources
- A loaded ExportSession
"""
import zipfile
from datetime import date
from pathlib import Path
from tempfile import TemporaryDirectory

import pytest

from journal2md.pipeline.resolver import MappingFileSource
from journal2md.pipeline.session import ExportSession


# ----- Path Fixtures -----

@pytest.fixture
def tmp_dir():
    """Create a temporary directory for test file operations."""
    with TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


# ----- Sample Markup Fixtures -----

INDEX_HTML = """<!DOCTYPE html>
<html>
<head><title>Journal</title></head>
<body>
<p class="p1"><span class="s1"><a href="#top">Journal</a></span></p>
<p class="p1"><span class="s1"><a href="Entries/4. Feb 2026.html">4. Feb 2026 — My Day</a></span></p>
<p class="p1"><span class="s1"><a href="Entries/15. Dec 2025.html">15. Dec 2025</a></span></p>
<p class="p1"><span class="s1"><a href="Entries/2. Jan 2026.html">2. Jan 2026 — New Year: Plans</a></span></p>
<p class="p1"><span class="s1"><a href="about.html">About this export</a></span></p>
</body>
</html>
"""

MARKED_ENTRY_HTML = """<!DOCTYPE html>
<html>
<head><style>p { margin: 0 }</style></head>
<body>
<p class="p1"><span class="s1">Wrapper text that is not part of the entry</span></p>
<div class="pageContainer">
  <div class="pageHeader">Wednesday</div>
  <div class="title">My Day</div>
  <div class="assetGrid"><img src="photo.jpg"></div>
</div>
<p class="p2">First paragraph with <b>bold</b> text.</p>
<p class="p3"> </p>
<p class="p2">Second paragraph.</p>
</body>
</html>
"""

# Header and assets nested inside the first paragraph, as the exporter writes them
NESTED_ENTRY_HTML = """<!DOCTYPE html>
<html>
<head><meta charset="utf-8"></head>
<body>
<p class="p1"><span class="s1"><div class='pageContainer'>
  <div class='pageHeader'>Saturday</div>
  <div class='title'>Quiet Weekend</div>
  <div class='assetGrid'><img src="IMG_0001.jpg"></div>
</div></span></p>
<p class="p2">Text 1</p>
<p class="p2">Text 2</p>
</body>
</html>
"""

UNMARKED_ENTRY_HTML = """<!DOCTYPE html>
<html>
<head><title>Entry</title></head>
<body>
<div class="pageContainer">
  <div class="pageHeader">Header noise</div>
  <div class="title">Title noise</div>
  <div class="assetGrid">Asset noise</div>
  <div class="reflectionPrompt">What made you smile today?</div>
  <div class="photoBanner">Banner noise</div>
  <div class="bodyText"><h2>Morning</h2><p>Walked to the lake.</p></div>
  <script>var tracking = "script noise";</script>
</div>
</body>
</html>
"""


@pytest.fixture
def index_html():
    return INDEX_HTML


@pytest.fixture
def marked_entry_html():
    return MARKED_ENTRY_HTML


@pytest.fixture
def nested_entry_html():
    return NESTED_ENTRY_HTML


@pytest.fixture
def unmarked_entry_html():
    return UNMARKED_ENTRY_HTML


@pytest.fixture
def export_files():
    """Flat path -> content mapping with a root folder prefix on every path."""
    return {
        "Journal/index.html": INDEX_HTML,
        "Journal/Entries/4. Feb 2026.html": MARKED_ENTRY_HTML,
        "Journal/Entries/15. Dec 2025.html": UNMARKED_ENTRY_HTML,
        "Journal/Entries/2. Jan 2026.html": MARKED_ENTRY_HTML.replace(
            "First paragraph", "January paragraph"
        ),
        "Journal/Entries/photo.jpg": b"\xff\xd8\xff\xe0",
    }


@pytest.fixture
def mapping_source(export_files):
    return MappingFileSource(export_files)


@pytest.fixture
def session(mapping_source):
    return ExportSession.load(mapping_source)


@pytest.fixture
def export_dir(tmp_dir, export_files):
    """The sample export unpacked on disk under <tmp>/Journal."""
    for rel_path, content in export_files.items():
        path = tmp_dir / rel_path
        path.parent.mkdir(parents=True, exist_ok=True)
        if isinstance(content, bytes):
            path.write_bytes(content)
        else:
            path.write_text(content, encoding="utf-8")
    return tmp_dir / "Journal"


@pytest.fixture
def export_zip(tmp_dir, export_files):
    """The sample export as a .zip archive."""
    archive_path = tmp_dir / "Journal.zip"
    with zipfile.ZipFile(archive_path, "w") as archive:
        for rel_path, content in export_files.items():
            archive.writestr(rel_path, content)
    return archive_path


@pytest.fixture
def feb_4():
    return date(2026, 2, 4)
