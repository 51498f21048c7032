import pytest
# Make the single-file tool importable without installing it
from pathlib import Path
import sys
sys.path.append(str(Path(__file__).resolve().parent.parent / "degrunge"))

SVG_OPEN = '<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 1024 1024">'
SVG_CLOSE = '</svg>'


def make_segment(length, fill="#EFECE1", step="L5 7", extra=""):
    """Build the text following a `<path` with exactly `length` characters."""
    head = f' fill="{fill}"{extra} d="M0 0'
    tail = '"/>'
    body_len = length - len(head) - len(tail)
    assert body_len >= 0, "segment too short for its attributes"
    body = (step * (body_len // len(step) + 1))[:body_len]
    return head + body + tail


def make_svg(*segments):
    return SVG_OPEN + ''.join('<path' + s for s in segments) + SVG_CLOSE


@pytest.fixture
def workdir(tmp_path, monkeypatch):
    """Run in an empty directory, as the tool reads and writes relative to cwd."""
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def texture_svg():
    """A logo with a huge #EFECE1 texture path followed by two small icon paths."""
    return make_svg(
        make_segment(5000),
        make_segment(300, fill="#1A2B3C", step="C1 2 3 4 5 6"),
        make_segment(400, fill="#EFECE1", step="Q9 9 8 8"),
    )


@pytest.fixture
def plain_svg():
    """A logo without any #EFECE1 path."""
    return make_svg(
        make_segment(3000, fill="#000000"),
        make_segment(200, fill="#FFFFFF"),
    )
