# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at https://mozilla.org/MPL/2.0/.

"""Pytest fixtures for the xmpwriter test suite."""

from io import BytesIO
from pathlib import Path

import pikepdf
import pytest
from lxml import etree
from pikepdf import Array, Dictionary, Name, Pdf

from xmpwriter.writer import XMP_HEADER, XMP_TRAILER, XmpWriter

NS_RDF = "http://www.w3.org/1999/02/22-rdf-syntax-ns#"
NS_X = "adobe:ns:meta/"

# -- Global PDF tracker --

_tracked_pdfs: list[Pdf] = []


@pytest.fixture(autouse=True)
def _auto_close_pdfs():
    """Close all tracked PDF objects after each test."""
    yield
    for pdf in reversed(_tracked_pdfs):
        pdf.close()
    _tracked_pdfs.clear()


def new_pdf(**kwargs) -> Pdf:
    """Create a tracked Pdf (auto-closed after test)."""
    pdf = Pdf.new(**kwargs)
    _tracked_pdfs.append(pdf)
    return pdf


def open_pdf(source, **kwargs) -> Pdf:
    """Open a tracked Pdf (auto-closed after test)."""
    pdf = Pdf.open(source, **kwargs)
    _tracked_pdfs.append(pdf)
    return pdf


# -- Helpers --


def body(packet: bytes) -> str:
    """Return the serialized properties inside ``rdf:Description``."""
    text = packet.decode("utf-8")
    start = text.index("<rdf:Description")
    start = text.index(">", start) + 1
    end = text.rindex("</rdf:Description>")
    return text[start:end]


def parse_packet(packet: bytes) -> etree._Element:
    """Parse a packet with lxml, failing the test if it is not well-formed.

    Returns:
        The ``rdf:Description`` element.
    """
    assert packet.startswith(XMP_HEADER)
    assert packet.endswith(XMP_TRAILER)
    root = etree.fromstring(packet)
    assert root.tag == f"{{{NS_X}}}xmpmeta"
    description = root.find(f"{{{NS_RDF}}}RDF/{{{NS_RDF}}}Description")
    assert description is not None
    return description


# -- Fixtures --


@pytest.fixture
def writer() -> XmpWriter:
    """Fresh XMP writer."""
    return XmpWriter()


@pytest.fixture
def tmp_dir(tmp_path: Path) -> Path:
    """Temporary directory for tests.

    Args:
        tmp_path: Pytest-provided temporary directory.

    Returns:
        Path to the temporary directory.
    """
    return tmp_path


@pytest.fixture
def sample_pdf_bytes() -> bytes:
    """Minimal valid PDF as bytes.

    Returns:
        PDF data as bytes.
    """
    pdf = new_pdf()
    page = pikepdf.Page(Dictionary(Type=Name.Page, MediaBox=Array([0, 0, 612, 792])))
    pdf.pages.append(page)

    buffer = BytesIO()
    pdf.save(buffer)
    return buffer.getvalue()


@pytest.fixture
def sample_pdf(tmp_dir: Path, sample_pdf_bytes: bytes) -> Path:
    """Minimal valid PDF on disk.

    Args:
        tmp_dir: Temporary directory.
        sample_pdf_bytes: PDF data.

    Returns:
        Path to the PDF file.
    """
    pdf_path = tmp_dir / "sample.pdf"
    pdf_path.write_bytes(sample_pdf_bytes)
    return pdf_path
