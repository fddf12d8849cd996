# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at https://mozilla.org/MPL/2.0/.

"""Handing finished XMP packets to a PDF document or a sidecar file."""

import logging
from pathlib import Path

import pikepdf

from .exceptions import EmbeddingError

logger = logging.getLogger(__name__)

SIDECAR_SUFFIX = ".xmp"


def embed_xmp_metadata(pdf: pikepdf.Pdf, xmp: bytes) -> None:
    """
    Embed XMP metadata into PDF document.

    Replaces any existing ``/Metadata`` stream of the document catalog.

    Args:
        pdf: pikepdf Pdf object to modify.
        xmp: XMP packet bytes.

    Raises:
        EmbeddingError: If embedding fails.
    """
    try:
        metadata_stream = pikepdf.Stream(pdf, xmp)
        metadata_stream.Type = pikepdf.Name.Metadata
        metadata_stream.Subtype = pikepdf.Name.XML
        # PDF/A requires XMP metadata stream to be uncompressed
        if pikepdf.Name.Filter in metadata_stream:
            del metadata_stream[pikepdf.Name.Filter]

        pdf.Root.Metadata = pdf.make_indirect(metadata_stream)

        logger.debug("XMP metadata embedded in PDF (%d bytes)", len(xmp))
    except Exception as e:
        raise EmbeddingError(f"Error embedding XMP metadata: {e}") from e


def embed_into_file(input_path: Path, xmp: bytes, output_path: Path) -> Path:
    """Embed an XMP packet into a PDF file and save the result.

    Args:
        input_path: PDF to read.
        xmp: XMP packet bytes.
        output_path: Where to save. May equal ``input_path`` to update the
            file in place.

    Returns:
        The path that was written.

    Raises:
        FileNotFoundError: If ``input_path`` does not exist.
        EmbeddingError: If the PDF cannot be opened, modified or saved.
    """
    if not input_path.exists():
        raise FileNotFoundError(f"File not found: {input_path}")

    in_place = input_path.resolve() == output_path.resolve()
    logger.debug("Opening PDF: %s", input_path)
    try:
        pdf = pikepdf.open(input_path, allow_overwriting_input=in_place)
    except pikepdf.PdfError as e:
        raise EmbeddingError(f"Cannot open PDF {input_path}: {e}") from e

    with pdf:
        embed_xmp_metadata(pdf, xmp)
        try:
            pdf.save(output_path)
        except (pikepdf.PdfError, OSError) as e:
            raise EmbeddingError(f"Cannot save PDF {output_path}: {e}") from e

    logger.info("XMP metadata written to %s", output_path)
    return output_path


def sidecar_path(path: Path) -> Path:
    """Append ``.xmp`` to a path that has no suffix."""
    if not path.suffix:
        return path.with_suffix(SIDECAR_SUFFIX)
    return path


def write_sidecar(path: Path, xmp: bytes) -> Path:
    """Write an XMP packet to a sidecar file.

    A path without a suffix gets ``.xmp`` appended.

    Args:
        path: Target file.
        xmp: XMP packet bytes.

    Returns:
        The path that was written.
    """
    path = sidecar_path(path)
    path.write_bytes(xmp)
    logger.info("XMP sidecar written to %s", path)
    return path
