# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at https://mozilla.org/MPL/2.0/.

"""Click-based CLI for xmpwriter.

This module provides the command-line interface for writing an XMP
packet to stdout, to a sidecar file or into a PDF document.
"""

# Standard Library
import logging
import sys
from pathlib import Path

# Third Party
import click
from colorama import Fore, Style, init

# Local
from . import __version__
from .embed import embed_into_file, sidecar_path, write_sidecar
from .exceptions import EmbeddingError, XmpWriterError
from .utils import parse_pdfa_level, setup_logging
from .writer import DEFAULT_TOOLKIT, XmpWriter

EXIT_SUCCESS = 0
EXIT_GENERAL_ERROR = 1
EXIT_FILE_NOT_FOUND = 2
EXIT_INVALID_INPUT = 3
EXIT_EMBEDDING_FAILED = 4

logger = logging.getLogger(__name__)


def print_success(msg: str) -> None:
    """Prints a success message in green.

    Args:
        msg: The message to output.
    """
    click.echo(f"{Fore.GREEN}✓{Style.RESET_ALL} {msg}", err=True)


def print_error(msg: str) -> None:
    """Prints an error message in red.

    Args:
        msg: The error message to output.
    """
    click.echo(f"{Fore.RED}✗ Error:{Style.RESET_ALL} {msg}", err=True)


def build_packet(
    *,
    title: str | None = None,
    creators: tuple[str, ...] = (),
    description: str | None = None,
    subjects: tuple[str, ...] = (),
    keywords: str | None = None,
    producer: str | None = None,
    creator_tool: str | None = None,
    language: str | None = None,
    pdfa: str | None = None,
    about: str | None = None,
    toolkit: str = DEFAULT_TOOLKIT,
) -> bytes:
    """Builds an XMP packet from the command-line fields.

    Only the fields that are given are written.

    Raises:
        ValueError: If ``pdfa`` is not a known PDF/A level.
    """
    writer = XmpWriter(toolkit)
    if title is not None:
        writer.title([(None, title)])
    if creators:
        writer.creator(creators)
    if description is not None:
        writer.description([(None, description)])
    if subjects:
        writer.subject(subjects)
    if language is not None:
        writer.language([language])
    if creator_tool is not None:
        writer.creator_tool(creator_tool)
    if keywords is not None:
        writer.pdf_keywords(keywords)
    if producer is not None:
        writer.producer(producer)
    if pdfa is not None:
        part, conformance = parse_pdfa_level(pdfa)
        writer.pdfa_part(part)
        if conformance is not None:
            writer.pdfa_conformance(conformance)
    return writer.finish(about)


def _embed_output_path(pdf_path: Path, output: str | None, force: bool) -> Path:
    if output is not None:
        return Path(output)
    if force:
        return pdf_path
    return pdf_path.with_name(f"{pdf_path.stem}_xmp{pdf_path.suffix}")


@click.command()
@click.option("--title", help="Document title (dc:title)")
@click.option(
    "--creator",
    "creators",
    multiple=True,
    help="Author of the document (dc:creator); may be repeated",
)
@click.option("--description", help="Document description (dc:description)")
@click.option(
    "--subject",
    "subjects",
    multiple=True,
    help="Subject keyword (dc:subject); may be repeated",
)
@click.option("--keywords", help="Keywords string (pdf:Keywords)")
@click.option("--producer", help="Producing application (pdf:Producer)")
@click.option("--creator-tool", help="Creating application (xmp:CreatorTool)")
@click.option("--language", help="Document language, e.g. en-US (dc:language)")
@click.option(
    "--pdfa",
    help="Claimed PDF/A level, e.g. 2b, 3u or 4 (pdfaid:part/conformance)",
)
@click.option("--about", help="Value of rdf:about (default: empty)")
@click.option(
    "--toolkit",
    default=DEFAULT_TOOLKIT,
    show_default=True,
    help="Value of x:xmptk",
)
@click.option(
    "-o",
    "--output",
    type=click.Path(dir_okay=False),
    help="Output file: sidecar .xmp, or the PDF to write with --embed",
)
@click.option(
    "--embed",
    "embed_path",
    type=click.Path(dir_okay=False),
    help="Embed the packet into this PDF instead of printing it",
)
@click.option(
    "-f",
    "--force",
    is_flag=True,
    help="Overwrite existing files; with --embed and no --output, "
    "update the PDF in place",
)
@click.option(
    "-q",
    "--quiet",
    is_flag=True,
    help="Only output errors",
)
@click.option(
    "--verbose",
    is_flag=True,
    help="Detailed output",
)
@click.version_option(version=__version__)
def main(
    title: str | None,
    creators: tuple[str, ...],
    description: str | None,
    subjects: tuple[str, ...],
    keywords: str | None,
    producer: str | None,
    creator_tool: str | None,
    language: str | None,
    pdfa: str | None,
    about: str | None,
    toolkit: str,
    output: str | None,
    embed_path: str | None,
    force: bool,
    quiet: bool,
    verbose: bool,
) -> None:
    """Writes an XMP metadata packet.

    Without --output or --embed the packet is printed to stdout.
    """
    # Initialize colorama for Windows compatibility
    init()

    setup_logging(verbose=verbose, quiet=quiet)

    try:
        packet = build_packet(
            title=title,
            creators=creators,
            description=description,
            subjects=subjects,
            keywords=keywords,
            producer=producer,
            creator_tool=creator_tool,
            language=language,
            pdfa=pdfa,
            about=about,
            toolkit=toolkit,
        )

        if embed_path is not None:
            pdf_path = Path(embed_path)
            target = _embed_output_path(pdf_path, output, force)
            if target.exists() and target.resolve() != pdf_path.resolve():
                if not force:
                    raise FileExistsError(
                        f"Output file exists: {target} (use --force to overwrite)"
                    )
            embed_into_file(pdf_path, packet, target)
            if not quiet:
                print_success(f"Embedded XMP metadata into {target}")
        elif output is not None:
            target = sidecar_path(Path(output))
            if target.exists() and not force:
                raise FileExistsError(
                    f"Output file exists: {target} (use --force to overwrite)"
                )
            target = write_sidecar(target, packet)
            if not quiet:
                print_success(f"Wrote {target}")
        else:
            click.echo(packet)
        exit_code = EXIT_SUCCESS

    except FileNotFoundError as e:
        print_error(str(e))
        exit_code = EXIT_FILE_NOT_FOUND
    except FileExistsError as e:
        print_error(str(e))
        exit_code = EXIT_GENERAL_ERROR
    except EmbeddingError as e:
        print_error(str(e))
        exit_code = EXIT_EMBEDDING_FAILED
    except (XmpWriterError, ValueError) as e:
        print_error(str(e))
        exit_code = EXIT_INVALID_INPUT
    except Exception as e:
        logger.exception("Unexpected error")
        print_error(f"Unexpected error: {e}")
        exit_code = EXIT_GENERAL_ERROR

    sys.exit(exit_code)
