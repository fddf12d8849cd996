# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at https://mozilla.org/MPL/2.0/.

"""Convenience methods for the predefined XMP schemas.

Each method writes one property through the core element API. Simple
properties return the writer for chaining; structured ones return a typed
writer to be used as a context manager.
"""

from collections.abc import Iterable
from typing import TYPE_CHECKING

from .namespaces import Namespace
from .pdfa import PdfAExtSchemasWriter
from .structs import (
    ColorantsWriter,
    DimensionsWriter,
    FontsWriter,
    JobsWriter,
    PantryWriter,
    ResourceEventsWriter,
    ResourceRefsWriter,
    ResourceRefWriter,
    ThumbnailsWriter,
    VersionsWriter,
)
from .types import (
    Custom,
    DateTime,
    Rating,
    RdfCollectionType,
    RenditionClass,
    Thumbnail,
)

if TYPE_CHECKING:
    from .writer import XmpWriter

LangAlt = Iterable[tuple[str | None, str]]

_DC = Namespace.DUBLIN_CORE
_XMP = Namespace.XMP
_XMP_RIGHTS = Namespace.XMP_RIGHTS
_XMP_MM = Namespace.XMP_MEDIA
_XMP_TPG = Namespace.XMP_PAGED

_SEQ = RdfCollectionType.SEQ
_BAG = RdfCollectionType.BAG


class SchemaMixin:
    """Property writers for Dublin Core, XMP, PDF and PDF/A schemas."""

    # -- Dublin Core --

    def contributor(self, contributor: Iterable[str]) -> "XmpWriter":
        """Contributors to the resource other than the creators (``dc:contributor``)."""
        self.array_property("contributor", _DC, _BAG, contributor)
        return self

    def coverage(self, coverage: str) -> "XmpWriter":
        self.simple_property("coverage", _DC, coverage)
        return self

    def creator(self, creator: Iterable[str]) -> "XmpWriter":
        """Entities primarily responsible for the resource (``dc:creator``)."""
        self.array_property("creator", _DC, _SEQ, creator)
        return self

    def date(self, date: Iterable[DateTime]) -> "XmpWriter":
        self.array_property("date", _DC, _SEQ, date)
        return self

    def description(self, description: LangAlt) -> "XmpWriter":
        """Description of the resource, possibly in several languages."""
        self.language_property("description", _DC, description)
        return self

    def format(self, mime: str) -> "XmpWriter":
        """MIME type of the resource (``dc:format``)."""
        self.simple_property("format", _DC, mime)
        return self

    def identifier(self, id: str) -> "XmpWriter":
        self.simple_property("identifier", _DC, id)
        return self

    def language(self, lang: Iterable[str]) -> "XmpWriter":
        """Languages used in the resource, as RFC 3066 tags."""
        self.array_property("language", _DC, _BAG, lang)
        return self

    def publisher(self, publisher: Iterable[str]) -> "XmpWriter":
        self.array_property("publisher", _DC, _BAG, publisher)
        return self

    def relation(self, relation: Iterable[str]) -> "XmpWriter":
        self.array_property("relation", _DC, _BAG, relation)
        return self

    def rights(self, rights: LangAlt) -> "XmpWriter":
        """Informal rights statements, possibly in several languages."""
        self.language_property("rights", _DC, rights)
        return self

    def source(self, source: str) -> "XmpWriter":
        self.simple_property("source", _DC, source)
        return self

    def subject(self, subject: Iterable[str]) -> "XmpWriter":
        """Keywords or phrases describing the topic (``dc:subject``)."""
        self.array_property("subject", _DC, _BAG, subject)
        return self

    def title(self, title: LangAlt) -> "XmpWriter":
        """Title of the resource, possibly in several languages."""
        self.language_property("title", _DC, title)
        return self

    def type_(self, kind: Iterable[str]) -> "XmpWriter":
        """Nature or genre of the resource (``dc:type``); see :meth:`format`."""
        self.array_property("type", _DC, _BAG, kind)
        return self

    # -- XMP basic --

    def base_url(self, url: str) -> "XmpWriter":
        self.simple_property("BaseURL", _XMP, url)
        return self

    def create_date(self, date: DateTime) -> "XmpWriter":
        self.simple_property("CreateDate", _XMP, date)
        return self

    def creator_tool(self, tool: str) -> "XmpWriter":
        """Name of the application that created the resource."""
        self.simple_property("CreatorTool", _XMP, tool)
        return self

    def xmp_identifier(self, id: Iterable[str]) -> "XmpWriter":
        """Identifiers of the resource (``xmp:Identifier``); see :meth:`idq_scheme`."""
        self.array_property("Identifier", _XMP, _BAG, id)
        return self

    def label(self, label: str) -> "XmpWriter":
        self.simple_property("Label", _XMP, label)
        return self

    def metadata_date(self, date: DateTime) -> "XmpWriter":
        self.simple_property("MetadataDate", _XMP, date)
        return self

    def modify_date(self, date: DateTime) -> "XmpWriter":
        self.simple_property("ModifyDate", _XMP, date)
        return self

    def nickname(self, nickname: str) -> "XmpWriter":
        self.simple_property("Nickname", _XMP, nickname)
        return self

    def rating(self, rating: Rating | int | None) -> "XmpWriter":
        """User-assigned rating.

        Raises:
            InvalidRatingError: If an int rating is outside 0 to 5. Use
                ``Rating.REJECTED`` for a rejected resource.
        """
        if not isinstance(rating, Rating):
            rating = Rating.from_stars(rating)
        self.simple_property("Rating", _XMP, rating)
        return self

    def thumbnails(self) -> ThumbnailsWriter:
        """Start writing ``xmp:Thumbnails``."""
        return ThumbnailsWriter(
            self.element("Thumbnails", _XMP).array(RdfCollectionType.ALT)
        )

    # -- XMP rights management --

    def certificate(self, cert: str) -> "XmpWriter":
        """URL of a rights management certificate."""
        self.simple_property("Certificate", _XMP_RIGHTS, cert)
        return self

    def marked(self, marked: bool) -> "XmpWriter":
        """Whether the resource is rights-managed; False means public domain."""
        self.simple_property("Marked", _XMP_RIGHTS, marked)
        return self

    def owner(self, owner: Iterable[str]) -> "XmpWriter":
        self.array_property("Owner", _XMP_RIGHTS, _BAG, owner)
        return self

    def usage_terms(self, terms: LangAlt) -> "XmpWriter":
        self.language_property("UsageTerms", _XMP_RIGHTS, terms)
        return self

    def web_statement(self, statement: str) -> "XmpWriter":
        self.simple_property("WebStatement", _XMP_RIGHTS, statement)
        return self

    # -- XMP media management --

    def derived_from(self) -> ResourceRefWriter:
        """Start writing ``xmpMM:DerivedFrom``."""
        return ResourceRefWriter(self.element("DerivedFrom", _XMP_MM).obj())

    def document_id(self, id: str) -> "XmpWriter":
        self.simple_property("DocumentID", _XMP_MM, id)
        return self

    def history(self) -> ResourceEventsWriter:
        """Start writing ``xmpMM:History``."""
        return ResourceEventsWriter(
            self.element("History", _XMP_MM).array(RdfCollectionType.SEQ)
        )

    def ingredients(self) -> ResourceRefsWriter:
        """Start writing ``xmpMM:Ingredients``."""
        return ResourceRefsWriter(
            self.element("Ingredients", _XMP_MM).array(RdfCollectionType.BAG)
        )

    def instance_id(self, id: str) -> "XmpWriter":
        self.simple_property("InstanceID", _XMP_MM, id)
        return self

    def managed_from(self) -> ResourceRefWriter:
        """Start writing ``xmpMM:ManagedFrom``."""
        return ResourceRefWriter(self.element("ManagedFrom", _XMP_MM).obj())

    def manager(self, manager: str) -> "XmpWriter":
        self.simple_property("Manager", _XMP_MM, manager)
        return self

    def manage_to(self, uri: str) -> "XmpWriter":
        self.simple_property("ManageTo", _XMP_MM, uri)
        return self

    def manage_ui(self, uri: str) -> "XmpWriter":
        self.simple_property("ManageUI", _XMP_MM, uri)
        return self

    def manager_variant(self, variant: str) -> "XmpWriter":
        self.simple_property("ManagerVariant", _XMP_MM, variant)
        return self

    def original_doc_id(self, id: str) -> "XmpWriter":
        self.simple_property("OriginalDocumentID", _XMP_MM, id)
        return self

    def pantry(self) -> PantryWriter:
        """Start writing ``xmpMM:Pantry``."""
        return PantryWriter(
            self.element("Pantry", _XMP_MM).array(RdfCollectionType.BAG)
        )

    def rendition_class(
        self, rendition: RenditionClass | Thumbnail | Custom
    ) -> "XmpWriter":
        self.simple_property("RenditionClass", _XMP_MM, rendition)
        return self

    def rendition_params(self, params: str) -> "XmpWriter":
        self.simple_property("RenditionParams", _XMP_MM, params)
        return self

    def version_id(self, id: str) -> "XmpWriter":
        self.simple_property("VersionID", _XMP_MM, id)
        return self

    def version_ref(self) -> VersionsWriter:
        """Start writing ``xmpMM:Versions``, oldest version first."""
        return VersionsWriter(
            self.element("Versions", _XMP_MM).array(RdfCollectionType.SEQ)
        )

    # -- Basic job ticket --

    def jobs(self) -> JobsWriter:
        """Start writing ``xmpBJ:JobRef``."""
        return JobsWriter(
            self.element("JobRef", Namespace.XMP_JOB_MANAGEMENT).array(
                RdfCollectionType.BAG
            )
        )

    # -- Paged text --

    def colorants(self) -> ColorantsWriter:
        """Start writing ``xmpTPg:Colorants``."""
        return ColorantsWriter(
            self.element("Colorants", _XMP_TPG).array(RdfCollectionType.SEQ)
        )

    def fonts(self) -> FontsWriter:
        """Start writing ``xmpTPg:Fonts``."""
        return FontsWriter(
            self.element("Fonts", _XMP_TPG).array(RdfCollectionType.BAG)
        )

    def max_page_size(self) -> DimensionsWriter:
        """Start writing ``xmpTPg:MaxPageSize``."""
        return DimensionsWriter(self.element("MaxPageSize", _XMP_TPG).obj())

    def num_pages(self, num: int) -> "XmpWriter":
        self.simple_property("NPages", _XMP_TPG, int(num))
        return self

    def plate_names(self, names: Iterable[str]) -> "XmpWriter":
        self.array_property("PlateNames", _XMP_TPG, _SEQ, names)
        return self

    # -- Identifier qualifier --

    def idq_scheme(self, scheme: str) -> "XmpWriter":
        """Scheme of the identifiers in :meth:`xmp_identifier`."""
        self.simple_property("Scheme", Namespace.XMP_IDQ, scheme)
        return self

    # -- Adobe PDF --

    def pdf_keywords(self, keywords: str) -> "XmpWriter":
        self.simple_property("Keywords", Namespace.ADOBE_PDF, keywords)
        return self

    def pdf_version(self, version: str) -> "XmpWriter":
        """PDF version the document conforms to (e.g. ``"1.7"``)."""
        self.simple_property("PDFVersion", Namespace.ADOBE_PDF, version)
        return self

    def producer(self, producer: str) -> "XmpWriter":
        self.simple_property("Producer", Namespace.ADOBE_PDF, producer)
        return self

    def trapped(self, trapped: bool) -> "XmpWriter":
        self.simple_property("Trapped", Namespace.ADOBE_PDF, trapped)
        return self

    # -- PDF/A, PDF/X and PDF/UA identification --

    def pdfa_part(self, part: int | str) -> "XmpWriter":
        """PDF/A part the document conforms to (e.g. ``2``)."""
        self.simple_property("part", Namespace.PDFA_ID, str(part))
        return self

    def pdfa_conformance(self, conformance: str) -> "XmpWriter":
        """PDF/A conformance level (``A``, ``B`` or ``U``)."""
        self.simple_property("conformance", Namespace.PDFA_ID, conformance)
        return self

    def pdfa_amd(self, amd: str) -> "XmpWriter":
        self.simple_property("amd", Namespace.PDFA_ID, amd)
        return self

    def pdfa_corr(self, corr: str) -> "XmpWriter":
        self.simple_property("corr", Namespace.PDFA_ID, corr)
        return self

    def pdfx_version(self, version: str) -> "XmpWriter":
        """PDF/X version (e.g. ``"PDF/X-3:2003"``)."""
        self.simple_property("GTS_PDFXVersion", Namespace.PDFX_ID, version)
        return self

    def pdfua_part(self, part: int) -> "XmpWriter":
        self.simple_property("part", Namespace.PDFUA_ID, int(part))
        return self

    def extension_schemas(self) -> PdfAExtSchemasWriter:
        """Start writing ``pdfaExtension:schemas``."""
        return PdfAExtSchemasWriter(
            self.element("schemas", Namespace.PDFA_EXTENSION).array(
                RdfCollectionType.BAG
            )
        )
