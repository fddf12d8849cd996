# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at https://mozilla.org/MPL/2.0/.

"""PDF/A extension schema descriptions (``pdfaExtension:schemas``).

PDF/A validators reject XMP properties that are not part of the predefined
schemas unless the packet describes them in an extension schema. The
writers here produce those descriptions.
"""

import logging

from .namespaces import Namespace
from .structs import ArrayWriter, StructWriter
from .types import RdfCollectionType

logger = logging.getLogger(__name__)

_SEQ = RdfCollectionType.SEQ


class PdfAExtPropertyWriter(StructWriter):
    """Describes one property of an extension schema."""

    namespace = Namespace.PDFA_PROPERTY

    def name(self, name: str) -> "PdfAExtPropertyWriter":
        return self._field("name", name)

    def value_type(self, value_type: str) -> "PdfAExtPropertyWriter":
        """XMP value type such as ``Text``, ``Integer`` or ``Seq Text``."""
        return self._field("valueType", value_type)

    def category(self, internal: bool) -> "PdfAExtPropertyWriter":
        return self._field("category", "internal" if internal else "external")

    def description(self, description: str) -> "PdfAExtPropertyWriter":
        return self._field("description", description)


class PdfAExtPropertiesWriter(ArrayWriter):
    def add_property(self) -> PdfAExtPropertyWriter:
        return self._add(PdfAExtPropertyWriter)


class PdfAExtTypeFieldWriter(StructWriter):
    """Describes one field of a custom value type."""

    namespace = Namespace.PDFA_FIELD

    def name(self, name: str) -> "PdfAExtTypeFieldWriter":
        return self._field("name", name)

    def value_type(self, value_type: str) -> "PdfAExtTypeFieldWriter":
        return self._field("valueType", value_type)

    def description(self, description: str) -> "PdfAExtTypeFieldWriter":
        return self._field("description", description)


class PdfAExtTypeFieldsWriter(ArrayWriter):
    def add_field(self) -> PdfAExtTypeFieldWriter:
        return self._add(PdfAExtTypeFieldWriter)


class PdfAExtTypeWriter(StructWriter):
    """Describes a custom value type used by an extension schema."""

    namespace = Namespace.PDFA_TYPE

    def name(self, name: str) -> "PdfAExtTypeWriter":
        return self._field("type", name)

    def namespace_of(self, namespace: Namespace) -> "PdfAExtTypeWriter":
        """Write ``namespaceURI`` and ``prefix`` from a namespace."""
        self.namespace_uri(namespace.uri)
        return self.prefix(namespace.prefix)

    def namespace_uri(self, uri: str) -> "PdfAExtTypeWriter":
        return self._field("namespaceURI", uri)

    def prefix(self, prefix: str) -> "PdfAExtTypeWriter":
        return self._field("prefix", prefix)

    def description(self, description: str) -> "PdfAExtTypeWriter":
        return self._field("description", description)

    def fields(self) -> PdfAExtTypeFieldsWriter:
        """Start writing the ``pdfaType:field`` sequence."""
        return PdfAExtTypeFieldsWriter(
            self.struct.element("field", self.namespace).array(_SEQ)
        )


class PdfAExtTypesWriter(ArrayWriter):
    def add_value_type(self) -> PdfAExtTypeWriter:
        return self._add(PdfAExtTypeWriter)


class PdfAExtSchemaWriter(StructWriter):
    """Describes one extension schema."""

    namespace = Namespace.PDFA_SCHEMA

    def namespace_of(self, namespace: Namespace) -> "PdfAExtSchemaWriter":
        """Write ``schema``, ``namespaceURI`` and ``prefix`` from a namespace."""
        self._field("schema", f"{namespace.name} schema")
        self._field("namespaceURI", namespace.uri)
        return self._field("prefix", namespace.prefix)

    def properties(self) -> PdfAExtPropertiesWriter:
        """Start writing the ``pdfaSchema:property`` sequence."""
        return PdfAExtPropertiesWriter(
            self.struct.element("property", self.namespace).array(_SEQ)
        )

    def value_types(self) -> PdfAExtTypesWriter:
        """Start writing the ``pdfaSchema:valueType`` sequence."""
        return PdfAExtTypesWriter(
            self.struct.element("valueType", self.namespace).array(_SEQ)
        )


class AdobePdfPropertiesWriter(PdfAExtPropertiesWriter):
    """Property descriptions of the Adobe PDF schema."""

    def describe_keywords(self) -> "AdobePdfPropertiesWriter":
        _describe(
            self, "Keywords", "Text", False, "Keywords associated with the document"
        )
        return self

    def describe_pdf_version(self) -> "AdobePdfPropertiesWriter":
        _describe(
            self,
            "PDFVersion",
            "Text",
            True,
            "Version of the PDF specification to which the document conforms",
        )
        return self

    def describe_producer(self) -> "AdobePdfPropertiesWriter":
        _describe(
            self,
            "Producer",
            "Text",
            True,
            "Name of the application that created the PDF document",
        )
        return self

    def describe_trapped(self) -> "AdobePdfPropertiesWriter":
        _describe(
            self, "Trapped", "Text", True, "Whether the document has been trapped"
        )
        return self


class XmpPropertiesWriter(PdfAExtPropertiesWriter):
    """Property descriptions of the XMP basic schema."""

    def describe_label(self) -> "XmpPropertiesWriter":
        _describe(
            self, "Label", "Text", False, "A user-defined label for the resource"
        )
        return self

    def describe_rating(self) -> "XmpPropertiesWriter":
        _describe(
            self,
            "Rating",
            "Integer",
            False,
            "A user-assigned rating of the resource",
        )
        return self


class XmpMMPropertiesWriter(PdfAExtPropertiesWriter):
    """Property descriptions of the XMP media management schema."""

    def describe_instance_id(self) -> "XmpMMPropertiesWriter":
        _describe(
            self,
            "InstanceID",
            "Text",
            True,
            "UUID based identifier for specific incarnation of a document",
        )
        return self

    def describe_ingredients(self) -> "XmpMMPropertiesWriter":
        _describe(
            self,
            "Ingredients",
            "Bag ResourceRef",
            True,
            "List of ingredients that were used to create a document",
        )
        return self

    def describe_original_doc_id(self) -> "XmpMMPropertiesWriter":
        _describe(
            self,
            "OriginalDocumentID",
            "Text",
            True,
            "UUID based identifier for original document from which a "
            "document is derived",
        )
        return self

    def describe_pantry(self) -> "XmpMMPropertiesWriter":
        _describe(
            self,
            "Pantry",
            "Bag Struct",
            True,
            "Each array item has a structure value with a potentially unique "
            "set of fields, containing extracted XMP from a component",
        )
        return self


class _KnownSchemaWriter(PdfAExtSchemaWriter):
    """Schema description whose namespace fields are written up front."""

    described: Namespace = Namespace.XMP
    properties_writer: type[PdfAExtPropertiesWriter] = PdfAExtPropertiesWriter

    def __init__(self, stc) -> None:
        super().__init__(stc)
        self.namespace_of(self.described)

    def properties(self):
        return self.properties_writer(
            self.struct.element("property", self.namespace).array(_SEQ)
        )


class AdobePdfDescsWriter(_KnownSchemaWriter):
    described = Namespace.ADOBE_PDF
    properties_writer = AdobePdfPropertiesWriter

    def properties(self) -> AdobePdfPropertiesWriter:
        return super().properties()


class XmpDescsWriter(_KnownSchemaWriter):
    described = Namespace.XMP
    properties_writer = XmpPropertiesWriter

    def properties(self) -> XmpPropertiesWriter:
        return super().properties()


class XmpMMDescsWriter(_KnownSchemaWriter):
    described = Namespace.XMP_MEDIA
    properties_writer = XmpMMPropertiesWriter

    def properties(self) -> XmpMMPropertiesWriter:
        return super().properties()


class PdfAExtSchemasWriter(ArrayWriter):
    """The ``pdfaExtension:schemas`` bag."""

    def add_schema(self) -> PdfAExtSchemaWriter:
        return self._add(PdfAExtSchemaWriter)

    def pdfaid(self, corrigendum: bool) -> "PdfAExtSchemasWriter":
        """Describe the PDF/A identification schema.

        Args:
            corrigendum: Also describe the ``corr`` property.
        """
        with self.add_schema() as schema:
            schema.namespace_of(Namespace.PDFA_ID)
            with schema.properties() as properties:
                _describe(properties, "part", "Integer", True, "Part of PDF/A standard")
                _describe(
                    properties, "amd", "Text", True, "Amendment of PDF/A standard"
                )
                if corrigendum:
                    _describe(
                        properties,
                        "corr",
                        "Text",
                        True,
                        "Corrigendum of PDF/A standard",
                    )
                _describe(
                    properties,
                    "conformance",
                    "Text",
                    True,
                    "Conformance level of PDF/A standard",
                )
        logger.debug("Described PDF/A identification schema")
        return self

    def pdf(self) -> AdobePdfDescsWriter:
        return self._add(AdobePdfDescsWriter)

    def xmp(self) -> XmpDescsWriter:
        return self._add(XmpDescsWriter)

    def xmp_media_management(self) -> XmpMMDescsWriter:
        return self._add(XmpMMDescsWriter)


def _describe(
    properties: PdfAExtPropertiesWriter,
    name: str,
    value_type: str,
    internal: bool,
    description: str,
) -> None:
    with properties.add_property() as prop:
        prop.category(internal).description(description).name(name).value_type(
            value_type
        )
