# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at https://mozilla.org/MPL/2.0/.

"""Tests for pdfa.py: PDF/A extension schema descriptions."""

from conftest import body, parse_packet

from xmpwriter.namespaces import NAMESPACES, Namespace
from xmpwriter.writer import XmpWriter

NS = {
    prefix: NAMESPACES[prefix]
    for prefix in (
        "rdf",
        "pdfaExtension",
        "pdfaSchema",
        "pdfaProperty",
        "pdfaType",
        "pdfaField",
    )
}

SCHEMAS = "pdfaExtension:schemas/rdf:Bag/rdf:li"
PROPERTIES = "pdfaSchema:property/rdf:Seq/rdf:li"


class TestPdfaIdSchema:
    """Tests for PdfAExtSchemasWriter.pdfaid()."""

    def test_without_corrigendum(self, writer: XmpWriter) -> None:
        """part, amd and conformance are described."""
        with writer.extension_schemas() as schemas:
            schemas.pdfaid(corrigendum=False)

        description = parse_packet(writer.finish())
        schema = description.xpath(SCHEMAS, namespaces=NS)[0]

        assert schema.xpath("pdfaSchema:schema/text()", namespaces=NS) == [
            "PDF/A Identification schema"
        ]
        assert schema.xpath("pdfaSchema:namespaceURI/text()", namespaces=NS) == [
            "http://www.aiim.org/pdfa/ns/id/"
        ]
        assert schema.xpath("pdfaSchema:prefix/text()", namespaces=NS) == ["pdfaid"]
        assert schema.xpath(
            f"{PROPERTIES}/pdfaProperty:name/text()", namespaces=NS
        ) == ["part", "amd", "conformance"]
        assert schema.xpath(
            f"{PROPERTIES}/pdfaProperty:category/text()", namespaces=NS
        ) == ["internal"] * 3

    def test_with_corrigendum(self, writer: XmpWriter) -> None:
        """corr is described when requested."""
        with writer.extension_schemas() as schemas:
            schemas.pdfaid(corrigendum=True)

        description = parse_packet(writer.finish())

        assert description.xpath(
            f"{SCHEMAS}/{PROPERTIES}/pdfaProperty:name/text()", namespaces=NS
        ) == ["part", "amd", "corr", "conformance"]

    def test_property_field_order(self, writer: XmpWriter) -> None:
        """Property fields are written as category, description, name, valueType."""
        with writer.extension_schemas() as schemas:
            schemas.pdfaid(corrigendum=False)

        assert (
            '<rdf:li rdf:parseType="Resource">'
            "<pdfaProperty:category>internal</pdfaProperty:category>"
            "<pdfaProperty:description>Part of PDF/A standard"
            "</pdfaProperty:description>"
            "<pdfaProperty:name>part</pdfaProperty:name>"
            "<pdfaProperty:valueType>Integer</pdfaProperty:valueType>"
            "</rdf:li>"
        ) in body(writer.finish())

    def test_described_namespace_not_declared(self, writer: XmpWriter) -> None:
        """Describing a schema does not use its namespace."""
        with writer.extension_schemas() as schemas:
            schemas.pdfaid(corrigendum=False)

        writer.finish()

        assert Namespace.PDFA_ID not in writer.namespaces
        assert writer.namespaces == frozenset(
            {
                Namespace.RDF,
                Namespace.PDFA_EXTENSION,
                Namespace.PDFA_SCHEMA,
                Namespace.PDFA_PROPERTY,
            }
        )

    def test_chaining(self, writer: XmpWriter) -> None:
        """pdfaid() returns the schemas writer."""
        with writer.extension_schemas() as schemas:
            assert schemas.pdfaid(corrigendum=False) is schemas


class TestKnownSchemas:
    """Tests for the predefined describe_* helpers."""

    def test_adobe_pdf(self, writer: XmpWriter) -> None:
        """Adobe PDF schema description."""
        with writer.extension_schemas() as schemas:
            with schemas.pdf() as schema:
                with schema.properties() as properties:
                    properties.describe_producer().describe_keywords()

        description = parse_packet(writer.finish())
        schema = description.xpath(SCHEMAS, namespaces=NS)[0]

        assert schema.xpath("pdfaSchema:prefix/text()", namespaces=NS) == ["pdf"]
        assert schema.xpath(
            f"{PROPERTIES}/pdfaProperty:name/text()", namespaces=NS
        ) == ["Producer", "Keywords"]
        assert schema.xpath(
            f"{PROPERTIES}/pdfaProperty:category/text()", namespaces=NS
        ) == ["internal", "external"]

    def test_xmp_and_media_management(self, writer: XmpWriter) -> None:
        """Several schemas share one bag."""
        with writer.extension_schemas() as schemas:
            with schemas.xmp() as schema:
                with schema.properties() as properties:
                    properties.describe_rating().describe_label()
            with schemas.xmp_media_management() as schema:
                with schema.properties() as properties:
                    properties.describe_ingredients().describe_pantry()

        description = parse_packet(writer.finish())

        assert description.xpath(
            f"{SCHEMAS}/pdfaSchema:prefix/text()", namespaces=NS
        ) == ["xmp", "xmpMM"]
        assert description.xpath(
            f"{SCHEMAS}/{PROPERTIES}/pdfaProperty:valueType/text()", namespaces=NS
        ) == ["Integer", "Text", "Bag ResourceRef", "Bag Struct"]


class TestCustomSchema:
    """Tests for describing a caller-defined schema."""

    def test_property_and_value_type(self, writer: XmpWriter) -> None:
        """A custom schema with one property and one value type."""
        ex = Namespace.custom("ex", "http://example.com/ns/", "Example")

        with writer.extension_schemas() as schemas:
            with schemas.add_schema() as schema:
                schema.namespace_of(ex)
                with schema.properties() as properties:
                    with properties.add_property() as prop:
                        prop.name("Score").value_type("Grade").category(False)
                        prop.description("Final grade")
                with schema.value_types() as value_types:
                    with value_types.add_value_type() as value_type:
                        value_type.name("Grade").namespace_of(ex)
                        value_type.description("A grade")
                        with value_type.fields() as fields:
                            with fields.add_field() as field:
                                field.name("points").value_type("Integer")
                                field.description("Points scored")

        packet = writer.finish()
        description = parse_packet(packet)
        schema = description.xpath(SCHEMAS, namespaces=NS)[0]

        assert schema.xpath("pdfaSchema:schema/text()", namespaces=NS) == [
            "Example schema"
        ]
        assert schema.xpath(
            f"{PROPERTIES}/pdfaProperty:category/text()", namespaces=NS
        ) == ["external"]
        value_type_path = "pdfaSchema:valueType/rdf:Seq/rdf:li"
        assert schema.xpath(
            f"{value_type_path}/pdfaType:type/text()", namespaces=NS
        ) == ["Grade"]
        assert schema.xpath(
            f"{value_type_path}/pdfaType:prefix/text()", namespaces=NS
        ) == ["ex"]
        assert schema.xpath(
            f"{value_type_path}/pdfaType:field/rdf:Seq/rdf:li/pdfaField:name/text()",
            namespaces=NS,
        ) == ["points"]
        assert Namespace.PDFA_TYPE in writer.namespaces
        assert Namespace.PDFA_FIELD in writer.namespaces
        assert ex not in writer.namespaces
        assert 'xmlns:ex="' not in packet.decode("utf-8")

    def test_schema_fields_written_first(self, writer: XmpWriter) -> None:
        """namespace_of() writes schema, namespaceURI and prefix in order."""
        with writer.extension_schemas() as schemas:
            with schemas.add_schema() as schema:
                schema.namespace_of(Namespace.custom("ex", "http://e/", "E"))

        assert body(writer.finish()) == (
            '<pdfaExtension:schemas><rdf:Bag><rdf:li rdf:parseType="Resource">'
            "<pdfaSchema:schema>E schema</pdfaSchema:schema>"
            "<pdfaSchema:namespaceURI>http://e/</pdfaSchema:namespaceURI>"
            "<pdfaSchema:prefix>ex</pdfaSchema:prefix>"
            "</rdf:li></rdf:Bag></pdfaExtension:schemas>"
        )
