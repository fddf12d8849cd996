# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at https://mozilla.org/MPL/2.0/.

"""XML namespaces known to the XMP writer."""

from dataclasses import dataclass, field
from typing import ClassVar

# Rank shared by every caller-defined namespace; sorts after the known table
_CUSTOM_RANK = 1 << 16


@dataclass(frozen=True, order=True)
class Namespace:
    """An XMP namespace: a fixed prefix/URI pair.

    The well-known namespaces are available as class attributes
    (``Namespace.DUBLIN_CORE``, ``Namespace.XMP_MEDIA``, ...). Use
    :meth:`custom` for anything else.

    Namespaces are hashable and ordered so a set of them can be emitted
    deterministically: well-known namespaces in table order, custom ones
    after them sorted by prefix and URI.

    Attributes:
        prefix: Short prefix used in qualified names (e.g. ``dc``).
        uri: Canonical namespace URI.
        name: Human-readable schema name, used in extension schema
            descriptions.
    """

    _rank: int = field(repr=False)
    prefix: str
    uri: str
    name: str = field(default="", compare=False)

    RDF: ClassVar["Namespace"]
    DUBLIN_CORE: ClassVar["Namespace"]
    XMP: ClassVar["Namespace"]
    XMP_RIGHTS: ClassVar["Namespace"]
    XMP_RESOURCE_REF: ClassVar["Namespace"]
    XMP_RESOURCE_EVENT: ClassVar["Namespace"]
    XMP_VERSION: ClassVar["Namespace"]
    XMP_JOB: ClassVar["Namespace"]
    XMP_JOB_MANAGEMENT: ClassVar["Namespace"]
    XMP_COLORANT: ClassVar["Namespace"]
    XMP_FONT: ClassVar["Namespace"]
    XMP_DIMENSIONS: ClassVar["Namespace"]
    XMP_MEDIA: ClassVar["Namespace"]
    XMP_PAGED: ClassVar["Namespace"]
    XMP_DYNAMIC_MEDIA: ClassVar["Namespace"]
    XMP_IMAGE: ClassVar["Namespace"]
    XMP_IDQ: ClassVar["Namespace"]
    ADOBE_PDF: ClassVar["Namespace"]
    PDFA_ID: ClassVar["Namespace"]
    PDFX_ID: ClassVar["Namespace"]
    PDFUA_ID: ClassVar["Namespace"]
    PDFA_EXTENSION: ClassVar["Namespace"]
    PDFA_SCHEMA: ClassVar["Namespace"]
    PDFA_PROPERTY: ClassVar["Namespace"]
    PDFA_TYPE: ClassVar["Namespace"]
    PDFA_FIELD: ClassVar["Namespace"]

    @classmethod
    def custom(cls, prefix: str, uri: str, name: str | None = None) -> "Namespace":
        """Create a caller-defined namespace.

        The prefix and URI are used verbatim. Keeping prefixes unambiguous
        within one document is up to the caller.
        """
        return cls(_CUSTOM_RANK, prefix, uri, name or prefix)

    @property
    def is_custom(self) -> bool:
        return self._rank == _CUSTOM_RANK


# (attribute, prefix, uri, name) in emission order
_WELL_KNOWN: list[tuple[str, str, str, str]] = [
    ("RDF", "rdf", "http://www.w3.org/1999/02/22-rdf-syntax-ns#", "RDF"),
    ("DUBLIN_CORE", "dc", "http://purl.org/dc/elements/1.1/", "Dublin Core"),
    ("XMP", "xmp", "http://ns.adobe.com/xap/1.0/", "XMP Basic"),
    (
        "XMP_RIGHTS",
        "xmpRights",
        "http://ns.adobe.com/xap/1.0/rights/",
        "XMP Rights Management",
    ),
    (
        "XMP_RESOURCE_REF",
        "stRef",
        "http://ns.adobe.com/xap/1.0/sType/ResourceRef#",
        "ResourceRef",
    ),
    (
        "XMP_RESOURCE_EVENT",
        "stEvt",
        "http://ns.adobe.com/xap/1.0/sType/ResourceEvent#",
        "ResourceEvent",
    ),
    (
        "XMP_VERSION",
        "stVer",
        "http://ns.adobe.com/xap/1.0/sType/Version#",
        "Version",
    ),
    ("XMP_JOB", "stJob", "http://ns.adobe.com/xap/1.0/sType/Job#", "Job"),
    (
        "XMP_JOB_MANAGEMENT",
        "xmpBJ",
        "http://ns.adobe.com/xap/1.0/bj/",
        "XMP Basic Job Ticket",
    ),
    ("XMP_COLORANT", "xmpG", "http://ns.adobe.com/xap/1.0/g/", "Colorant"),
    ("XMP_FONT", "stFnt", "http://ns.adobe.com/xap/1.0/sType/Font#", "Font"),
    (
        "XMP_DIMENSIONS",
        "stDim",
        "http://ns.adobe.com/xap/1.0/sType/Dimensions#",
        "Dimensions",
    ),
    (
        "XMP_MEDIA",
        "xmpMM",
        "http://ns.adobe.com/xap/1.0/mm/",
        "XMP Media Management",
    ),
    ("XMP_PAGED", "xmpTPg", "http://ns.adobe.com/xap/1.0/t/pg/", "XMP Paged-Text"),
    (
        "XMP_DYNAMIC_MEDIA",
        "xmpDM",
        "http://ns.adobe.com/xap/1.0/DynamicMedia/",
        "XMP Dynamic Media",
    ),
    ("XMP_IMAGE", "xmpGImg", "http://ns.adobe.com/xap/1.0/g/img/", "Thumbnail"),
    (
        "XMP_IDQ",
        "xmpidq",
        "http://ns.adobe.com/xmp/Identifier/qual/1.0/",
        "XMP Identifier Qualifier",
    ),
    ("ADOBE_PDF", "pdf", "http://ns.adobe.com/pdf/1.3/", "Adobe PDF"),
    ("PDFA_ID", "pdfaid", "http://www.aiim.org/pdfa/ns/id/", "PDF/A Identification"),
    ("PDFX_ID", "pdfxid", "http://www.npes.org/pdfx/ns/id/", "PDF/X Identification"),
    (
        "PDFUA_ID",
        "pdfuaid",
        "http://www.aiim.org/pdfua/ns/id/",
        "PDF/UA Identification",
    ),
    (
        "PDFA_EXTENSION",
        "pdfaExtension",
        "http://www.aiim.org/pdfa/ns/extension/",
        "PDF/A Extension",
    ),
    ("PDFA_SCHEMA", "pdfaSchema", "http://www.aiim.org/pdfa/ns/schema#", "PDF/A Schema"),
    (
        "PDFA_PROPERTY",
        "pdfaProperty",
        "http://www.aiim.org/pdfa/ns/property#",
        "PDF/A Property",
    ),
    ("PDFA_TYPE", "pdfaType", "http://www.aiim.org/pdfa/ns/type#", "PDF/A Value Type"),
    ("PDFA_FIELD", "pdfaField", "http://www.aiim.org/pdfa/ns/field#", "PDF/A Field"),
]

for _rank, (_attr, _prefix, _uri, _name) in enumerate(_WELL_KNOWN):
    setattr(Namespace, _attr, Namespace(_rank, _prefix, _uri, _name))

# Prefix -> URI for every well-known namespace
NAMESPACES: dict[str, str] = {prefix: uri for _, prefix, uri, _ in _WELL_KNOWN}

# URI of the x:xmpmeta wrapper; never part of the usage set
NS_ADOBE_META = "adobe:ns:meta/"
