# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at https://mozilla.org/MPL/2.0/.

"""Typed writers for the structured XMP value types.

Each writer wraps a :class:`~xmpwriter.writer.Struct` or
:class:`~xmpwriter.writer.Array` and closes it when used as a context
manager. Setters return the writer so calls can be chained.
"""

from collections.abc import Iterable
from types import TracebackType
from typing import TYPE_CHECKING, TypeVar

from .namespaces import Namespace
from .types import (
    ColorantMode,
    ColorantType,
    Custom,
    DateTime,
    DimensionUnit,
    FontType,
    MaskMarkers,
    RdfCollectionType,
    RenditionClass,
    ResourceEventAction,
    Thumbnail,
    XmpValue,
)

if TYPE_CHECKING:
    from .writer import Array, Element, Struct

_S = TypeVar("_S", bound="StructWriter")


class _Closing:
    """Context manager protocol shared by the typed writers."""

    def close(self) -> None:
        raise NotImplementedError

    def __enter__(self):
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()


class StructWriter(_Closing):
    """Base class for writers of one struct value."""

    namespace: Namespace = Namespace.XMP

    def __init__(self, stc: "Struct") -> None:
        self.struct = stc

    def element(self, name: str, namespace: Namespace) -> "Element":
        return self.struct.element(name, namespace)

    def element_with_attrs(
        self, name: str, namespace: Namespace, attrs: Iterable[tuple[str, str]]
    ) -> "Element":
        return self.struct.element_with_attrs(name, namespace, attrs)

    def close(self) -> None:
        self.struct.close()

    @property
    def closed(self) -> bool:
        return self.struct.closed

    def _field(self: _S, name: str, value: XmpValue) -> _S:
        self.struct.simple_property(name, self.namespace, value)
        return self


class ArrayWriter(_Closing):
    """Base class for writers of an array of struct values."""

    def __init__(self, array: "Array") -> None:
        self.array = array

    def element(self) -> "Element":
        return self.array.element()

    def element_with_attrs(self, attrs: Iterable[tuple[str, str]]) -> "Element":
        return self.array.element_with_attrs(attrs)

    def close(self) -> None:
        self.array.close()

    @property
    def closed(self) -> bool:
        return self.array.closed

    def _add(self, cls: type[_S]) -> _S:
        return cls(self.array.element().obj())


class ThumbnailWriter(StructWriter):
    """A thumbnail image (``xmpGImg``)."""

    namespace = Namespace.XMP_IMAGE

    def format(self, format: str) -> "ThumbnailWriter":
        return self._field("format", format)

    def format_jpeg(self) -> "ThumbnailWriter":
        return self.format("JPEG")

    def width(self, width: int) -> "ThumbnailWriter":
        return self._field("width", width)

    def height(self, height: int) -> "ThumbnailWriter":
        return self._field("height", height)

    def image(self, image: str) -> "ThumbnailWriter":
        """The image data, base64 encoded."""
        return self._field("image", image)


class ThumbnailsWriter(ArrayWriter):
    def add_thumbnail(self) -> ThumbnailWriter:
        return self._add(ThumbnailWriter)


class ResourceRefWriter(StructWriter):
    """A reference to another resource (``stRef``)."""

    namespace = Namespace.XMP_RESOURCE_REF

    def alternate_paths(self, paths: Iterable[str]) -> "ResourceRefWriter":
        self.struct.array_property(
            "alternatePaths", self.namespace, RdfCollectionType.SEQ, paths
        )
        return self

    def document_id(self, id: str) -> "ResourceRefWriter":
        return self._field("documentID", id)

    def file_path(self, path: str) -> "ResourceRefWriter":
        return self._field("filePath", path)

    def instance_id(self, id: str) -> "ResourceRefWriter":
        return self._field("instanceID", id)

    def last_modify_date(self, date: DateTime) -> "ResourceRefWriter":
        return self._field("lastModifyDate", date)

    def manager(self, manager: str) -> "ResourceRefWriter":
        return self._field("manager", manager)

    def manager_variant(self, variant: str) -> "ResourceRefWriter":
        return self._field("managerVariant", variant)

    def manage_to(self, uri: str) -> "ResourceRefWriter":
        return self._field("manageTo", uri)

    def manage_ui(self, uri: str) -> "ResourceRefWriter":
        return self._field("manageUI", uri)

    def mask_markers(self, markers: MaskMarkers | Custom) -> "ResourceRefWriter":
        return self._field("maskMarkers", markers)

    def part_mapping(self, mapping: str) -> "ResourceRefWriter":
        return self._field("partMapping", mapping)

    def rendition_class(
        self, rendition: RenditionClass | Thumbnail | Custom
    ) -> "ResourceRefWriter":
        return self._field("renditionClass", rendition)

    def rendition_params(self, params: str) -> "ResourceRefWriter":
        return self._field("renditionParams", params)

    def from_part(self, part: str) -> "ResourceRefWriter":
        return self._field("fromPart", part)

    def to_part(self, part: str) -> "ResourceRefWriter":
        return self._field("toPart", part)

    def version_id(self, id: str) -> "ResourceRefWriter":
        return self._field("versionID", id)


class ResourceRefsWriter(ArrayWriter):
    def add_ref(self) -> ResourceRefWriter:
        return self._add(ResourceRefWriter)


class ResourceEventWriter(StructWriter):
    """One entry of a document history (``stEvt``)."""

    namespace = Namespace.XMP_RESOURCE_EVENT

    def action(self, action: ResourceEventAction | Custom) -> "ResourceEventWriter":
        return self._field("action", action)

    def changed(self, parts: str) -> "ResourceEventWriter":
        """Semicolon-separated list of the parts that changed."""
        return self._field("changed", parts)

    def instance_id(self, id: str) -> "ResourceEventWriter":
        return self._field("instanceID", id)

    def parameters(self, params: str) -> "ResourceEventWriter":
        return self._field("parameters", params)

    def software_agent(self, agent: str) -> "ResourceEventWriter":
        return self._field("softwareAgent", agent)

    def when(self, date: DateTime) -> "ResourceEventWriter":
        return self._field("when", date)


class ResourceEventsWriter(ArrayWriter):
    def add_event(self) -> ResourceEventWriter:
        return self._add(ResourceEventWriter)


class PantryItemWriter(StructWriter):
    """An item of ``xmpMM:Pantry``; holds arbitrary properties of a resource."""

    namespace = Namespace.XMP_MEDIA

    def instance_id(self, id: str) -> "PantryItemWriter":
        return self._field("InstanceID", id)


class PantryWriter(ArrayWriter):
    def add_item(self) -> PantryItemWriter:
        return self._add(PantryItemWriter)


class VersionWriter(StructWriter):
    """One entry of ``xmpMM:Versions`` (``stVer``)."""

    namespace = Namespace.XMP_VERSION

    def comments(self, comments: str) -> "VersionWriter":
        return self._field("comments", comments)

    def event(self) -> ResourceEventWriter:
        """Start writing the event that created this version."""
        return ResourceEventWriter(self.struct.element("event", self.namespace).obj())

    def modifier(self, modifier: str) -> "VersionWriter":
        return self._field("modifier", modifier)

    def modify_date(self, date: DateTime) -> "VersionWriter":
        return self._field("modifyDate", date)

    def version(self, version: str) -> "VersionWriter":
        return self._field("version", version)


class VersionsWriter(ArrayWriter):
    def add_version(self) -> VersionWriter:
        return self._add(VersionWriter)


class JobWriter(StructWriter):
    """A job that involves the resource (``stJob``)."""

    namespace = Namespace.XMP_JOB

    def id(self, id: str) -> "JobWriter":
        return self._field("id", id)

    def name(self, name: str) -> "JobWriter":
        return self._field("name", name)

    def url(self, url: str) -> "JobWriter":
        return self._field("url", url)


class JobsWriter(ArrayWriter):
    def add_job(self) -> JobWriter:
        return self._add(JobWriter)


class ColorantWriter(StructWriter):
    """A colorant (swatch) used in a document (``xmpG``)."""

    namespace = Namespace.XMP_COLORANT

    def type_(self, kind: ColorantType) -> "ColorantWriter":
        return self._field("type", kind)

    def swatch_name(self, name: str) -> "ColorantWriter":
        return self._field("swatchName", name)

    def colorant_mode(self, mode: ColorantMode) -> "ColorantWriter":
        return self._field("colorantMode", mode)

    def lab_l(self, l_value: float) -> "ColorantWriter":
        return self._field("L", float(l_value))

    def lab_a(self, a: int) -> "ColorantWriter":
        return self._field("A", a)

    def lab_b(self, b: int) -> "ColorantWriter":
        return self._field("B", b)

    def black(self, black: float) -> "ColorantWriter":
        return self._field("black", float(black))

    def cyan(self, cyan: float) -> "ColorantWriter":
        return self._field("cyan", float(cyan))

    def magenta(self, magenta: float) -> "ColorantWriter":
        return self._field("magenta", float(magenta))

    def yellow(self, yellow: float) -> "ColorantWriter":
        return self._field("yellow", float(yellow))

    def red(self, red: int) -> "ColorantWriter":
        return self._field("red", red)

    def green(self, green: int) -> "ColorantWriter":
        return self._field("green", green)

    def blue(self, blue: int) -> "ColorantWriter":
        return self._field("blue", blue)


class ColorantsWriter(ArrayWriter):
    def add_colorant(self) -> ColorantWriter:
        return self._add(ColorantWriter)


class DimensionsWriter(StructWriter):
    """Width and height of a page or image (``stDim``)."""

    namespace = Namespace.XMP_DIMENSIONS

    def width(self, width: float) -> "DimensionsWriter":
        return self._field("w", float(width))

    def height(self, height: float) -> "DimensionsWriter":
        return self._field("h", float(height))

    def unit(self, unit: DimensionUnit | Custom) -> "DimensionsWriter":
        return self._field("unit", unit)


class FontWriter(StructWriter):
    """A font used in a document (``stFnt``)."""

    namespace = Namespace.XMP_FONT

    def child_font_files(self, files: Iterable[str]) -> "FontWriter":
        self.struct.array_property(
            "childFontFiles", self.namespace, RdfCollectionType.SEQ, files
        )
        return self

    def composite(self, composite: bool) -> "FontWriter":
        return self._field("composite", composite)

    def font_face(self, face: str) -> "FontWriter":
        return self._field("fontFace", face)

    def font_family(self, family: str) -> "FontWriter":
        return self._field("fontFamily", family)

    def font_file(self, file_name: str) -> "FontWriter":
        return self._field("fontFileName", file_name)

    def font_name(self, name: str) -> "FontWriter":
        return self._field("fontName", name)

    def font_type(self, font_type: FontType | Custom) -> "FontWriter":
        return self._field("fontType", font_type)

    def version_string(self, version: str) -> "FontWriter":
        return self._field("versionString", version)


class FontsWriter(ArrayWriter):
    def add_font(self) -> FontWriter:
        return self._add(FontWriter)
