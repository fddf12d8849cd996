# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at https://mozilla.org/MPL/2.0/.

"""xmpwriter - Write XMP metadata packets."""

from importlib.metadata import PackageNotFoundError, version

from .exceptions import (
    EmbeddingError,
    InvalidDateTimeError,
    InvalidRatingError,
    ScopeError,
    XmpWriterError,
)
from .namespaces import Namespace
from .types import (
    ColorantMode,
    ColorantType,
    Custom,
    DateTime,
    DimensionUnit,
    FontType,
    MaskMarkers,
    Rating,
    RdfCollectionType,
    RenditionClass,
    ResourceEventAction,
    Thumbnail,
    Timezone,
)
from .writer import Array, Element, Struct, XmpWriter

try:
    __version__ = version("xmpwriter")
except PackageNotFoundError:
    __version__ = "unknown"

__all__ = [
    "__version__",
    "XmpWriter",
    "Element",
    "Struct",
    "Array",
    "Namespace",
    "DateTime",
    "Timezone",
    "Custom",
    "Thumbnail",
    "Rating",
    "RdfCollectionType",
    "RenditionClass",
    "ResourceEventAction",
    "ColorantMode",
    "ColorantType",
    "DimensionUnit",
    "FontType",
    "MaskMarkers",
    "XmpWriterError",
    "InvalidDateTimeError",
    "InvalidRatingError",
    "ScopeError",
    "EmbeddingError",
]
