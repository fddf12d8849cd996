# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at https://mozilla.org/MPL/2.0/.

"""Incremental XMP packet writer.

The writer appends to a single text buffer. Structured properties are
written through short-lived handles:

- :class:`Element` is an opened property tag that still needs content.
  Give it a value with :meth:`Element.value`, or turn it into a
  :class:`Struct` (:meth:`Element.obj`) or an :class:`Array`
  (:meth:`Element.array`).
- :class:`Struct` and :class:`Array` are open scopes. They are context
  managers: leaving the ``with`` block, normally or through an exception,
  writes their closing tags exactly once.

Open handles form a stack. Only the handle on top of the stack may write;
using a parent while one of its children is still open raises
:class:`~xmpwriter.exceptions.ScopeError` before anything is written.

Example::

    writer = XmpWriter()
    writer.creator(["Martin Haug"])
    with writer.colorants() as colorants:
        with colorants.add_colorant() as colorant:
            colorant.swatch_name("Red")
    packet = writer.finish()
"""

import io
import logging
from collections.abc import Iterable
from types import TracebackType

from .exceptions import ScopeError
from .namespaces import NS_ADOBE_META, Namespace
from .schemas import SchemaMixin
from .types import (
    DEFAULT_LANGUAGE,
    RdfCollectionType,
    XmpValue,
    escape_text,
    render,
)

logger = logging.getLogger(__name__)

# XMP packet header and trailer
XMP_HEADER = b'<?xpacket begin="\xef\xbb\xbf" id="W5M0MpCehiHzreSzNTczkc9d"?>'
XMP_TRAILER = b'<?xpacket end="r"?>'

# Default value of the x:xmptk attribute
DEFAULT_TOOLKIT = "xmpwriter"

Attrs = Iterable[tuple[str, str]]


def _format_attrs(attrs: Attrs) -> str:
    return "".join(f' {key}="{escape_text(value)}"' for key, value in attrs)


def _render_languages(
    items: Iterable[tuple[str | None, str]],
) -> list[tuple[str, str]]:
    return [
        (DEFAULT_LANGUAGE if lang is None else lang, render(text))
        for lang, text in items
    ]


class _Node:
    """Common state of a handle that borrows the writer's buffer."""

    def __init__(self, writer: "XmpWriter", name: str, namespace: Namespace) -> None:
        self._writer = writer
        self.name = name
        self.namespace = namespace
        self._closed = False

    @property
    def qualified_name(self) -> str:
        return f"{self.namespace.prefix}:{self.name}"

    @property
    def closed(self) -> bool:
        return self._closed

    def __repr__(self) -> str:
        state = "closed" if self._closed else "open"
        return f"<{type(self).__name__} {self.qualified_name} ({state})>"

    def _unwind(self) -> None:
        """Close this handle because a scope below it is closing."""
        raise NotImplementedError


class Element(_Node):
    """An opened property tag waiting for its content.

    The opening tag is written without its closing ``>`` so the next call
    decides between a simple value, a struct and an array. Exactly one of
    :meth:`value`, :meth:`obj` or :meth:`array` may be called.
    """

    def __init__(
        self,
        writer: "XmpWriter",
        name: str,
        namespace: Namespace,
        attrs: Attrs = (),
    ) -> None:
        super().__init__(writer, name, namespace)
        tag = f"<{namespace.prefix}:{name}{_format_attrs(attrs)}"
        writer._write(tag)
        writer._namespaces.add(namespace)
        writer._push(self)

    def value(self, value: XmpValue) -> None:
        """Write a simple value and close the element."""
        self._writer._check_top(self)
        self._write_text(render(value))

    def obj(self) -> "Struct":
        """Turn the element into a struct (``rdf:parseType="Resource"``)."""
        self._writer._check_top(self)
        self._writer._write(' rdf:parseType="Resource">')
        self._finish()
        return Struct(self._writer, self.name, self.namespace)

    def array(self, kind: RdfCollectionType) -> "Array":
        """Turn the element into an ``rdf:Seq``, ``rdf:Bag`` or ``rdf:Alt``."""
        self._writer._check_top(self)
        self._writer._write(">")
        self._finish()
        return Array(self._writer, kind, self.name, self.namespace)

    def language_alternative(self, items: Iterable[tuple[str | None, str]]) -> None:
        """Write a language alternative (``rdf:Alt`` with ``xml:lang``).

        Args:
            items: Pairs of (language, text). A language of None is written
                as ``x-default``.
        """
        self._write_language_alternative(_render_languages(items))

    def unordered_array(self, items: Iterable[XmpValue]) -> None:
        """Write the items as an ``rdf:Bag``."""
        self._write_array(RdfCollectionType.BAG, [render(item) for item in items])

    def ordered_array(self, items: Iterable[XmpValue]) -> None:
        """Write the items as an ``rdf:Seq``."""
        self._write_array(RdfCollectionType.SEQ, [render(item) for item in items])

    def alternative_array(self, items: Iterable[XmpValue]) -> None:
        """Write the items as an ``rdf:Alt``."""
        self._write_array(RdfCollectionType.ALT, [render(item) for item in items])

    # The _write_* methods take text that is already rendered and cannot fail

    def _write_text(self, text: str) -> None:
        self._writer._write(f">{text}</{self.qualified_name}>")
        self._finish()

    def _write_array(self, kind: RdfCollectionType, texts: list[str]) -> None:
        with self.array(kind) as array:
            for text in texts:
                array.element()._write_text(text)

    def _write_language_alternative(self, pairs: list[tuple[str, str]]) -> None:
        with self.array(RdfCollectionType.ALT) as array:
            for lang, text in pairs:
                array.element_with_attrs([("xml:lang", lang)])._write_text(text)

    def _finish(self) -> None:
        self._writer._pop(self)
        self._closed = True

    def _unwind(self) -> None:
        # Never given content: close as an empty element
        self._writer._write("/>")
        self._finish()


class _Parent:
    """Writes complete properties into a writer or struct.

    Values are rendered before the property tag is opened, so a value that
    cannot be rendered raises without writing anything.
    """

    def element(self, name: str, namespace: Namespace) -> Element:
        raise NotImplementedError

    def simple_property(self, name: str, namespace: Namespace, value: XmpValue) -> None:
        """Write ``<prefix:name>value</prefix:name>``."""
        text = render(value)
        self.element(name, namespace)._write_text(text)

    def array_property(
        self,
        name: str,
        namespace: Namespace,
        kind: RdfCollectionType,
        items: Iterable[XmpValue],
    ) -> None:
        """Write a property whose value is an array of simple items."""
        texts = [render(item) for item in items]
        self.element(name, namespace)._write_array(kind, texts)

    def language_property(
        self,
        name: str,
        namespace: Namespace,
        items: Iterable[tuple[str | None, str]],
    ) -> None:
        """Write a language alternative; see :meth:`Element.language_alternative`."""
        pairs = _render_languages(items)
        self.element(name, namespace)._write_language_alternative(pairs)


class _Scope(_Node):
    """An open struct or array; closes when its ``with`` block ends."""

    def __enter__(self):
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    def close(self) -> None:
        """Write the closing tags of this scope.

        Any handle still open inside the scope is closed first. Calling
        ``close`` again is a no-op.
        """
        if self._closed:
            return
        self._writer._unwind_above(self)
        self._writer._write(self._closing_tags())
        self._writer._pop(self)
        self._closed = True

    def _closing_tags(self) -> str:
        raise NotImplementedError

    def _unwind(self) -> None:
        self.close()


class Struct(_Scope, _Parent):
    """A property whose value is a set of nested properties.

    The struct shares its closing tag with the element it was created from.
    """

    def __init__(self, writer: "XmpWriter", name: str, namespace: Namespace) -> None:
        super().__init__(writer, name, namespace)
        writer._namespaces.add(Namespace.RDF)
        writer._push(self)

    def element(self, name: str, namespace: Namespace) -> Element:
        """Open a field of the struct."""
        return self.element_with_attrs(name, namespace, ())

    def element_with_attrs(
        self, name: str, namespace: Namespace, attrs: Attrs
    ) -> Element:
        """Open a field of the struct with extra attributes."""
        self._writer._check_top(self)
        return Element(self._writer, name, namespace, attrs)

    def _closing_tags(self) -> str:
        return f"</{self.qualified_name}>"


class Array(_Scope):
    """A property whose value is an RDF collection of ``rdf:li`` items."""

    def __init__(
        self,
        writer: "XmpWriter",
        kind: RdfCollectionType,
        name: str,
        namespace: Namespace,
    ) -> None:
        super().__init__(writer, name, namespace)
        self.kind = kind
        writer._namespaces.add(Namespace.RDF)
        writer._write(f"<rdf:{kind.value}>")
        writer._push(self)

    def element(self) -> Element:
        """Open the next item."""
        return self.element_with_attrs(())

    def element_with_attrs(self, attrs: Attrs) -> Element:
        """Open the next item with attributes (e.g. ``xml:lang``)."""
        self._writer._check_top(self)
        return Element(self._writer, "li", Namespace.RDF, attrs)

    def _closing_tags(self) -> str:
        return f"</rdf:{self.kind.value}></{self.qualified_name}>"


class XmpWriter(_Parent, SchemaMixin):
    """Builds one XMP packet.

    Properties are written in call order into an in-memory buffer. Every
    namespace used by an element is remembered so that :meth:`finish` can
    declare exactly those prefixes on ``rdf:Description``.

    Args:
        toolkit: Value of the ``x:xmptk`` attribute.
    """

    def __init__(self, toolkit: str = DEFAULT_TOOLKIT) -> None:
        self.toolkit = toolkit
        self._buf = io.StringIO()
        self._namespaces: set[Namespace] = set()
        self._scopes: list[_Node] = []
        self._finished = False

    @property
    def namespaces(self) -> frozenset[Namespace]:
        """Namespaces used so far."""
        return frozenset(self._namespaces)

    @property
    def depth(self) -> int:
        """Number of handles currently open."""
        return len(self._scopes)

    @property
    def finished(self) -> bool:
        return self._finished

    def element(self, name: str, namespace: Namespace) -> Element:
        """Open a top-level property."""
        return self.element_with_attrs(name, namespace, ())

    def element_with_attrs(
        self, name: str, namespace: Namespace, attrs: Attrs
    ) -> Element:
        """Open a top-level property with extra attributes."""
        self._check_top(None)
        return Element(self, name, namespace, attrs)

    def finish(self, about: str | None = None) -> bytes:
        """Wrap the written properties into a complete XMP packet.

        The writer cannot be used afterwards.

        Args:
            about: Value of ``rdf:about``; empty when None.

        Returns:
            UTF-8 encoded XMP packet.

        Raises:
            ScopeError: If a handle is still open or the writer is already
                finished.
        """
        self._check_top(None)
        self._finished = True

        declared = sorted(ns for ns in self._namespaces if ns != Namespace.RDF)
        parts = [
            f'<x:xmpmeta xmlns:x="{NS_ADOBE_META}" '
            f'x:xmptk="{escape_text(self.toolkit)}">',
            f'<rdf:RDF xmlns:rdf="{Namespace.RDF.uri}">',
            f'<rdf:Description rdf:about="{escape_text(about or "")}"',
        ]
        for namespace in declared:
            parts.append(f' xmlns:{namespace.prefix}="{escape_text(namespace.uri)}"')
        parts.append(">")
        parts.append(self._buf.getvalue())
        parts.append("</rdf:Description></rdf:RDF></x:xmpmeta>")

        result = XMP_HEADER + "".join(parts).encode("utf-8") + XMP_TRAILER
        logger.debug(
            "XMP packet created: %d bytes, %d namespace declarations",
            len(result),
            len(declared),
        )
        return result

    # -- Buffer and scope bookkeeping used by the handles --

    def _write(self, text: str) -> None:
        self._buf.write(text)

    def _push(self, node: _Node) -> None:
        self._scopes.append(node)

    def _pop(self, node: _Node) -> None:
        if not self._scopes or self._scopes[-1] is not node:
            raise ScopeError(f"{node!r} is not the innermost open handle")
        self._scopes.pop()

    def _unwind_above(self, node: _Node) -> None:
        while self._scopes and self._scopes[-1] is not node:
            self._scopes[-1]._unwind()

    def _check_top(self, node: _Node | None) -> None:
        """Raise unless ``node`` may write now (None means the writer itself)."""
        if self._finished:
            raise ScopeError("XMP packet is already finished")
        if node is not None and node.closed:
            raise ScopeError(f"<{node.qualified_name}> is already closed")
        top = self._scopes[-1] if self._scopes else None
        if top is not node:
            target = "the writer" if node is None else f"<{node.qualified_name}>"
            raise ScopeError(
                f"Cannot write to {target} while <{top.qualified_name}> is still open"
            )
