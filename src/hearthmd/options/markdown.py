#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Configuration record for markdown rendering.

``MarkdownConfig`` maps each element kind the renderer emits to an optional
CSS class. It is constructed once and read by ``HtmlRenderer`` and the
quote post-processor; being frozen, a single instance can be shared
across calls and threads.
"""

from __future__ import annotations

from dataclasses import dataclass, field, fields
from typing import Any, Mapping

from hearthmd.constants import DEFAULT_QUOTE_CLASS, ELEMENT_KINDS, ElementKind
from hearthmd.exceptions import InvalidConfigError
from hearthmd.options.base import CloneFrozenMixin
from hearthmd.utils.html_utils import class_attribute


# src/hearthmd/options/markdown.py
@dataclass(frozen=True)
class MarkdownConfig(CloneFrozenMixin):
    """CSS classes applied to rendered markdown elements.

    Every field is optional. ``None`` means the element is emitted without a
    ``class`` attribute; a string is emitted verbatim as the attribute value.

    Parameters
    ----------
    heading_class : str or None, default None
        Class for ``<h1>`` through ``<h6>``.
    paragraph_class : str or None, default None
        Class for ``<p>``.
    italic_class : str or None, default None
        Class for ``<em>``.
    strong_class : str or None, default None
        Class for ``<strong>``.
    link_class : str or None, default None
        Class for ``<a>``.
    blockquote_class : str or None, default None
        Class for ``<blockquote>``.
    code_class : str or None, default None
        Class for inline ``<code>`` and for the ``<code>`` inside code blocks.
    pre_class : str or None, default None
        Class for the ``<pre>`` wrapping code blocks.
    ul_class : str or None, default None
        Class for ``<ul>``.
    ol_class : str or None, default None
        Class for ``<ol>``.
    li_class : str or None, default None
        Class for ``<li>``.
    table_class : str or None, default None
        Class for ``<table>``.
    th_class : str or None, default None
        Reserved for header cells. The renderer emits every cell as ``<td>``,
        so this is currently never applied.
    td_class : str or None, default None
        Class for ``<td>``.
    hr_class : str or None, default None
        Class for ``<hr />``.
    quote_class : str or None, default "text-orange-500"
        Class for the ``<span>`` wrapping a ``"smart quote"``.

    Examples
    --------
        >>> config = MarkdownConfig(heading_class="text-2xl")
        >>> config.class_attr("heading")
        ' class="text-2xl"'
        >>> config.create_updated(quote_class=None).class_attr("quote")
        ''

    """

    heading_class: str | None = field(default=None, metadata={"help": "CSS class for headings"})
    paragraph_class: str | None = field(default=None, metadata={"help": "CSS class for paragraphs"})
    italic_class: str | None = field(default=None, metadata={"help": "CSS class for <em>"})
    strong_class: str | None = field(default=None, metadata={"help": "CSS class for <strong>"})
    link_class: str | None = field(default=None, metadata={"help": "CSS class for links"})
    blockquote_class: str | None = field(default=None, metadata={"help": "CSS class for block quotes"})
    code_class: str | None = field(default=None, metadata={"help": "CSS class for inline and block <code>"})
    pre_class: str | None = field(default=None, metadata={"help": "CSS class for <pre> around code blocks"})
    ul_class: str | None = field(default=None, metadata={"help": "CSS class for unordered lists"})
    ol_class: str | None = field(default=None, metadata={"help": "CSS class for ordered lists"})
    li_class: str | None = field(default=None, metadata={"help": "CSS class for list items"})
    table_class: str | None = field(default=None, metadata={"help": "CSS class for tables"})
    th_class: str | None = field(default=None, metadata={"help": "Reserved: header cells render as <td>"})
    td_class: str | None = field(default=None, metadata={"help": "CSS class for table cells"})
    hr_class: str | None = field(default=None, metadata={"help": "CSS class for horizontal rules"})
    quote_class: str | None = field(
        default=DEFAULT_QUOTE_CLASS,
        metadata={"help": 'CSS class for the <span> around "smart quotes"'},
    )

    def __post_init__(self) -> None:
        """Validate class values.

        Raises
        ------
        InvalidConfigError
            If a value is not a string or would terminate the attribute early.

        """
        for f in fields(self):
            value = getattr(self, f.name)
            if value is None:
                continue
            if not isinstance(value, str):
                raise InvalidConfigError(
                    f"{f.name} must be a string or None, got {type(value).__name__}",
                    parameter_name=f.name,
                    parameter_value=value,
                )
            if '"' in value:
                raise InvalidConfigError(
                    f"{f.name} must not contain a double quote: {value!r}",
                    parameter_name=f.name,
                    parameter_value=value,
                )

    def class_for(self, kind: ElementKind) -> str | None:
        """Return the configured class for an element kind.

        Raises
        ------
        ValueError
            If ``kind`` is not one of the known element kinds.

        """
        if kind not in ELEMENT_KINDS:
            raise ValueError(f"Unknown element kind: {kind!r}")
        return getattr(self, f"{kind}_class")

    def class_attr(self, kind: ElementKind) -> str:
        """Return `` class="..."`` for ``kind``, or an empty string when unset."""
        return class_attribute(self.class_for(kind))

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> MarkdownConfig:
        """Build a config from a plain mapping, e.g. a decoded config file.

        Keys may be given either as field names (``heading_class``) or as
        bare element kinds (``heading``).

        Raises
        ------
        InvalidConfigError
            If the mapping contains keys that are not config fields.

        """
        field_names = {f.name for f in fields(cls)}
        kwargs: dict[str, Any] = {}
        unknown: list[str] = []
        for key, value in data.items():
            name = key if key in field_names else f"{key}_class"
            if name not in field_names:
                unknown.append(str(key))
                continue
            kwargs[name] = value

        if unknown:
            raise InvalidConfigError(
                f"Unknown markdown config keys: {', '.join(sorted(unknown))}",
                parameter_name="config",
                parameter_value=unknown,
            )
        return cls(**kwargs)
