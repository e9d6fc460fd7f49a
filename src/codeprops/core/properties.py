"""Property information for HTML elements.

hast trees key element attributes by *property* name (``className``,
``htmlFor``, ``dataLine``). Turning them back into attributes needs to know the
canonical attribute name, the React spelling, and how values are encoded
(boolean, numeric, comma or space separated lists). This module provides that
lookup as a small schema object; the transform only depends on the
:class:`PropertySchema` protocol so callers can inject their own table.

PropertyInfo

`property` (`str`)
: Name used as key in ``Element.properties``.

`attribute` (`str`)
: Canonical HTML attribute name (``class``, ``for``, ``aria-hidden``).

`space` (`str | None`)
: Namespace the property belongs to (``html``, ``xml``, ``xlink``, ``xmlns``).
  Properties without a space (``aria-*``, ``data-*``, unknown names) keep their
  attribute spelling in React.

`kind` (`PropertyKind`)
: Value encoding flags.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from enum import Flag, auto
import re
from typing import Protocol, runtime_checkable


class PropertyKind(Flag):
    """How a property value is encoded in HTML."""

    NONE = 0
    BOOLEAN = auto()
    BOOLEANISH = auto()
    OVERLOADED_BOOLEAN = auto()
    NUMBER = auto()
    COMMA_SEPARATED = auto()
    SPACE_SEPARATED = auto()
    COMMA_OR_SPACE_SEPARATED = auto()


BOOLEAN = PropertyKind.BOOLEAN
BOOLEANISH = PropertyKind.BOOLEANISH
OVERLOADED_BOOLEAN = PropertyKind.OVERLOADED_BOOLEAN
NUMBER = PropertyKind.NUMBER
COMMA_SEPARATED = PropertyKind.COMMA_SEPARATED
SPACE_SEPARATED = PropertyKind.SPACE_SEPARATED
COMMA_OR_SPACE_SEPARATED = PropertyKind.COMMA_OR_SPACE_SEPARATED


HAST_TO_REACT: dict[str, str] = {
    "classId": "classID",
    "dataType": "datatype",
    "itemId": "itemID",
    "strokeDashArray": "strokeDasharray",
    "strokeDashOffset": "strokeDashoffset",
    "strokeLineCap": "strokeLinecap",
    "strokeLineJoin": "strokeLinejoin",
    "strokeMiterLimit": "strokeMiterlimit",
    "typeOf": "typeof",
    "xLinkActuate": "xlinkActuate",
    "xLinkArcRole": "xlinkArcrole",
    "xLinkHref": "xlinkHref",
    "xLinkRole": "xlinkRole",
    "xLinkShow": "xlinkShow",
    "xLinkTitle": "xlinkTitle",
    "xLinkType": "xlinkType",
    "xmlnsXLink": "xmlnsXlink",
}
"""Property names React spells differently from hast."""


@dataclass(frozen=True, slots=True)
class PropertyInfo:
    """Lookup result describing one property."""

    property: str
    attribute: str
    space: str | None = None
    kind: PropertyKind = PropertyKind.NONE

    @property
    def boolean(self) -> bool:
        return bool(self.kind & PropertyKind.BOOLEAN)

    @property
    def overloaded_boolean(self) -> bool:
        return bool(self.kind & PropertyKind.OVERLOADED_BOOLEAN)

    @property
    def number(self) -> bool:
        return bool(self.kind & PropertyKind.NUMBER)

    @property
    def comma_separated(self) -> bool:
        return bool(self.kind & PropertyKind.COMMA_SEPARATED)

    @property
    def space_separated(self) -> bool:
        return bool(self.kind & PropertyKind.SPACE_SEPARATED)

    @property
    def comma_or_space_separated(self) -> bool:
        return bool(self.kind & PropertyKind.COMMA_OR_SPACE_SEPARATED)

    # Views matching the ``normalize(name)`` collaborator interface.
    @property
    def canonical_name(self) -> str:
        return self.attribute

    @property
    def is_boolean(self) -> bool:
        return self.boolean

    @property
    def is_comma_separated(self) -> bool:
        return self.comma_separated

    @property
    def react_alias(self) -> str | None:
        """React spelling, or ``None`` when React uses the attribute name."""
        if self.space is None:
            return None
        return HAST_TO_REACT.get(self.property, self.property)


@runtime_checkable
class PropertySchema(Protocol):
    """Capability used by the transform to resolve property names."""

    def find(self, name: str) -> PropertyInfo: ...


_CAP = re.compile(r"[A-Z]")
_DASH = re.compile(r"-[a-z]")
_VALID_DATA = re.compile(r"^data[-\w.:]+$", re.IGNORECASE)


class Schema:
    """Merged property table with case-insensitive lookup."""

    def __init__(self, *spaces: Mapping[str, PropertyInfo]) -> None:
        self.property: dict[str, PropertyInfo] = {}
        self.normal: dict[str, str] = {}
        for space in spaces:
            for name, info in space.items():
                self.property[name] = info
                self.normal[name.lower()] = name
                self.normal[info.attribute.lower()] = name

    def find(self, name: str) -> PropertyInfo:
        """Return the info for a property or attribute name.

        Unknown names resolve to an info whose property and attribute are the
        name itself. ``data*`` names are converted between ``dataFooBar`` and
        ``data-foo-bar`` so both spellings resolve to the same info.
        """
        normal = name.lower()
        if normal in self.normal:
            return self.property[self.normal[normal]]

        if len(normal) > 4 and normal.startswith("data") and _VALID_DATA.match(name):
            if name[4] == "-":
                rest = _DASH.sub(lambda match: match.group(0)[1].upper(), name[5:])
                return PropertyInfo(f"data{rest[:1].upper()}{rest[1:]}", name)
            rest = name[4:]
            attribute = name
            if not _DASH.search(rest):
                dashes = _CAP.sub(lambda match: f"-{match.group(0).lower()}", rest)
                if not dashes.startswith("-"):
                    dashes = f"-{dashes}"
                attribute = f"data{dashes}"
            return PropertyInfo(name, attribute)

        return PropertyInfo(name, name)

    def normalize(self, name: str) -> PropertyInfo:
        """Alias of :meth:`find`; lookups are idempotent."""
        return self.find(name)


def _create(
    space: str | None,
    properties: Mapping[str, PropertyKind | None],
    transform: Callable[[str], str],
) -> dict[str, PropertyInfo]:
    return {
        name: PropertyInfo(
            property=name,
            attribute=transform(name),
            space=space,
            kind=kind or PropertyKind.NONE,
        )
        for name, kind in properties.items()
    }


def _case_insensitive(attributes: Mapping[str, str]) -> Callable[[str], str]:
    def transform(name: str) -> str:
        lowered = name.lower()
        return attributes.get(lowered, lowered)

    return transform


XLINK = _create(
    "xlink",
    dict.fromkeys(
        (
            "xLinkActuate",
            "xLinkArcRole",
            "xLinkHref",
            "xLinkRole",
            "xLinkShow",
            "xLinkTitle",
            "xLinkType",
        )
    ),
    lambda name: f"xlink:{name[5:].lower()}",
)

XML = _create(
    "xml",
    dict.fromkeys(("xmlBase", "xmlLang", "xmlSpace")),
    lambda name: f"xml:{name[3:].lower()}",
)

XMLNS = _create(
    "xmlns",
    dict.fromkeys(("xmlns", "xmlnsXLink")),
    _case_insensitive({"xmlnsxlink": "xmlns:xlink"}),
)

ARIA = _create(
    None,
    {
        "ariaActiveDescendant": None,
        "ariaAtomic": BOOLEANISH,
        "ariaAutoComplete": None,
        "ariaBusy": BOOLEANISH,
        "ariaChecked": BOOLEANISH,
        "ariaColCount": NUMBER,
        "ariaColIndex": NUMBER,
        "ariaColSpan": NUMBER,
        "ariaControls": SPACE_SEPARATED,
        "ariaCurrent": None,
        "ariaDescribedBy": SPACE_SEPARATED,
        "ariaDetails": None,
        "ariaDisabled": BOOLEANISH,
        "ariaDropEffect": SPACE_SEPARATED,
        "ariaErrorMessage": None,
        "ariaExpanded": BOOLEANISH,
        "ariaFlowTo": SPACE_SEPARATED,
        "ariaGrabbed": BOOLEANISH,
        "ariaHasPopup": None,
        "ariaHidden": BOOLEANISH,
        "ariaInvalid": None,
        "ariaKeyShortcuts": None,
        "ariaLabel": None,
        "ariaLabelledBy": SPACE_SEPARATED,
        "ariaLevel": NUMBER,
        "ariaLive": None,
        "ariaModal": BOOLEANISH,
        "ariaMultiLine": BOOLEANISH,
        "ariaMultiSelectable": BOOLEANISH,
        "ariaOrientation": None,
        "ariaOwns": SPACE_SEPARATED,
        "ariaPlaceholder": None,
        "ariaPosInSet": NUMBER,
        "ariaPressed": BOOLEANISH,
        "ariaReadOnly": BOOLEANISH,
        "ariaRelevant": None,
        "ariaRequired": BOOLEANISH,
        "ariaRoleDescription": SPACE_SEPARATED,
        "ariaRowCount": NUMBER,
        "ariaRowIndex": NUMBER,
        "ariaRowSpan": NUMBER,
        "ariaSelected": BOOLEANISH,
        "ariaSetSize": NUMBER,
        "ariaSort": None,
        "ariaValueMax": NUMBER,
        "ariaValueMin": NUMBER,
        "ariaValueNow": NUMBER,
        "ariaValueText": None,
        "role": None,
    },
    lambda name: name if name == "role" else f"aria-{name[4:].lower()}",
)

HTML = _create(
    "html",
    {
        "abbr": None,
        "accept": COMMA_SEPARATED,
        "acceptCharset": SPACE_SEPARATED,
        "accessKey": SPACE_SEPARATED,
        "action": None,
        "allow": None,
        "allowFullScreen": BOOLEAN,
        "allowPaymentRequest": BOOLEAN,
        "allowUserMedia": BOOLEAN,
        "alt": None,
        "as": None,
        "async": BOOLEAN,
        "autoCapitalize": None,
        "autoComplete": SPACE_SEPARATED,
        "autoFocus": BOOLEAN,
        "autoPlay": BOOLEAN,
        "blocking": SPACE_SEPARATED,
        "capture": None,
        "charSet": None,
        "checked": BOOLEAN,
        "cite": None,
        "className": SPACE_SEPARATED,
        "cols": NUMBER,
        "colSpan": None,
        "content": None,
        "contentEditable": BOOLEANISH,
        "controls": BOOLEAN,
        "controlsList": SPACE_SEPARATED,
        "coords": NUMBER | COMMA_SEPARATED,
        "crossOrigin": None,
        "data": None,
        "dateTime": None,
        "decoding": None,
        "default": BOOLEAN,
        "defer": BOOLEAN,
        "dir": None,
        "dirName": None,
        "disabled": BOOLEAN,
        "download": OVERLOADED_BOOLEAN,
        "draggable": BOOLEANISH,
        "encType": None,
        "enterKeyHint": None,
        "fetchPriority": None,
        "form": None,
        "formAction": None,
        "formEncType": None,
        "formMethod": None,
        "formNoValidate": BOOLEAN,
        "formTarget": None,
        "headers": SPACE_SEPARATED,
        "height": NUMBER,
        "hidden": BOOLEAN,
        "high": NUMBER,
        "href": None,
        "hrefLang": None,
        "htmlFor": SPACE_SEPARATED,
        "httpEquiv": SPACE_SEPARATED,
        "id": None,
        "imageSizes": None,
        "imageSrcSet": None,
        "inert": BOOLEAN,
        "inputMode": None,
        "integrity": None,
        "is": None,
        "isMap": BOOLEAN,
        "itemId": None,
        "itemProp": SPACE_SEPARATED,
        "itemRef": SPACE_SEPARATED,
        "itemScope": BOOLEAN,
        "itemType": SPACE_SEPARATED,
        "kind": None,
        "label": None,
        "lang": None,
        "language": None,
        "list": None,
        "loading": None,
        "loop": BOOLEAN,
        "low": NUMBER,
        "manifest": None,
        "max": None,
        "maxLength": NUMBER,
        "media": None,
        "method": None,
        "min": None,
        "minLength": NUMBER,
        "multiple": BOOLEAN,
        "muted": BOOLEAN,
        "name": None,
        "nonce": None,
        "noModule": BOOLEAN,
        "noValidate": BOOLEAN,
        "open": BOOLEAN,
        "optimum": NUMBER,
        "pattern": None,
        "ping": SPACE_SEPARATED,
        "placeholder": None,
        "playsInline": BOOLEAN,
        "popover": None,
        "popoverTarget": None,
        "popoverTargetAction": None,
        "poster": None,
        "preload": None,
        "readOnly": BOOLEAN,
        "referrerPolicy": None,
        "rel": SPACE_SEPARATED,
        "required": BOOLEAN,
        "reversed": BOOLEAN,
        "rows": NUMBER,
        "rowSpan": NUMBER,
        "sandbox": SPACE_SEPARATED,
        "scope": None,
        "scoped": BOOLEAN,
        "seamless": BOOLEAN,
        "selected": BOOLEAN,
        "shape": None,
        "size": NUMBER,
        "sizes": None,
        "slot": None,
        "span": NUMBER,
        "spellCheck": BOOLEANISH,
        "src": None,
        "srcDoc": None,
        "srcLang": None,
        "srcSet": None,
        "start": NUMBER,
        "step": None,
        "style": None,
        "tabIndex": NUMBER,
        "target": None,
        "title": None,
        "translate": None,
        "type": None,
        "typeMustMatch": BOOLEAN,
        "useMap": None,
        "value": BOOLEANISH,
        "width": NUMBER,
        "wrap": None,
        # Legacy presentational attributes.
        "align": None,
        "bgColor": None,
        "border": NUMBER,
        "cellPadding": None,
        "cellSpacing": None,
        "classId": None,
        "color": None,
        "compact": BOOLEAN,
        "frameBorder": None,
        "marginHeight": NUMBER,
        "marginWidth": NUMBER,
        "noWrap": BOOLEAN,
        "scrolling": BOOLEANISH,
        "vAlign": None,
    },
    _case_insensitive(
        {
            "acceptcharset": "accept-charset",
            "classname": "class",
            "htmlfor": "for",
            "httpequiv": "http-equiv",
        }
    ),
)


html = Schema(XML, XLINK, XMLNS, ARIA, HTML)
"""Default schema for HTML documents."""


def normalize(name: str, schema: PropertySchema = html) -> PropertyInfo:
    """Resolve *name* (property or attribute spelling) against *schema*."""
    return schema.find(name)


__all__ = [
    "HAST_TO_REACT",
    "PropertyInfo",
    "PropertyKind",
    "PropertySchema",
    "Schema",
    "html",
    "normalize",
]
