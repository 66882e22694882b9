"""Common literal values used across bootstrap_hbs.

These constants keep artefact filenames, schema markers, and HTML vocabulary
centralized so the parser, engine, writer, and tests import the same values
without drifting. Intended for internal use within the bootstrap_hbs package.

Examples
--------
>>> from bootstrap_hbs import _constants
>>> "img" in _constants.VOID_ELEMENTS
True
>>> _constants.ARTIFACT_NAMES
('index.hbs', 'fields.json', 'meta.json')
"""

VOID_ELEMENTS = frozenset(
    {
        "area",
        "base",
        "br",
        "col",
        "embed",
        "hr",
        "img",
        "input",
        "link",
        "meta",
        "param",
        "source",
        "track",
        "wbr",
    }
)

DEFAULT_ATTR_EDITABLE = ("href", "src", "alt", "title")
URL_ATTRIBUTES = frozenset({"href", "src"})

TEMPLATE_FILENAME = "index.hbs"
FIELDS_FILENAME = "fields.json"
META_FILENAME = "meta.json"
ARTIFACT_NAMES = (TEMPLATE_FILENAME, FIELDS_FILENAME, META_FILENAME)

FIELDS_SCHEMA_URL = "https://justsite.dev/schemas/fields.schema.json"
SCHEMA_VERSION = "1.0.0"
BOOTSTRAP_VERSION = "5"
DEFAULT_CATEGORY = "components"
DEFAULT_COMPONENT_NAME = "component"
DEFAULT_DESCRIPTION = "Bootstrap 5 component compatible with the JustSite library. "

TEXT_LABEL = "Text"
CLASSES_LABEL_TEMPLATE = "Classes {tag}"
