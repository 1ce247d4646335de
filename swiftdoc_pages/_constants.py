"""Common literal values used across swiftdoc_pages.

These constants keep route names, filenames, and character tables centralized
so the classifier, planner, renderer, and tests import the same values without
drifting. Intended for internal use within the swiftdoc_pages package.

Examples
--------
>>> from swiftdoc_pages import _constants
>>> _constants.HOME_ROUTE
'Home'
>>> "_View" in _constants.PROTECTED_SUFFIXES
True
"""

GENERATOR_NAME = "swift-doc"
GENERATOR_URL = "https://github.com/SwiftDocOrg/swift-doc"
GENERATOR_VERSION = "1.0.0"

HOME_ROUTE = "Home"
SIDEBAR_ROUTE = "_Sidebar"
FOOTER_ROUTE = "_Footer"
RESERVED_ROUTES = frozenset({HOME_ROUTE, SIDEBAR_ROUTE, FOOTER_ROUTE})

# Windows reserved filename characters.
RESERVED_CHARACTERS = frozenset('<>:"/\\|?*')

# Type names that keep their underscores after route encoding.
PROTECTED_SUFFIXES = (
    "_Button",
    "_View",
    "_Control",
    "_CollectionReusableView",
    "_CollectionViewCell",
    "_NavigationBar",
    "_ViewController",
)

COMMONMARK_HOME_FILENAME = "Home.md"
HTML_INDEX_FILENAME = "index.html"
STYLESHEET_FILENAME = "all.css"

MANIFEST_PATTERNS = ("*.symbols.yaml", "*.symbols.yml", "*.symbols.json")
