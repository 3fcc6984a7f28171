"""JSON glyph catalog files.

File layout::

    {
      "version": 1,
      "glyphs": [
        {"glyph": "T", "path": {"segments": [...]}, "strokes": [...]}
      ]
    }
"""

import json
from pathlib import Path

from glyphtrace.catalog import GlyphCatalog, GlyphDefinition
from glyphtrace.exceptions import CatalogLoadError, GlyphTraceError

CATALOG_VERSION = 1


def load_catalog(path: Path) -> GlyphCatalog:
    """Load a glyph catalog from a JSON file.

    Args:
        path: Path to the catalog file

    Returns:
        GlyphCatalog with every definition in the file

    Raises:
        CatalogLoadError: If the file is missing, is not valid JSON, or holds
            malformed glyph definitions
    """
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except OSError as e:
        raise CatalogLoadError(str(path), str(e)) from e
    except json.JSONDecodeError as e:
        raise CatalogLoadError(str(path), f"invalid JSON: {e}") from e

    if not isinstance(data, dict) or "glyphs" not in data:
        raise CatalogLoadError(str(path), "missing 'glyphs' list")

    version = data.get("version", CATALOG_VERSION)
    if version != CATALOG_VERSION:
        raise CatalogLoadError(str(path), f"unsupported version {version}")

    try:
        definitions = [GlyphDefinition.from_dict(item) for item in data["glyphs"]]
    except (AttributeError, KeyError, TypeError, ValueError, GlyphTraceError) as e:
        raise CatalogLoadError(str(path), f"malformed glyph definition: {e}") from e

    return GlyphCatalog(definitions)


def dump_catalog(catalog: GlyphCatalog, path: Path) -> None:
    """Write a glyph catalog to a JSON file.

    Args:
        catalog: Catalog to write
        path: Destination file
    """
    data = {
        "version": CATALOG_VERSION,
        "glyphs": [definition.to_dict() for definition in catalog],
    }
    path.write_text(json.dumps(data, indent=2), encoding="utf-8")
