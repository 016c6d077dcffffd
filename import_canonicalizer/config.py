"""Configuration lookup for import-canonicalizer.

The only setting is the list of required imports seeded into every file
before normalization.
"""

import logging
import re
import tomllib
from pathlib import Path
from typing import List

LOG = logging.getLogger(__name__)

REQUIRED_IMPORT = "from __future__ import annotations"
TOOL_NAME = "import-canonicalizer"


def read_required_imports(root: str) -> List[str]:
    """Detect required imports from pyproject/setup.cfg/tox.ini or use the default."""
    root = Path(root)

    toml_path = root / "pyproject.toml"
    if toml_path.exists():
        try:
            with open(toml_path, "rb") as f:
                data = tomllib.load(f)
            value = data.get("tool", {}).get(TOOL_NAME, {}).get("required-imports")
            if value is not None:
                if isinstance(value, str):
                    value = [value]
                return [str(v).strip() for v in value if str(v).strip()]
        except (OSError, tomllib.TOMLDecodeError) as exc:
            LOG.debug("Ignoring %s: %s", toml_path, exc)

    for cfg_name in ("setup.cfg", "tox.ini"):
        cfg = root / cfg_name
        if not cfg.exists():
            continue
        try:
            text = cfg.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            LOG.debug("Ignoring %s: %s", cfg, exc)
            continue
        for line in text.splitlines():
            m = re.match(r"required-imports\s*=\s*(.*)$", line)
            if m:
                return [s.strip() for s in m.group(1).split(";") if s.strip()]

    return [REQUIRED_IMPORT]
