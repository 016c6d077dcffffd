import ast

import pytest

import import_canonicalizer
from import_canonicalizer.core import canonicalize
from import_canonicalizer.core import canonicalize_bytes
from import_canonicalizer.core import InvalidSourceError
from import_canonicalizer.core import iter_python_files
from import_canonicalizer.core import process_file
from import_canonicalizer.core import seed_imports
from import_canonicalizer.model import RelativeImport


EXAMPLE = 'import os\nimport sys, re\nfrom . import a, b\nfrom . import c\n\nprint("hi")\n'


def test_canonicalize_example():
    assert canonicalize(EXAMPLE) == (
        "from __future__ import annotations\n"
        "import os\n"
        "import re\n"
        "import sys\n"
        "from . import a, b, c\n"
        "\n"
        "\n"
        'print("hi")\n'
    )


def test_canonicalize_without_imports():
    assert canonicalize("x = 1\n") == "from __future__ import annotations\n\n\nx = 1\n"


@pytest.mark.parametrize("source", [
    EXAMPLE,
    "import os  # os\nfrom .m import *\n\ndef f():\n    pass\n",
    "from __future__ import division\nimport b, a as z\nfrom .. import x\nfrom . import y\n",
])
def test_canonicalize_is_idempotent(source):
    once = canonicalize(source)
    assert canonicalize(once) == once


def test_seed_merges_with_existing_future_import():
    assert canonicalize("from __future__ import division\nimport os\n") == (
        "from __future__ import annotations, division\nimport os\n\n\n"
    )


def test_custom_required_imports():
    assert canonicalize("import os\n", required=["import sys"]) == "import os\nimport sys\n\n\n"
    assert canonicalize("import os\n", required=[]) == "import os\n\n\n"


def test_seed_imports():
    (seed,) = seed_imports()
    assert isinstance(seed, RelativeImport)
    assert seed.origin.is_future()


@pytest.mark.parametrize("statement", ["x = 1", "import a\nimport b", "import a; x"])
def test_seed_imports_rejects_non_imports(statement):
    with pytest.raises(ValueError):
        seed_imports([statement])


def test_canonicalize_bytes_rejects_invalid_utf8():
    with pytest.raises(InvalidSourceError):
        canonicalize_bytes(b"import os\n\xff\xfe\n")


def test_process_file(tmp_path):
    tmp_file = tmp_path / "f.py"
    tmp_file.write_text("import sys, os\n\nmain()\n")

    assert process_file(str(tmp_file))
    assert tmp_file.read_text() == "import sys, os\n\nmain()\n"

    assert process_file(str(tmp_file), apply=True)
    assert tmp_file.read_text() == (
        "from __future__ import annotations\nimport os\nimport sys\n\n\nmain()\n"
    )

    assert not process_file(str(tmp_file), apply=True)


def test_iter_python_files(tmp_path):
    (tmp_path / "a.py").write_text("")
    (tmp_path / "skip").mkdir()
    (tmp_path / "skip" / "b.py").write_text("")
    (tmp_path / "notes.txt").write_text("")
    found = [p.name for p in iter_python_files(str(tmp_path), ignore=["skip"])]
    assert found == ["a.py"]


def test_public_api():
    imports, end = import_canonicalizer.parse(b"import os\n")
    import_canonicalizer.combine_relative_imports(imports)
    import_canonicalizer.separate_absolute_imports(imports)
    import_canonicalizer.sort_imports(imports)
    assert [import_canonicalizer.render_import(i) for i in imports] == ["import os"]
    assert end == len(b"import os\n")


@pytest.mark.parametrize("source", [
    "from m import a, \\\n    b\nx = 1\n",
    "import os, \\\n    sys\n",
])
def test_continuation_lines_stay_valid_python(source):
    result = canonicalize(source)
    assert result == "from __future__ import annotations\n\n\n" + source
    ast.parse(result)
