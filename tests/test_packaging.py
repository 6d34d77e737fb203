import os
import re

import termmask


ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))


def test_files_used_by_setup_exist():
    with open(os.path.join(ROOT, "setup.py"), "rb") as fh:
        setup_text = fh.read().decode()
    assert 'data_files=[("", ["LICENSE"])]' in setup_text
    assert 'license="MIT"' in setup_text
    for fname in ["LICENSE", "README.md"]:
        assert os.path.isfile(os.path.join(ROOT, fname)), fname

    with open(os.path.join(ROOT, "LICENSE"), "rb") as fh:
        assert fh.read().decode().startswith("MIT License")


def test_version():
    assert re.match(r"^\d+\.\d+\.\d+$", termmask.__version__)
    assert termmask.version_info == tuple(map(int, termmask.__version__.split(".")))
