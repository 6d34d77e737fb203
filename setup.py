import re

from setuptools import find_packages, setup


with open("termmask/__init__.py", "rb") as fh:
    init_text = fh.read().decode()
    VERSION = re.search(r"__version__ = \"(.*?)\"", init_text).group(1)

setup(
    name="termmask",
    version=VERSION,
    packages=find_packages(
        exclude=["tests", "tests.*", "examples", "examples.*"]
    ),
    python_requires=">=3.6.0",
    install_requires=[],
    extras_require={
        "tests": ["pytest"],
    },
    license="MIT",
    description="Read passwords and other secrets from the terminal, echoing a mask character.",
    long_description=open("README.md").read(),
    long_description_content_type="text/markdown",
    author="The termmask contributors",
    data_files=[("", ["LICENSE"])],
    zip_safe=True,
    entry_points={
        "console_scripts": [
            "termmask = termmask:cli",
        ],
    },
)
