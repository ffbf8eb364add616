import pathlib
import re
import sys

import setuptools


root_dir = pathlib.Path(__file__).parent

if sys.version_info[:2] < (3, 9):
    raise Exception("rfcuri requires Python >= 3.9.")

description = "Immutable RFC 3986 URI values for HTTP libraries"

# Read the version without importing the package.
version_file = root_dir / "src" / "rfcuri" / "version.py"
version_module = version_file.read_text(encoding="utf-8")
version = re.search(r'^version = "(.*)"$', version_module, re.M).group(1)

setuptools.setup(
    name="rfcuri",
    version=version,
    description=description,
    long_description=description,
    license="BSD",
    python_requires=">=3.9",
    package_dir={"": "src"},
    packages=["rfcuri"],
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: BSD License",
        "Operating System :: OS Independent",
        "Programming Language :: Python",
        "Programming Language :: Python :: 3",
        "Topic :: Internet :: WWW/HTTP",
    ],
)
