# Copyright (c) Meta Platforms, Inc. and affiliates.
# All rights reserved.
#
# This source code is licensed under the BSD-style license found in the
# LICENSE file in the root directory of this source tree.

from __future__ import annotations

import re
from pathlib import Path

from setuptools import find_namespace_packages, setup


def _read_version() -> str:
    init_file = Path(__file__).parent.joinpath("src", "lazycell", "__init__.py")

    m = re.search(r'^__version__ = "([^"]+)"$', init_file.read_text(), re.MULTILINE)
    if m is None:
        raise RuntimeError("`__version__` is not found in `lazycell/__init__.py`.")

    return m.group(1)


version = _read_version()

setup(
    name="lazycell",
    version=version,
    description="Thread-safe deferred-initialization container",
    long_description="A generic cell whose value is constructed on first access.",
    long_description_content_type="text/plain",
    license="MIT",
    keywords=["lazy", "memoization"],
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Typing :: Typed",
    ],
    package_dir={"": "src"},
    packages=find_namespace_packages(where="src"),
    package_data={"lazycell": ["py.typed"]},
    zip_safe=False,
    python_requires=">=3.10",
    install_requires=[
        "rich~=13.7",
    ],
    extras_require={
        "test": [
            "pytest>=7.0",
        ],
    },
)
