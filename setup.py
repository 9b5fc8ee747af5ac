#!/usr/bin/env python
import io
import pathlib
import runpy

try:
    from setuptools import find_packages, setup
except ImportError:
    raise ImportError(
        "'setuptools' is required but not installed. To install it, "
        "follow the instructions at "
        "https://pip.pypa.io/en/stable/installing/#installing-with-get-pip-py"
    )


def read(*filenames, **kwargs):
    encoding = kwargs.get("encoding", "utf-8")
    sep = kwargs.get("sep", "\n")
    buf = []
    for filename in filenames:
        with io.open(filename, encoding=encoding) as f:
            buf.append(f.read())
    return sep.join(buf)


root = pathlib.Path(__file__).parent
version = runpy.run_path(str(root / "trigm" / "version.py"))["version"]

install_requires = [
    "numpy>=1.17",
    "scipy>=1.4",
]
tests_require = [
    "pytest>=3.6",
    "pytest-allclose>=1.0.0",
    "pytest-rng>=1.0.0",
]


setup(
    name="trigm",
    version=version,
    author="trigm contributors",
    packages=find_packages(),
    data_files=[("trigm-data", ["trigm-data/trigmrc"])],
    description="Matrix cosine and sine by scaling and squaring",
    long_description=read("README.rst", "CHANGES.rst"),
    zip_safe=False,
    python_requires=">=3.6",
    install_requires=install_requires,
    extras_require={
        "all": tests_require,
        "tests": tests_require,
    },
    classifiers=[  # https://pypi.python.org/pypi?%3Aaction=list_classifiers
        "Development Status :: 4 - Beta",
        "Intended Audience :: Science/Research",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Topic :: Scientific/Engineering :: Mathematics",
    ],
)
