""" stealthlib build script for setuptools.

"""

from setuptools import find_packages, setup  # type: ignore

import stealthlib

with open("README.md", "r", encoding="ascii") as file_:
    longdescription = file_.read()

setup(
    name=stealthlib.name,
    version=stealthlib.__version__,
    license=stealthlib.__license__,
    author=stealthlib.__author__,
    author_email=stealthlib.__author_email__,
    description="A library for EIP-5564-style stealth addresses on secp256k1",
    long_description=longdescription,
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=["tests", "tests.*"]),
    include_package_data=True,
    install_requires=[
        "btclib>=2023.7.12,<2024",
        "dataclasses-json",
        "pycryptodome",
    ],
    extras_require={
        "secp256k1": ["btclib_libsecp256k1"],
        "test": ["pytest", "coincurve"],
    },
    keywords=(
        "stealth-address eip-5564 ecdh secp256k1 view-tag keccak "
        "elliptic-curves cryptography privacy"
    ),
    python_requires=">=3.8",
    classifiers=[
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Natural Language :: English",
        "Operating System :: OS Independent",
        "Topic :: Security :: Cryptography",
        "Topic :: Software Development :: Libraries :: Python Modules",
    ],
)
