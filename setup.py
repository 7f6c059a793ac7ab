""" urhdkey build script for setuptools.

"""

from setuptools import find_packages, setup  # type: ignore

import urhdkey

with open("README.md", "r", encoding="ascii") as file_:
    longdescription = file_.read()

setup(
    name=urhdkey.name,
    version=urhdkey.__version__,
    license=urhdkey.__license__,
    author=urhdkey.__author__,
    author_email=urhdkey.__author_email__,
    description="BIP32 extended public key export as crypto-hdkey UR",
    long_description=longdescription,
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=["tests", "tests.*"]),
    package_data={"urhdkey": ["_data/*.json"]},
    include_package_data=True,
    install_requires=["mnemonic", "pycryptodome", "qrcode[pil]"],
    extras_require={
        "secp256k1": ["btclib_libsecp256k1"],
        "test": ["pytest"],
    },
    entry_points={"console_scripts": ["urhdkey=urhdkey.cli:main"]},
    keywords=(
        "bitcoin ethereum bip32 bip39 hd-wallet cbor bytewords "
        "uniform-resources crypto-hdkey air-gapped qr-code"
    ),
    python_requires=">=3.8",
    classifiers=[
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Natural Language :: English",
        "Operating System :: OS Independent",
        "Topic :: Security :: Cryptography",
        "Topic :: Software Development :: Libraries :: Python Modules",
    ],
)
