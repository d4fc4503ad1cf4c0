import setuptools
from pathlib import Path

with Path("README.md").open(encoding="utf-8") as fh:
    long_description = fh.read()

test_dependencies = ["pytest>=7.0"]

setuptools.setup(
    name="utxopack",
    version="0.1.0",
    description="Circle-packed bubble graphs of Bitcoin UTXO sets",
    long_description=long_description,
    long_description_content_type="text/markdown",
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
    install_requires=[
        "numpy>=1.20.0",
        "pandas>=1.3.0",
        "matplotlib>=3.3.0",
    ],
    extras_require={"test": test_dependencies},
    packages=setuptools.find_packages(),
    entry_points={
        "console_scripts": [
            "utxopack=utxopack.__main__:main",
        ],
    },
    python_requires=">=3.8",
)
