"""
rosepine-zellij - Rose Pine themes for the Zellij terminal multiplexer.
"""

from setuptools import setup, find_packages
from pathlib import Path

readme = Path(__file__).parent / "README.md"
long_description = readme.read_text() if readme.exists() else ""

setup(
    name="rosepine-zellij",
    version="0.1.0",
    description="Install the Rose Pine theme variants for Zellij and select one",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(),
    include_package_data=True,
    package_data={
        "rosepine_zellij.theme": ["*.yaml"],
    },
    python_requires=">=3.10",
    install_requires=[
        "click>=8.1.0",
        "requests>=2.28.0",
        "PyYAML>=6.0",
    ],
    extras_require={
        "dev": [
            "pytest>=7.0.0",
            "black>=23.0.0",
            "mypy>=1.0.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "rosepine-zellij=rosepine_zellij.cli:main",
        ],
    },
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Environment :: Console",
        "License :: OSI Approved :: MIT License",
        "Operating System :: POSIX",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Topic :: Terminals",
    ],
    keywords="zellij theme rose-pine terminal multiplexer",
)
