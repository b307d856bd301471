"""
Setup script for the RWA Settlement ROI Simulator.

Usage:
    pip install -e .  # Development install (editable)
    pip install .     # Production install
"""

from setuptools import setup, find_packages
from pathlib import Path

# Read README for long description
readme_file = Path(__file__).parent / "README.md"
long_description = readme_file.read_text() if readme_file.exists() else ""

setup(
    name="rwa-roi-simulator",
    version="1.0.0",
    description="Projected ROI of migrating real-world assets to a faster-settlement network",
    long_description=long_description,
    long_description_content_type="text/markdown",
    author="RWA ROI Simulator Contributors",
    python_requires=">=3.9",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    package_data={
        "rwa_roi": ["config/defaults.yaml"],
    },
    include_package_data=True,
    install_requires=[
        "pydantic>=2.5.0",
        "numpy>=1.24.0",
        "pandas>=2.0.0",
        "plotly>=5.17.0",
        "pyyaml>=6.0",
    ],
    extras_require={
        "dev": [
            "pytest>=7.0.0",
            "pytest-cov>=4.0.0",
            "black>=23.0.0",
            "ruff>=0.1.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "rwa-roi=rwa_roi.cli:main",
        ],
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Financial and Insurance Industry",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Topic :: Office/Business :: Financial",
    ],
)
