from __future__ import annotations

from setuptools import find_packages, setup  # type: ignore


setup(
    name="pestledger",
    version="0.1.0",
    description="Facility and technician compliance registries for pest-control operations",
    python_requires=">=3.10",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    install_requires=[
        "fastapi>=0.110",
        "uvicorn>=0.29",
        "httpx>=0.27",
    ],
    extras_require={
        "test": [
            "pytest>=8",
        ],
    },
    entry_points={
        "console_scripts": [
            "pestledger=pestledger.__main__:main",
        ],
    },
)
