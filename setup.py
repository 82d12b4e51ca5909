"""Setup configuration for sheetfeed."""

from setuptools import find_packages, setup

setup(
    name="sheetfeed",
    version="0.1.0",
    description="Async client adapter that flattens spreadsheet cell feeds into records",
    python_requires=">=3.11",
    packages=find_packages(where="src", include=["sheetfeed*"]),
    package_dir={"": "src"},
    install_requires=[
        "httpx>=0.27.0",
        "pydantic>=2.6.0",
        "pydantic-settings>=2.1.0",
    ],
    extras_require={
        "dev": [
            "pytest>=8.0.0",
            "pytest-asyncio>=0.23.0",
            "pytest-mock>=3.12.0",
            "respx>=0.21.0",
        ],
    },
)
