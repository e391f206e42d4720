from setuptools import find_packages, setup

# Basic metadata
VERSION = "0.1.0"

INSTALL_REQUIRES = [
    "pydantic>=2.0",
    "pydantic-settings>=2.0",
    "python-dotenv>=1.0",
    "pyyaml>=6.0",
    "rich>=13.0",
    "typer>=0.9",
]

TEST_REQUIRES = [
    "pytest>=7.0",
]


setup(
    name="savefile",
    version=VERSION,
    description="Save payloads into a shared folder under collision-free, numbered filenames.",
    python_requires=">=3.10",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    install_requires=INSTALL_REQUIRES,
    extras_require={"test": TEST_REQUIRES},
    entry_points={
        "console_scripts": [
            "savefile=savefile.cli.main:app",
        ],
    },
)
