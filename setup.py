"""Setup script for cla, the terminal calendar renderer."""

from pathlib import Path

from setuptools import find_packages, setup

# Read the README file
readme_file = Path(__file__).parent / "README.md"
long_description = readme_file.read_text(encoding="utf-8") if readme_file.exists() else ""

# Read requirements, separating test tooling into the dev extra
requirements_file = Path(__file__).parent / "requirements.txt"
requirements = []
dev_requirements = []

if requirements_file.exists():
    for line in requirements_file.read_text().strip().split("\n"):
        line = line.strip()
        # Skip empty lines and comments
        if not line or line.startswith("#"):
            continue

        if "pytest" in line:
            dev_requirements.append(line)
        else:
            requirements.append(line)

setup(
    name="cla",
    version="0.2.0",
    description="Terminal calendar renderer with multi-column month layout",
    long_description=long_description,
    long_description_content_type="text/markdown",
    author="cla contributors",
    # Package configuration
    packages=find_packages(include=["cla", "cla.*"]),
    include_package_data=True,
    # Dependencies
    install_requires=requirements,
    extras_require={
        "dev": dev_requirements,
        "test": dev_requirements,
    },
    python_requires=">=3.9",
    classifiers=[
        "Development Status :: 4 - Beta",
        "Environment :: Console",
        "Intended Audience :: End Users/Desktop",
        "License :: OSI Approved :: MIT License",
        "Operating System :: POSIX :: Linux",
        "Operating System :: MacOS",
        "Programming Language :: Python :: 3",
        "Topic :: Office/Business :: Scheduling",
        "Topic :: Terminals",
    ],
    keywords="calendar cal terminal cli",
    # Entry points
    entry_points={
        "console_scripts": [
            "cla=cla.__main__:main",
        ],
    },
    package_data={
        "cla": ["py.typed"],
    },
    zip_safe=False,
)
