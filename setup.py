"""
Express Starter Setup Configuration

Scaffold Express + TypeScript projects from packaged templates.
"""

from setuptools import setup, find_packages
from pathlib import Path

# Read README for long description
readme_file = Path(__file__).parent / "README.md"
long_description = readme_file.read_text(encoding="utf-8") if readme_file.exists() else ""

setup(
    name="express-starter",
    version="0.1.0",

    description="Scaffold Express + TypeScript projects (basic or advance, SQLite or Neon Postgres)",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(include=["express_starter", "express_starter.*"]),
    include_package_data=True,
    package_data={
        "express_starter": [
            "templates/**/*",
            "snippets/*.j2",
        ],
    },
    install_requires=[
        "click>=8.0.0",
        "questionary>=2.0.0",
        "jinja2>=3.0.0",
        "python-dotenv>=1.0.0",
    ],
    extras_require={
        "dev": [
            "pytest>=7.0.0",
            "black>=23.0.0",
            "ruff>=0.1.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "express-starter=express_starter.cli.main:cli",
            "create-express-starter=express_starter.cli.main:create_app",
        ],
    },
    python_requires=">=3.8",
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Environment :: Console",
    ],
    keywords="express typescript scaffolding starter template cli",
)
