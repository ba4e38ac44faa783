"""
Setup configuration for the restscribe package.
"""

from setuptools import setup, find_packages

with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

with open("requirements.txt", "r", encoding="utf-8") as fh:
    requirements = [line.strip() for line in fh if line.strip() and not line.startswith("#")]

setup(
    name="restscribe",
    version="0.1.0",
    author="restscribe Contributors",
    author_email="contributors@restscribe.example.com",
    description="API parameter documentation extracted from form request validation rules",
    long_description=long_description,
    long_description_content_type="text/markdown",
    url="https://github.com/yourusername/restscribe",
    packages=find_packages(include=["restscribe", "restscribe.*"]),
    package_data={"restscribe": ["templates/*.j2"]},
    include_package_data=True,
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "Topic :: Software Development :: Documentation",
        "Topic :: Internet :: WWW/HTTP",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
    ],
    python_requires=">=3.10",
    install_requires=requirements,
    extras_require={
        "test": ["pytest>=6.0"],
        "dev": [
            "pytest>=6.0",
            "pytest-cov",
            "ruff",
            "mypy",
        ],
    },
    project_urls={
        "Bug Reports": "https://github.com/yourusername/restscribe/issues",
        "Source": "https://github.com/yourusername/restscribe",
    },
)
