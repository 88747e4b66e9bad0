import os

from setuptools import find_packages, setup

README = os.path.join(os.path.dirname(__file__), "README.md")


def readme() -> str:
    with open(README, encoding="utf-8") as f:
        return f.read()


setup(
    name="markdown_udl_builder",
    version="2.0.0",
    description="Build Notepad++ Markdown UDL files from JSON theme configs and a Jinja2 template",
    long_description=readme(),
    long_description_content_type="text/markdown",
    classifiers=[
        "Development Status :: 4 - Beta",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.12",
        "Topic :: Software Development :: Code Generators",
        "Topic :: Text Editors",
        "Intended Audience :: Developers",
    ],
    keywords="notepad++ udl markdown syntax highlighting theme jinja2 generator",
    license="MIT",
    packages=find_packages(),
    python_requires=">=3.11",
    install_requires=[
        "click>=8.0.0",
        "jinja2>=3.0.0",
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
            "build_udl=udl_builder.build_udl:build_udl",
        ],
    },
    include_package_data=True,
    package_data={
        "udl_builder": ["templates/*.jinja2"],
    },
    zip_safe=False,
)
