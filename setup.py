import ast
import re

from setuptools import find_packages, setup

_version_re = re.compile(r"__version__\s+=\s+(.*)")

with open("graphene_bookshelf/__init__.py", "rb") as f:
    version = str(
        ast.literal_eval(_version_re.search(f.read().decode("utf-8")).group(1))
    )

requirements = [
    "graphene>=3.0",
    "aiodataloader>=0.2.0,<1.0",
]

tests_require = [
    "pytest>=7.0",
    "pytest-asyncio>=0.18.3",
    "pytest-cov>=2.11.0",
]

setup(
    name="graphene-bookshelf",
    version=version,
    description="GraphQL API for authors and books over an in-memory store, built on Graphene",
    long_description=open("README.md").read(),
    long_description_content_type="text/markdown",
    license="MIT",
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "Topic :: Software Development :: Libraries",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Programming Language :: Python :: 3.13",
    ],
    keywords="api graphql graphene books authors",
    packages=find_packages(exclude=["tests"]),
    install_requires=requirements,
    extras_require={
        "dev": [
            "flake8>=4.0.0",
        ],
        "test": tests_require,
    },
    tests_require=tests_require,
)
