[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ontoenrich"
version = "1.0.0"
description = "Document parsing, ontology modelling and QuickStatement conversion tools for building ontologies from text"
requires-python = ">=3.10"
keywords = ["ontology", "quickstatements", "rdf", "owl", "document-parsing", "metadata"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Information Analysis",
    "Topic :: Text Processing",
]
dependencies = [
    "pyyaml",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["ontoenrich"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
