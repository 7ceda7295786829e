[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "envoyprops"
version = "0.1.0"
description = "Typed accessors and binary codecs for Envoy and Istio host properties"
requires-python = ">=3.10"
dependencies = []
keywords = ["envoy", "istio", "proxy-wasm", "properties", "attributes", "service-mesh"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Internet :: Proxy Servers",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["envoyprops"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
