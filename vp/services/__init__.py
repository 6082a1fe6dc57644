"""Application services for the vendor CLI.

Services implement use cases on top of the API client (api/) and core
types (core/). They never import the CLI layer.
"""
