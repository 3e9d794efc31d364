"""
catalog_http_api
----------------

HTTP API for the translation catalog: locale-keyed strings labelled with
tags, exposed through CRUD, filtered listing and a cache-friendly bulk
export consumed by client applications.

This package exposes:

- ``__version__``: the installed distribution version.

The ASGI application lives in ``catalog_http_api.main`` (``main:app``,
``main:create_app``), suitable for uvicorn entrypoints like
``catalog_http_api.main:app``.
"""

from importlib import metadata as _metadata

try:
    __version__: str = _metadata.version("translation-catalog")
except _metadata.PackageNotFoundError:  # When running from source tree
    __version__ = "0.0.0"


__all__ = ["__version__"]
