"""
HTTP routers of the catalog API, mounted by ``catalog_http_api.main``.
"""
