"""Platform implementations for the catalog pipeline.

This package contains self-contained platform modules that provide
source and transformer implementations for different kinds of asset
input (a directory on disk, a bundler glob result).

Each platform module auto-registers itself with the SourceRegistry
when imported.
"""

# Platform modules are imported dynamically by SourceRegistry.discover_platforms()
