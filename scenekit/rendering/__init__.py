"""pygfx-backed rendering modules.

Submodules guard their pygfx and rendercanvas imports; a missing dependency
surfaces when a renderer or primitive is created, not at import time.
"""
