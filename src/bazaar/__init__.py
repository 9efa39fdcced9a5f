"""
Bazaar: a small user-management API with a static navigation shell.

Layers (leaf-first): models -> repositories -> services -> api, with the
frontend shell under `bazaar.web`. Build the ASGI app with
`bazaar.main.create_app()`.
"""
