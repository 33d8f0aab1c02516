"""
ContextCore - export Unreal Blueprints as readable graph dumps and _meta.json.
"""

__version__ = "0.2.0"
