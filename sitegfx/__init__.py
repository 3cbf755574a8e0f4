"""Offline graphics preparation for the marketing site.

Packages:
- sitegfx.image: RGBA rasters, logo pixel rules, decode/encode
- sitegfx.render: placeholder frame drawing
- sitegfx.pipeline: logo batch and frame sequence orchestration
"""
