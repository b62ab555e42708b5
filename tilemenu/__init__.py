# tilemenu Package
"""
Keyboard-driven grid launcher for Ignis/Wayland.

A declarative menu file (folders and applications, each bound to a key)
is resolved into a validated tree and shown as a full-screen grid of tiles.
"""

__version__ = "0.1.0-dev"
