# tilemenu Panels Package
"""
GTK/Ignis presentation of a resolved menu.

grid.MenuPanel needs a running Ignis app; layout holds the GTK-free helpers.
"""
