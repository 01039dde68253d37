"""
The VIEW layer: Qt widgets and the PyVista viewport.
"""
